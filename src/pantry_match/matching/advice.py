"""LLM-phrased advice for staple variants.

Only called for ingredients that :func:`check_variant` flagged. The model
decides whether the staple the user owns is an acceptable stand-in and
phrases the message shown to the user.
"""

import json
import logging
import re
from typing import Callable, Dict, Optional, Sequence, Tuple

import boto3

from .models import Recipe, VariantAdvice

logger = logging.getLogger(__name__)

DEFAULT_MODEL_ID = "anthropic.claude-3-5-haiku-20241022-v1:0"
DEFAULT_REGION = "us-east-1"

JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


class BedrockTextGenerator:
    """Callable that sends a prompt to an Anthropic model on AWS Bedrock.

    Attributes:
        model_id (str): The Bedrock model ID.
        max_tokens (int): Maximum tokens in the reply.
        client: boto3 ``bedrock-runtime`` client.
    """

    def __init__(
        self,
        model_id: str = DEFAULT_MODEL_ID,
        region_name: str = DEFAULT_REGION,
        max_tokens: int = 1000,
        client=None,
    ):
        self.model_id = model_id
        self.max_tokens = max_tokens
        self.client = client or boto3.client("bedrock-runtime", region_name=region_name)

    def __call__(self, prompt: str) -> str:
        body = json.dumps(
            {
                "anthropic_version": "bedrock-2023-05-31",
                "max_tokens": self.max_tokens,
                "messages": [
                    {"role": "user", "content": [{"type": "text", "text": prompt}]}
                ],
            }
        )
        response = self.client.invoke_model(
            body=body,
            modelId=self.model_id,
            accept="application/json",
            contentType="application/json",
        )
        response_body = json.loads(response.get("body").read())
        return response_body.get("content", [{}])[0].get("text", "")


def build_variant_prompt(
    ingredient: str, staples: Sequence[str], recipe: Optional[Recipe] = None
) -> str:
    """Build the prompt asking whether a staple can replace an ingredient."""
    title = recipe.title if recipe else "onbekend recept"
    ingredients = ""
    steps = ""
    if recipe:
        parts = []
        for ing in recipe.ingredients:
            quantity = " ".join(str(q) for q in (ing.amount, ing.unit) if q is not None)
            parts.append(f"{ing.name} ({quantity})" if quantity else ing.name)
        ingredients = ", ".join(parts)
        steps = "\n".join(recipe.steps)

    return f"""
You are a culinary assistant. A user is cooking the recipe "{title}".

The recipe asks for: "{ingredient}"

The user has these pantry staples at home:
{", ".join(staples)}

Decide whether "{ingredient}" is a variant of one of these staples and
whether using the staple instead makes a difference for this recipe.

Recipe ingredients:
{ingredients}

Preparation:
{steps}

Answer with JSON in exactly this format, with the message in Dutch:
{{
  "acceptable": true/false,
  "needsVariant": true/false,
  "basicItem": "name of the staple (e.g. Olijfolie)",
  "variant": "{ingredient}",
  "message": "clear, friendly message for the user"
}}

Rules:
- The staple works just as well: acceptable true, needsVariant false, message
  "Oorspronkelijk is het [variant], maar jij hebt [basisitem]. Heb je [variant]? Zo niet, maakt het niet uit."
- The variant matters: acceptable false, needsVariant true, message
  "Heb je ipv [basisitem] ook [variant] in huis?"
- Not a variant of a staple: acceptable false, needsVariant false, message "".

Answer ONLY with JSON, no other text.
"""


def parse_variant_advice(completion: str, source: str) -> Optional[VariantAdvice]:
    """Parse the first JSON object in a model reply into VariantAdvice."""
    match = JSON_OBJECT.search(completion or "")
    if not match:
        logger.warning(f"No JSON found in variant advice reply: {completion!r}")
        return None
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.warning(f"Invalid JSON in variant advice reply: {e}")
        return None

    return VariantAdvice(
        acceptable=bool(parsed.get("acceptable", False)),
        needs_variant=bool(parsed.get("needsVariant", False)),
        basic_item=parsed.get("basicItem") or None,
        variant=parsed.get("variant") or None,
        message=str(parsed.get("message") or ""),
        source=source,
    )


class VariantAdvisor:
    """Asks a text-generation model how to handle a staple variant.

    Attributes:
        generate (Callable[[str], str]): Prompt -> reply text.
        source (str): Recorded on every VariantAdvice produced.
        cache (dict): Replies keyed by ingredient, staples and recipe title.
    """

    def __init__(
        self,
        generate: Optional[Callable[[str], str]] = None,
        model_id: str = DEFAULT_MODEL_ID,
        region_name: str = DEFAULT_REGION,
    ):
        """Initialize the advisor.

        Args:
            generate: Text generation callable. Defaults to a
                BedrockTextGenerator for ``model_id``.
            model_id: Bedrock model ID for the default generator.
            region_name: AWS region for the default generator.
        """
        if generate is None:
            generate = BedrockTextGenerator(model_id=model_id, region_name=region_name)
            self.source = f"llm:{model_id}"
        else:
            self.source = "custom"
        self.generate = generate
        self.cache: Dict[Tuple[str, Tuple[str, ...], str], Optional[VariantAdvice]] = {}

    def advise(
        self, ingredient: str, staples: Sequence[str], recipe: Optional[Recipe] = None
    ) -> Optional[VariantAdvice]:
        """Get advice for a recipe ingredient the user may replace by a staple.

        Returns:
            The parsed advice, or None if the model call failed or its reply
            could not be parsed. Failed lookups are not cached.
        """
        key = (ingredient, tuple(staples), recipe.title if recipe else "")
        if key in self.cache:
            return self.cache[key]

        prompt = build_variant_prompt(ingredient, staples, recipe)
        try:
            completion = self.generate(prompt)
        except Exception as e:
            logger.error(f"Error during variant advice for '{ingredient}': {e}")
            return None

        advice = parse_variant_advice(completion, self.source)
        if advice is not None:
            self.cache[key] = advice
        return advice
