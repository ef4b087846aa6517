import json

import pytest

from pantry_match.matching import (
    BedrockTextGenerator,
    Recipe,
    RecipeIngredient,
    VariantAdvisor,
    build_variant_prompt,
)

REPLY = json.dumps(
    {
        "acceptable": True,
        "needsVariant": False,
        "basicItem": "Olijfolie",
        "variant": "Zonnebloemolie",
        "message": "Oorspronkelijk is het zonnebloemolie, maar jij hebt olijfolie.",
    }
)


@pytest.fixture
def recipe():
    return Recipe(
        id="1",
        title="Gebakken ui",
        ingredients=[
            RecipeIngredient("Ui", "ui", 2, None),
            RecipeIngredient("Zonnebloemolie", None, 2, "el"),
        ],
        steps=["Snijd de ui.", "Bak de ui in de olie."],
    )


def test_build_variant_prompt(recipe):
    prompt = build_variant_prompt("Zonnebloemolie", ["Olijfolie", "Zout"], recipe)

    assert '"Gebakken ui"' in prompt
    assert '"Zonnebloemolie"' in prompt
    assert "Olijfolie, Zout" in prompt
    assert "Ui (2), Zonnebloemolie (2 el)" in prompt
    assert "Bak de ui in de olie." in prompt


def test_advise(mocker, recipe):
    generate = mocker.Mock(return_value=f"Here you go:\n{REPLY}\n")
    advisor = VariantAdvisor(generate=generate)

    advice = advisor.advise("Zonnebloemolie", ["Olijfolie"], recipe)

    assert advice is not None
    assert advice.acceptable is True
    assert advice.needs_variant is False
    assert advice.basic_item == "Olijfolie"
    assert advice.variant == "Zonnebloemolie"
    assert advice.message.startswith("Oorspronkelijk")
    assert advice.source == "custom"


def test_advise_caching(mocker, recipe):
    generate = mocker.Mock(return_value=REPLY)
    advisor = VariantAdvisor(generate=generate)

    first = advisor.advise("Zonnebloemolie", ["Olijfolie"], recipe)
    second = advisor.advise("Zonnebloemolie", ["Olijfolie"], recipe)

    assert first == second
    generate.assert_called_once()


def test_advise_error_handling(mocker):
    generate = mocker.Mock(side_effect=Exception("API Error"))
    advisor = VariantAdvisor(generate=generate)

    assert advisor.advise("Zonnebloemolie", ["Olijfolie"]) is None
    assert advisor.advise("Zonnebloemolie", ["Olijfolie"]) is None
    assert generate.call_count == 2


@pytest.mark.parametrize("reply", ["I am not sure.", "{not json}", ""])
def test_advise_unparseable_reply(mocker, reply):
    advisor = VariantAdvisor(generate=mocker.Mock(return_value=reply))
    assert advisor.advise("Zonnebloemolie", ["Olijfolie"]) is None


def test_bedrock_text_generator(mocker):
    client = mocker.Mock()
    client.invoke_model.return_value = {
        "body": mocker.Mock(
            read=lambda: json.dumps({"content": [{"type": "text", "text": REPLY}]})
        )
    }
    generate = BedrockTextGenerator(model_id="test_model", client=client)

    assert generate("prompt") == REPLY
    kwargs = client.invoke_model.call_args.kwargs
    assert kwargs["modelId"] == "test_model"
    body = json.loads(kwargs["body"])
    assert body["messages"][0]["content"][0]["text"] == "prompt"


def test_default_advisor_uses_bedrock(mocker):
    boto3_client = mocker.patch("pantry_match.matching.advice.boto3.client")
    boto3_client.return_value.invoke_model.return_value = {
        "body": mocker.Mock(
            read=lambda: json.dumps({"content": [{"type": "text", "text": REPLY}]})
        )
    }

    advisor = VariantAdvisor(model_id="test_model")
    advice = advisor.advise("Zonnebloemolie", ["Olijfolie"])

    boto3_client.assert_called_once_with("bedrock-runtime", region_name="us-east-1")
    assert advice.source == "llm:test_model"
