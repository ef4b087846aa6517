"""Rewrite recipe steps after ingredient substitutions."""

import re
from typing import List, Optional, Sequence

from .models import Substitution


def apply_substitutions(
    steps: Sequence[str], substitutions: Optional[Sequence[Substitution]]
) -> List[str]:
    """Replace substituted ingredients in recipe steps.

    Every case-insensitive occurrence of a substitution's original
    ingredient is replaced by its substitute. When the substitution carries
    adjustments, they are appended to every step in parentheses.

    Args:
        steps: The recipe's preparation steps.
        substitutions: Substitutions to apply, in order.

    Returns:
        The rewritten steps as a new list.

    Examples:
        >>> apply_substitutions(
        ...     ["Bak de ui in boter."],
        ...     [Substitution("boter", "olijfolie", "gebruik iets minder")],
        ... )
        ['Bak de ui in olijfolie. (gebruik iets minder)']
    """
    updated = list(steps)
    if not substitutions:
        return updated

    for substitution in substitutions:
        pattern = re.compile(re.escape(substitution.original), re.IGNORECASE)
        rewritten = []
        for step in updated:
            step = pattern.sub(lambda _: substitution.substitute, step)
            if substitution.adjustments:
                step += f" ({substitution.adjustments})"
            rewritten.append(step)
        updated = rewritten

    return updated
