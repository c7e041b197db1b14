"""Sense selection: narrow a multi-sense result to the one matching a hint.

A user adding "book" with the hint "预订" wants the verb sense, not every
sense the dictionary knows. Senses are ranked by similarity between their
formatted translation and the hint.
"""

import logging

from domain.model.word import DictionarySense
from services.similarity import similarity

logger = logging.getLogger(__name__)


def select_senses(
    senses: list[DictionarySense],
    hint: str | None = None,
) -> list[DictionarySense]:
    """Return the best-matching sense for ``hint``, or all senses without one.

    Ties keep source order (sorted() is stable).
    """
    if not hint or not hint.strip() or not senses:
        return list(senses)

    hint = hint.strip()
    ranked = sorted(
        senses,
        key=lambda sense: similarity(sense.formatted_translation, hint),
        reverse=True,
    )
    best = ranked[0]
    logger.debug("Sense selected by hint", extra={
        "hint": hint,
        "translation": best.formatted_translation,
        "candidates": len(senses),
    })
    return [best]
