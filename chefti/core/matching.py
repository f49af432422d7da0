"""Candidate filter and ranker for video search results.

Each candidate passes through three binary gates, in order:

1. Style gate: a requested style (anything but "any"/empty) must appear as a
   case-insensitive substring of the candidate's title + description.
2. Ingredient-presence gate: at least one user ingredient must appear
   verbatim among the candidate's extracted words.
3. Forbidden-word check: a food-like word that is neither a user ingredient,
   a pantry basic, nor an ignored word marks the candidate as a violation.

Selection is a left-to-right scan: the first violation-free candidate wins
immediately, otherwise the first violating one is used, otherwise nothing.
There is no scoring and no re-sorting; input order is the tie-break.
"""

import re
from typing import Iterable, Optional, Sequence

from chefti.core.pantry import DEFAULT_PANTRY, PantryPolicy
from chefti.models.models import MatchClassification, SearchCandidate, SelectionResult
from chefti.utils.logger import logger

_NON_LETTER = re.compile(r"[^a-z ]")
_FOOD_LIKE = re.compile(r"^[a-z]+$")


def extract_words(text: Optional[str]) -> list[str]:
    """Lower-case, blank out non-letters, split on whitespace, keep words longer than 2."""
    cleaned = _NON_LETTER.sub(" ", (text or "").lower())
    return [word for word in cleaned.split() if len(word) > 2]


def is_food_like(word: str) -> bool:
    return bool(_FOOD_LIKE.match(word)) and len(word) > 3


def is_forbidden(word: str, user_ingredients: Sequence[str], pantry: PantryPolicy = DEFAULT_PANTRY) -> bool:
    """True when a word is not covered by the user's list, the pantry, or the ignore list."""
    if word in user_ingredients:
        return False
    if pantry.is_basic(word):
        return False
    if pantry.is_ignored(word):
        return False
    return True


def forbidden_words(
    words: Iterable[str],
    user_ingredients: Sequence[str],
    pantry: PantryPolicy = DEFAULT_PANTRY,
) -> list[str]:
    """Distinct food-like forbidden words in first-seen order."""
    found: list[str] = []
    for word in words:
        if word in found:
            continue
        if is_food_like(word) and is_forbidden(word, user_ingredients, pantry):
            found.append(word)
    return found


def _passes_style(candidate: SearchCandidate, style: str) -> bool:
    if not style or style.strip().lower() == "any":
        return True
    return style.strip().lower() in candidate.text.lower()


def _ingredient_hits(words: Sequence[str], user_ingredients: Sequence[str]) -> int:
    return sum(1 for ingredient in dict.fromkeys(user_ingredients) if ingredient in words)


def classify_candidate(
    candidate: SearchCandidate,
    user_ingredients: Sequence[str],
    style: str = "any",
    pantry: PantryPolicy = DEFAULT_PANTRY,
) -> MatchClassification:
    """Run one candidate through the style, ingredient and forbidden-word gates."""
    if not _passes_style(candidate, style):
        return MatchClassification.REJECTED

    words = extract_words(candidate.title) + extract_words(candidate.description)
    if _ingredient_hits(words, user_ingredients) < 1:
        return MatchClassification.REJECTED

    # Only the first violation matters for classification
    for word in words:
        if is_food_like(word) and is_forbidden(word, user_ingredients, pantry):
            return MatchClassification.LOOSE

    return MatchClassification.STRICT


def select_candidate(
    candidates: Sequence[SearchCandidate],
    user_ingredients: Sequence[str],
    style: str = "any",
    pantry: PantryPolicy = DEFAULT_PANTRY,
) -> SelectionResult:
    """Pick the first strict match, else the first loose match, else nothing.

    Args:
        candidates: Search results in the provider's relevance order.
        user_ingredients: Parsed ingredient tokens.
        style: Requested cuisine style, or "any".
        pantry: Pantry policy supplying basic and ignored words.

    Returns:
        SelectionResult with the chosen candidate and its classification.
        An empty candidate list yields a result with no candidate.
    """
    loose: Optional[SearchCandidate] = None

    for candidate in candidates:
        classification = classify_candidate(candidate, user_ingredients, style, pantry)
        logger.debug(f"Candidate {candidate.id!r} classified as {classification.value}")

        if classification is MatchClassification.STRICT:
            return SelectionResult(candidate=candidate, classification=MatchClassification.STRICT)
        if classification is MatchClassification.LOOSE and loose is None:
            violations = forbidden_words(extract_words(candidate.text), user_ingredients, pantry)
            logger.debug(f"Keeping {candidate.id!r} as loose match (forbidden: {violations})")
            loose = candidate

    if loose is not None:
        return SelectionResult(candidate=loose, classification=MatchClassification.LOOSE)
    return SelectionResult()
