"""Free-text ingredient parsing.

Comma-bearing input is treated as a list of discrete (possibly multi-word)
ingredients; anything else is split into one ingredient per word.
"""

import re
from typing import Optional

# Splits "tomato, olive oil and basil\nfeta" into its list items
_LIST_SEPARATORS = re.compile(r",|\band\b|\n")


def parse_ingredients(raw: Optional[str]) -> list[str]:
    """Turn user input into lower-cased ingredient tokens in first-seen order.

    Args:
        raw: Free-form text typed or dictated by the user.

    Returns:
        List of trimmed, non-empty tokens. Duplicates are kept. Empty input
        returns an empty list; callers decide whether that is an error.

    Example:
        >>> parse_ingredients("Tomato, olive oil and basil")
        ['tomato', 'olive oil', 'basil']
        >>> parse_ingredients("tomato onion basil")
        ['tomato', 'onion', 'basil']
    """
    if not raw:
        return []

    text = raw.lower().strip()
    if not text:
        return []

    pieces = _LIST_SEPARATORS.split(text) if "," in text else text.split()
    return [piece.strip() for piece in pieces if piece.strip()]
