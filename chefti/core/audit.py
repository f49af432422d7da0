"""Post-generation check of a recipe's ingredient table against the allow-list.

The generator is only *asked* to stay within the user's ingredients plus the
pantry basics. This module reads back the first column of the markdown
ingredient table and reports rows that mention none of the allowed items.
It is advisory: callers log the result and never alter the recipe.
"""

import re
from typing import Sequence

from chefti.core.pantry import DEFAULT_PANTRY, PantryPolicy

_SEPARATOR_CELL = re.compile(r"^:?-{2,}:?$")
_NON_LETTER = re.compile(r"[^a-z ]")


def ingredient_table_rows(markdown: str) -> list[str]:
    """First-column cells of the first markdown table, header and separator excluded."""
    rows: list[str] = []
    in_table = False
    seen_separator = False

    for line in markdown.splitlines():
        stripped = line.strip()
        if not stripped.startswith("|"):
            if in_table:
                break
            continue

        in_table = True
        cells = [cell.strip() for cell in stripped.strip("|").split("|")]
        if not cells:
            continue
        if all(_SEPARATOR_CELL.match(cell) for cell in cells if cell):
            seen_separator = True
            continue
        if not seen_separator:
            # Header row
            continue
        first = cells[0].replace("*", "").strip()
        if first:
            rows.append(first)

    return rows


def _mentions(cell: str, term: str) -> bool:
    return re.search(rf"\b{re.escape(term)}\b", cell) is not None


def unexpected_ingredients(
    markdown: str,
    user_ingredients: Sequence[str],
    pantry: PantryPolicy = DEFAULT_PANTRY,
) -> list[str]:
    """Ingredient-table rows that name neither a user ingredient nor a pantry basic.

    Matching is a whole-word search of each allowed term inside the row text,
    so "2 ripe tomato slices" is covered by "tomato". Plural forms of a term
    that is not itself listed are reported.
    """
    allowed = [term for term in (*user_ingredients, *pantry.basics) if term]
    flagged: list[str] = []
    for row in ingredient_table_rows(markdown):
        cell = " ".join(_NON_LETTER.sub(" ", row.lower()).split())
        if not any(_mentions(cell, term) for term in allowed):
            flagged.append(row)
    return flagged
