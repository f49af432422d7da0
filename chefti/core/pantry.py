"""Pantry policy: basic ingredients usable without being declared, and generic
words that never count as a forbidden ingredient.

Membership is an exact, case-insensitive match. "egg" and "eggs" are both
listed explicitly because no stemming is applied.
"""

from dataclasses import dataclass, field

BASIC_INGREDIENTS = frozenset(
    {
        "salt",
        "pepper",
        "black pepper",
        "oil",
        "olive oil",
        "vegetable oil",
        "butter",
        "sugar",
        "flour",
        "milk",
        "water",
        "eggs",
        "egg",
        "garlic",
        "onion",
        "herbs",
        "spices",
        "baking powder",
        "baking soda",
        "yeast",
    }
)

# Words common in video titles/descriptions that say nothing about ingredients
IGNORED_WORDS = frozenset(
    {
        "best",
        "easy",
        "quick",
        "simple",
        "how",
        "make",
        "recipe",
        "cook",
        "cooking",
        "kitchen",
        "home",
        "style",
        "food",
        "dish",
        "perfect",
        "tasty",
        "delicious",
        "family",
        "healthy",
        "fast",
        "video",
    }
)


@dataclass(frozen=True)
class PantryPolicy:
    """Read-only lookup tables shared by the candidate filter and prompt builder."""

    basics: frozenset = field(default=BASIC_INGREDIENTS)
    ignored: frozenset = field(default=IGNORED_WORDS)

    def is_basic(self, word: str) -> bool:
        return word.strip().lower() in self.basics

    def is_ignored(self, word: str) -> bool:
        return word.strip().lower() in self.ignored

    def basics_for_prompt(self) -> list[str]:
        """Pantry list in a stable order for prompt text."""
        return sorted(self.basics)


DEFAULT_PANTRY = PantryPolicy()
