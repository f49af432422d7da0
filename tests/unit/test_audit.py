"""Unit tests for the generated-recipe ingredient audit."""

from chefti.core.audit import ingredient_table_rows, unexpected_ingredients

RECIPE = """# Garlic Rice Bowl

## Ingredient List
| Ingredient | Measurement |
|---|---|
| **Rice** | 1 cup |
| 2 ripe tomato | sliced |
| Olive oil | 2 tbsp |
| Chicken breast | 200 g |

## Steps
1. Cook the rice.

| Not | Ingredients |
|---|---|
| Pork | 1 |
"""


class TestIngredientTableRows:
    def test_first_table_first_column(self):
        assert ingredient_table_rows(RECIPE) == ["Rice", "2 ripe tomato", "Olive oil", "Chicken breast"]

    def test_aligned_separator(self):
        markdown = "| Ingredient | Amount |\n| :--- | ---: |\n| Beans | 1 can |\n"

        assert ingredient_table_rows(markdown) == ["Beans"]

    def test_no_table(self):
        assert ingredient_table_rows("# Title\n\n- rice\n- beans\n") == []


class TestUnexpectedIngredients:
    def test_flags_rows_outside_allow_list(self):
        assert unexpected_ingredients(RECIPE, ["rice", "tomato"]) == ["Chicken breast"]

    def test_pantry_basics_are_allowed(self):
        markdown = "| Ingredient | Amount |\n|---|---|\n| Salt | pinch |\n| Black pepper | pinch |\n"

        assert unexpected_ingredients(markdown, ["rice"]) == []

    def test_plural_of_unlisted_term_is_flagged(self):
        markdown = "| Ingredient | Amount |\n|---|---|\n| Tomatoes | 2 |\n"

        assert unexpected_ingredients(markdown, ["tomato"]) == ["Tomatoes"]

    def test_recipe_without_table_is_clean(self):
        assert unexpected_ingredients("Just cook the rice.", ["rice"]) == []
