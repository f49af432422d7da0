"""Unit tests for prompt, search query and fallback document builders."""

import pytest

from chefti.core.pantry import DEFAULT_PANTRY
from chefti.models.models import (
    MatchClassification,
    PreferenceSet,
    PrepMode,
    SearchCandidate,
    SelectionResult,
)
from chefti.prompts.prompts import (
    SYSTEM_MESSAGE,
    build_fallback_recipe,
    build_recipe_prompt,
    build_search_query,
)


@pytest.fixture
def selection():
    return SelectionResult(
        candidate=SearchCandidate(id="abc123", title="Thai Rice Bowl", description="Quick stir-fry rice"),
        classification=MatchClassification.STRICT,
    )


@pytest.fixture
def preferences():
    return PreferenceSet(meal_type="dinner", prep_mode=PrepMode.MEAL_PREP, style="Thai")


class TestBuildRecipePrompt:
    """Test the constrained generation prompt."""

    def test_lists_user_ingredients_and_basics(self, preferences, selection):
        prompt = build_recipe_prompt(["rice", "beans"], DEFAULT_PANTRY.basics_for_prompt(), preferences, selection)

        assert "USER INGREDIENTS (the ONLY non-basic ingredients you may use):\nrice, beans" in prompt
        assert "BASIC INGREDIENTS YOU MAY ALSO USE:" in prompt
        assert ", ".join(DEFAULT_PANTRY.basics_for_prompt()) in prompt

    def test_includes_preferences(self, preferences, selection):
        prompt = build_recipe_prompt(["rice"], ["salt"], preferences, selection)

        assert "MEAL TYPE: dinner" in prompt
        assert "FOOD STYLE / CUISINE: Thai" in prompt
        assert "PREP MODE: meal prep" in prompt

    def test_video_is_inspiration_only(self, preferences, selection):
        prompt = build_recipe_prompt(["rice"], ["salt"], preferences, selection)

        assert "NOT AN INGREDIENT SOURCE" in prompt
        assert "TITLE: Thai Rice Bowl" in prompt
        assert "DESCRIPTION: Quick stir-fry rice" in prompt
        assert "NEVER copy its ingredients" in prompt
        assert 'Matching video: Thai Rice Bowl' in prompt

    def test_no_video_section_without_selection(self, preferences):
        prompt = build_recipe_prompt(["rice"], ["salt"], preferences, SelectionResult())

        assert "YOUTUBE VIDEO INFO" not in prompt
        assert 'Matching video: none' in prompt

    def test_storage_advice_required_for_non_fresh(self, preferences, selection):
        prompt = build_recipe_prompt(["rice"], ["salt"], preferences, selection)

        assert "you MUST include storage and reheating advice" in prompt

    def test_storage_advice_optional_for_fresh(self, selection):
        fresh = PreferenceSet(meal_type="lunch", prep_mode=PrepMode.FRESH, style="any")

        prompt = build_recipe_prompt(["rice"], ["salt"], fresh, selection)

        assert "you MUST include storage" not in prompt
        assert "FOOD STYLE / CUISINE: any" in prompt

    def test_contains_rules_and_output_sections(self, preferences, selection):
        prompt = build_recipe_prompt(["rice"], ["salt"], preferences, selection)

        assert "ABSOLUTE RULES:" in prompt
        for heading in ("1️⃣", "2️⃣", "3️⃣", "4️⃣", "5️⃣", "6️⃣", "7️⃣"):
            assert heading in prompt
        assert prompt.rstrip().endswith("NEVER introduce new non-basic ingredients that the user does not have.")

    def test_prompt_is_deterministic(self, preferences, selection):
        args = (["rice"], ["salt"], preferences, selection)

        assert build_recipe_prompt(*args) == build_recipe_prompt(*args)

    def test_system_message(self):
        assert SYSTEM_MESSAGE == "You are CHEF-TI, the strict culinary AI."


class TestBuildSearchQuery:
    def test_with_style(self, preferences):
        assert build_search_query(["rice", "beans"], preferences) == "Thai dinner recipe using rice beans tutorial"

    def test_any_style_is_omitted(self):
        preferences = PreferenceSet(meal_type="breakfast", style="any")

        assert build_search_query(["eggs"], preferences) == "breakfast recipe using eggs tutorial"


class TestBuildFallbackRecipe:
    def test_every_ingredient_is_a_bullet(self, preferences):
        document = build_fallback_recipe(["rice", "black beans", "corn"], preferences)

        assert "- rice\n- black beans\n- corn" in document

    def test_echoes_preferences(self, preferences):
        document = build_fallback_recipe(["rice"], preferences)

        assert document.startswith("# 🍽️ CHEF-TI Custom Recipe")
        assert "**dinner**" in document
        assert "**Thai**" in document
        assert "**meal-prep**" in document

    def test_default_style_echoed_as_any(self):
        document = build_fallback_recipe(["rice"], PreferenceSet())

        assert "**any**" in document
        assert "**meal**" in document
        assert "**fresh**" in document

    def test_fallback_is_deterministic(self, preferences):
        assert build_fallback_recipe(["rice"], preferences) == build_fallback_recipe(["rice"], preferences)
