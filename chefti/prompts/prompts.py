"""Prompts for the CHEF-TI recipe generator.

Provides factory functions that compose the generation prompt, the video
search query, and the deterministic no-match fallback document.
Every function here is pure: identical inputs give identical text.
"""

from typing import Sequence

from chefti.models.models import PreferenceSet, PrepMode, SelectionResult

SYSTEM_MESSAGE = "You are CHEF-TI, the strict culinary AI."

PREP_MODE_DESCRIPTIONS = {
    PrepMode.FRESH: "fresh (best eaten immediately, small batch)",
    PrepMode.EAT_TOMORROW: "eat tomorrow (sits in the fridge and reheats well the next day)",
    PrepMode.MEAL_PREP: "meal prep (cooked in a larger batch and kept for several days)",
}


def _style_label(preferences: PreferenceSet) -> str:
    return preferences.style if preferences.has_style else "any"


def _get_video_section(selection: SelectionResult) -> str:
    """Selected video text, framed as technique inspiration only.

    Args:
        selection: Result of the candidate filter. When nothing was selected
            the section is omitted entirely.

    Returns:
        str: Video section (with trailing blank line) or an empty string.
    """
    if not selection.found:
        return ""
    candidate = selection.candidate
    return f"""YOUTUBE VIDEO INFO (COOKING APPROACH INSPIRATION ONLY - NOT AN INGREDIENT SOURCE):
TITLE: {candidate.title}
DESCRIPTION: {candidate.description}

"""


def _get_rules_section(selection: SelectionResult) -> str:
    video_rule = (
        "6. Use the COOKING METHOD inspiration from the YouTube video (e.g., stir-fry,\n"
        "   baking, pan-frying, etc.) but NEVER copy its ingredients."
        if selection.found
        else "6. Choose a cooking technique that suits the ingredients, style and meal type."
    )
    return f"""ABSOLUTE RULES:
1. You MUST NOT use any ingredient that is not in:
   - the user ingredient list, OR
   - the basic ingredient list above.
   These two lists are exhaustive and exclusive.
2. RESPECT the food style: if the user says "Asian", the dish should feel Asian.
   If "Mediterranean", it must feel Mediterranean, etc. "any" leaves the style open.
3. RESPECT the meal type:
   - breakfast -> suitable breakfast dish
   - lunch -> normal mid-day meal
   - dinner -> main filling meal
   - snack -> light, quick snack
4. RESPECT the prep mode:
   - "fresh" -> best eaten immediately, small batch
   - "eat-tomorrow" -> designed to sit in the fridge and reheat well next day,
     include storage & reheating advice in Tips & Tricks.
   - "meal-prep" -> designed to be cooked in larger batch and kept several days,
     include storage & reheating advice in Tips & Tricks.
5. DO NOT simply repeat the same recipe every time. Be creative and propose a
   different idea when possible, even for identical requests.
{video_rule}
"""


def _get_output_format_section(preferences: PreferenceSet, selection: SelectionResult) -> str:
    storage_line = (
        f'- Prep mode is "{preferences.prep_mode.value}": you MUST include storage and reheating advice.'
        if preferences.prep_mode.needs_storage_advice
        else '- Storage advice is optional for "fresh" dishes.'
    )
    video_title = selection.candidate.title if selection.found else "none"
    return f"""OUTPUT FORMAT (Markdown):

# 1️⃣ Big Recipe Title

## 2️⃣ Ingredient List (table)
Make a Markdown table with columns: Ingredient | Measurement

## 3️⃣ Step-by-step Instructions
Numbered list, clear and simple.

## 4️⃣ Approximate Calories per Serving
Give a realistic calorie estimate.

## 5️⃣ Tips & Tricks
- Include 3-5 bullet points.
{storage_line}

## 6️⃣ Cuisine Style Description
One paragraph explaining how this dish matches the chosen cuisine style and meal type.

## 7️⃣ Matching YouTube Video Title
Write exactly: "Matching video: {video_title}"
"""


def build_recipe_prompt(
    user_ingredients: Sequence[str],
    pantry_basics: Sequence[str],
    preferences: PreferenceSet,
    selection: SelectionResult,
) -> str:
    """Compose the constrained generation prompt.

    Args:
        user_ingredients: Parsed ingredient tokens, listed verbatim.
        pantry_basics: Full pantry allow-list.
        preferences: Meal type, prep mode and style for this request.
        selection: Chosen video (if any) used as technique inspiration.

    Returns:
        str: Complete instruction text for the language model.
    """
    return f"""
You are CHEF-TI, a strict but creative cooking AI.

USER INGREDIENTS (the ONLY non-basic ingredients you may use):
{", ".join(user_ingredients)}

BASIC INGREDIENTS YOU MAY ALSO USE:
{", ".join(pantry_basics)}

MEAL TYPE: {preferences.meal_type}
FOOD STYLE / CUISINE: {_style_label(preferences)}
PREP MODE: {PREP_MODE_DESCRIPTIONS[preferences.prep_mode]}

{_get_video_section(selection)}{_get_rules_section(selection)}
{_get_output_format_section(preferences, selection)}
Remember: NEVER introduce new non-basic ingredients that the user does not have.
"""


def build_search_query(user_ingredients: Sequence[str], preferences: PreferenceSet) -> str:
    """Video search query: style, meal type, "recipe using", ingredients, "tutorial"."""
    parts = [
        preferences.style if preferences.has_style else "",
        preferences.meal_type or "meal",
        "recipe using",
        " ".join(user_ingredients),
        "tutorial",
    ]
    return " ".join(part for part in parts if part)


def build_fallback_recipe(user_ingredients: Sequence[str], preferences: PreferenceSet) -> str:
    """Deterministic document returned when no video passes the filter.

    Echoes the preferences and lists every user ingredient as a bullet line.
    The generator is not called on this path.
    """
    ingredient_lines = "\n".join(f"- {ingredient}" for ingredient in user_ingredients)
    return f"""# 🍽️ CHEF-TI Custom Recipe

No matching YouTube video could be found that respects ALL your rules.
So CHEF-TI is sticking to ONLY your ingredients.

We will still respect:
- Your meal type: **{preferences.meal_type}**
- Your style: **{_style_label(preferences)}**
- Your prep mode: **{preferences.prep_mode.value}**

## 🛒 Ingredients
{ingredient_lines}

## 👨‍🍳 Steps
1. Combine the ingredients above with any basics from your pantry (salt, pepper, oil, herbs, spices).
2. Try again with more ingredients or a different style to get a full guided recipe.
"""
