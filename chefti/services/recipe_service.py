"""Request orchestration for the recipe service.

Flow per request (strictly sequential, no retries, no shared mutable state):

1. Parse ingredients; empty -> ValidationError, no outbound calls.
2. One video search; failure -> UpstreamSearchError.
3. Candidate filter; nothing acceptable -> deterministic fallback document,
   generation is skipped.
4. Build the constrained prompt and call the generator once; failure ->
   UpstreamGenerationError.
5. Return the raw recipe text plus the chosen video's embed URL.
"""

from typing import Protocol, Sequence

from chefti.core.audit import unexpected_ingredients
from chefti.core.ingredients import parse_ingredients
from chefti.core.matching import select_candidate
from chefti.core.pantry import DEFAULT_PANTRY, PantryPolicy
from chefti.exceptions import ValidationError
from chefti.models.models import PreferenceSet, RecipeRequest, RecipeResponse, SearchCandidate
from chefti.prompts.prompts import build_fallback_recipe, build_recipe_prompt, build_search_query
from chefti.services.generation import RecipeGenerator
from chefti.services.youtube import YouTubeSearch, embed_url
from chefti.utils.config import config
from chefti.utils.logger import logger


class VideoSearchClient(Protocol):
    async def search(self, query: str) -> Sequence[SearchCandidate]: ...


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


class RecipeService:
    """Turn a RecipeRequest into a markdown recipe and a matching video."""

    def __init__(
        self,
        search_client: VideoSearchClient,
        generator: TextGenerator,
        pantry: PantryPolicy = DEFAULT_PANTRY,
        audit_recipes: bool = True,
    ) -> None:
        self.search_client = search_client
        self.generator = generator
        self.pantry = pantry
        self.audit_recipes = audit_recipes

    async def get_recipe(self, request: RecipeRequest) -> RecipeResponse:
        """Handle one recipe request end to end.

        Args:
            request: Validated request body.

        Returns:
            RecipeResponse with the recipe markdown and an embeddable video URL
            (empty for the no-match fallback).

        Raises:
            ValidationError: If no ingredients could be parsed.
            UpstreamSearchError: If the video search fails.
            UpstreamGenerationError: If recipe generation fails.
        """
        user_ingredients = parse_ingredients(request.ingredients)
        if not user_ingredients:
            logger.warning("Rejected request without ingredients")
            raise ValidationError()

        preferences = PreferenceSet.from_request(request)
        logger.info(
            f"Recipe request: ingredients={user_ingredients}, meal_type={preferences.meal_type}, "
            f"style={preferences.style}, prep={preferences.prep_mode.value}"
        )

        candidates = await self.search_client.search(build_search_query(user_ingredients, preferences))

        style = preferences.style if preferences.has_style else ""
        selection = select_candidate(candidates, user_ingredients, style, self.pantry)
        if not selection.found:
            logger.info(f"No acceptable video among {len(candidates)} candidate(s); returning fallback recipe")
            return RecipeResponse(recipe=build_fallback_recipe(user_ingredients, preferences), video_url="")

        video = selection.candidate
        logger.info(
            f"Selected {selection.classification.value} match: {video.title!r}",
            extra={"video_id": video.id},
        )

        prompt = build_recipe_prompt(user_ingredients, self.pantry.basics_for_prompt(), preferences, selection)
        recipe = await self.generator.generate(prompt)

        if self.audit_recipes:
            self._audit(recipe, user_ingredients)

        return RecipeResponse(recipe=recipe, video_url=embed_url(video.id))

    def _audit(self, recipe: str, user_ingredients: list[str]) -> None:
        flagged = unexpected_ingredients(recipe, user_ingredients, self.pantry)
        if flagged:
            logger.warning(f"Generated recipe lists ingredients outside the allow-list: {flagged}")


def create_recipe_service() -> RecipeService:
    """Factory: build the service from validated configuration."""
    config.validate()
    search_client = YouTubeSearch(
        api_key=config.YOUTUBE_API_KEY,
        search_url=config.YOUTUBE_SEARCH_URL,
        max_results=config.YOUTUBE_MAX_RESULTS,
        timeout_seconds=config.SEARCH_TIMEOUT_SECONDS,
    )
    generator = RecipeGenerator(
        api_key=config.GEMINI_API_KEY,
        model=config.GEMINI_MODEL,
        temperature=config.TEMPERATURE,
        max_output_tokens=config.MAX_OUTPUT_TOKENS,
    )
    logger.info(f"✓ Recipe service configured (model={config.GEMINI_MODEL}, max_results={config.YOUTUBE_MAX_RESULTS})")
    return RecipeService(search_client, generator, audit_recipes=config.AUDIT_RECIPES)
