"""Recipe text generation with the Gemini API.

Single call per request, no retries: a failure is terminal for that request
and surfaces as UpstreamGenerationError.
"""

from typing import Optional

from google import genai
from google.genai import types

from chefti.exceptions import UpstreamGenerationError
from chefti.prompts.prompts import SYSTEM_MESSAGE
from chefti.utils.logger import logger


class RecipeGenerator:
    """Generate a markdown recipe document from a composed prompt."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        temperature: float = 0.55,
        max_output_tokens: int = 1300,
    ) -> None:
        """Initialize RecipeGenerator with sampling configuration.

        Args:
            api_key: Gemini API key.
            model: Gemini model id.
            temperature: Moderate randomness so repeated requests give new ideas.
            max_output_tokens: Upper bound on the recipe length.

        Raises:
            ValueError: If api_key is None or empty string.
        """
        if not api_key:
            raise ValueError("GEMINI_API_KEY is required")

        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self._client: Optional[genai.Client] = None

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def _generation_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=SYSTEM_MESSAGE,
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
        )

    async def generate(self, prompt: str) -> str:
        """Send the prompt and return the model's markdown text.

        Args:
            prompt: Fully composed instruction text.

        Returns:
            Raw markdown produced by the model.

        Raises:
            UpstreamGenerationError: If the API call fails or returns no text.
        """
        logger.info(f"Generating recipe with {self.model} (prompt: {len(prompt)} chars)")
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._generation_config(),
            )
        except Exception as e:
            logger.error(f"Gemini generation failed: {e}", extra={"service": "generation"})
            raise UpstreamGenerationError() from e

        text = getattr(response, "text", None)
        if not text or not text.strip():
            logger.error("Gemini returned an empty recipe", extra={"service": "generation"})
            raise UpstreamGenerationError()

        logger.info(f"Recipe generated ({len(text)} chars)")
        return text
