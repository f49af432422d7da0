"""Configuration management for the CHEF-TI recipe service.

Loads environment variables from system environment and .env file.
Priority order: system environment > .env file > hardcoded defaults
"""

import os

from dotenv import load_dotenv


# Load .env file (if exists, silently continues if missing)
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Gemini generates the recipe text
        self.GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
        self.GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
        # YouTube Data API v3 supplies the matching cooking video
        self.YOUTUBE_API_KEY: str = os.getenv("YOUTUBE_API_KEY", "")
        self.YOUTUBE_SEARCH_URL: str = os.getenv(
            "YOUTUBE_SEARCH_URL", "https://www.googleapis.com/youtube/v3/search"
        )
        # Number of search results fed to the candidate filter. Default: 15
        self.YOUTUBE_MAX_RESULTS: int = int(os.getenv("YOUTUBE_MAX_RESULTS", "15"))
        # Total timeout for the search request (seconds)
        self.SEARCH_TIMEOUT_SECONDS: int = int(os.getenv("SEARCH_TIMEOUT_SECONDS", "10"))
        # Sampling parameters: moderate randomness so "generate again" gives a new idea
        self.TEMPERATURE: float = float(os.getenv("TEMPERATURE", "0.55"))
        self.MAX_OUTPUT_TOKENS: int = int(os.getenv("MAX_OUTPUT_TOKENS", "1300"))
        # Server Port
        self.PORT: int = int(os.getenv("PORT", "3000"))
        # Comma-separated list of allowed CORS origins ("*" allows all)
        self.CORS_ORIGINS: list[str] = [
            origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
        ]
        # Directory with the browser client, mounted at "/" when it exists
        self.STATIC_DIR: str = os.getenv("STATIC_DIR", "public")
        # Log a warning when a generated ingredient table strays from the allow-list
        self.AUDIT_RECIPES: bool = os.getenv("AUDIT_RECIPES", "true").lower() in ("true", "1", "yes")
        # Saved recipes used by the command-line runner
        self.SAVED_RECIPES_FILE: str = os.getenv("SAVED_RECIPES_FILE", "tmp/saved_recipes.json")
        self.MAX_SAVED_RECIPES: int = int(os.getenv("MAX_SAVED_RECIPES", "30"))

    def validate(self) -> None:
        """Validate required configuration.

        Raises:
            ValueError: If required API keys are missing or invalid values provided.
        """
        if not self.GEMINI_API_KEY:
            raise ValueError("GEMINI_API_KEY environment variable is required")
        if not self.YOUTUBE_API_KEY:
            raise ValueError("YOUTUBE_API_KEY environment variable is required")
        if not (1 <= self.YOUTUBE_MAX_RESULTS <= 50):
            raise ValueError(
                f"YOUTUBE_MAX_RESULTS must be between 1 and 50, got: {self.YOUTUBE_MAX_RESULTS}"
            )
        if self.SEARCH_TIMEOUT_SECONDS < 1:
            raise ValueError(
                f"SEARCH_TIMEOUT_SECONDS must be at least 1 second, got: {self.SEARCH_TIMEOUT_SECONDS}"
            )
        if not (0.0 <= self.TEMPERATURE <= 2.0):
            raise ValueError(
                f"TEMPERATURE must be between 0.0 and 2.0, got: {self.TEMPERATURE}"
            )
        if self.MAX_OUTPUT_TOKENS < 256:
            raise ValueError(
                f"MAX_OUTPUT_TOKENS must be at least 256, got: {self.MAX_OUTPUT_TOKENS}"
            )
        if self.MAX_SAVED_RECIPES < 1:
            raise ValueError(
                f"MAX_SAVED_RECIPES must be at least 1, got: {self.MAX_SAVED_RECIPES}"
            )


# Module-level config instance; validate() is called by the server and CLI entry points
config = Config()
