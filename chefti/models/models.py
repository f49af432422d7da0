"""Data models and schemas for the CHEF-TI recipe service.

Defines Pydantic models for request/response validation and domain objects.
All models use Pydantic v2 for strict validation and OpenAPI schema generation.
"""

from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PrepMode(str, Enum):
    """How the dish will be eaten: governs batch size and storage advice."""

    FRESH = "fresh"
    EAT_TOMORROW = "eat-tomorrow"
    MEAL_PREP = "meal-prep"

    @property
    def needs_storage_advice(self) -> bool:
        return self is not PrepMode.FRESH


class MatchClassification(str, Enum):
    """Outcome of running one search candidate through the ingredient filter."""

    STRICT = "strict"
    LOOSE = "loose"
    REJECTED = "rejected"


class RecipeRequest(BaseModel):
    """Request schema for POST /getRecipe.

    Field names are snake_case in Python and camelCase on the wire
    (mealType, prepType). Empty preferences fall back to neutral defaults.
    """

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    ingredients: Annotated[
        str,
        Field("", max_length=2000, description="Free-text ingredient list (comma-separated or one word per ingredient)"),
    ]
    meal_type: Annotated[
        str,
        Field("meal", alias="mealType", max_length=100, description="breakfast, lunch, dinner, snack, ..."),
    ]
    prep_type: Annotated[
        PrepMode,
        Field(PrepMode.FRESH, alias="prepType", description="fresh, eat-tomorrow or meal-prep"),
    ]
    style: Annotated[
        str,
        Field("any", max_length=100, description="Cuisine style such as Italian or Asian, or 'any'"),
    ]

    @field_validator("ingredients", mode="before")
    @classmethod
    def coerce_ingredients(cls, value: Optional[str]) -> str:
        return value if value is not None else ""

    @field_validator("meal_type", mode="before")
    @classmethod
    def default_meal_type(cls, value: Optional[str]) -> str:
        if value is None or not str(value).strip():
            return "meal"
        return value

    @field_validator("style", mode="before")
    @classmethod
    def default_style(cls, value: Optional[str]) -> str:
        if value is None or not str(value).strip():
            return "any"
        return value

    @field_validator("prep_type", mode="before")
    @classmethod
    def normalize_prep_type(cls, value: Optional[str | PrepMode]) -> PrepMode | str:
        """Accept 'eat tomorrow', 'Meal_Prep', etc. and map them onto PrepMode values."""
        if isinstance(value, PrepMode):
            return value
        if value is None or not str(value).strip():
            return PrepMode.FRESH
        return "-".join(str(value).strip().lower().replace("_", " ").split())


class PreferenceSet(BaseModel):
    """Per-request cooking preferences passed to the prompt builder."""

    model_config = ConfigDict(frozen=True)

    meal_type: str = "meal"
    prep_mode: PrepMode = PrepMode.FRESH
    style: str = "any"

    @property
    def has_style(self) -> bool:
        """True when a concrete cuisine style (not 'any') was requested."""
        return bool(self.style) and self.style.lower() != "any"

    @classmethod
    def from_request(cls, request: RecipeRequest) -> "PreferenceSet":
        return cls(meal_type=request.meal_type, prep_mode=request.prep_type, style=request.style)


class SearchCandidate(BaseModel):
    """One video returned by the search service."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    description: str = ""

    @property
    def text(self) -> str:
        return f"{self.title} {self.description}"


class SelectionResult(BaseModel):
    """The chosen candidate (or none) and how it was classified."""

    model_config = ConfigDict(frozen=True)

    candidate: Optional[SearchCandidate] = None
    classification: MatchClassification = MatchClassification.REJECTED

    @property
    def found(self) -> bool:
        return self.candidate is not None


class RecipeResponse(BaseModel):
    """Response schema for POST /getRecipe: markdown recipe plus embeddable video URL."""

    model_config = ConfigDict(populate_by_name=True)

    recipe: str
    video_url: str = Field("", alias="videoUrl")


class ErrorResponse(BaseModel):
    """Error body returned for validation and upstream failures."""

    error: str


class SavedRecipe(BaseModel):
    """A recipe kept in the caller-side saved list."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    recipe: str
    video_url: str = Field("", alias="videoUrl")
