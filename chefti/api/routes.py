"""HTTP routes for the recipe service.

POST /getRecipe accepts {ingredients, mealType, prepType, style} and returns
{recipe, videoUrl}. Domain errors are mapped to {"error": ...} bodies:

- ValidationError          -> 400 "no ingredients provided"
- UpstreamSearchError      -> 502 "video search failed"
- UpstreamGenerationError  -> 502 "generation failed"
"""

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from chefti.exceptions import UpstreamError, ValidationError
from chefti.models.models import ErrorResponse, RecipeRequest, RecipeResponse
from chefti.utils.logger import logger

router = APIRouter(tags=["recipes"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.post(
    "/getRecipe",
    response_model=RecipeResponse,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def get_recipe(body: RecipeRequest, request: Request) -> RecipeResponse:
    """Generate a recipe constrained to the supplied ingredients plus pantry basics."""
    service = request.app.state.recipe_service
    return await service.get_recipe(body)


async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def _upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} aborted: {exc}", extra={"service": exc.service})
    return JSONResponse(status_code=502, content={"error": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    """Map domain exceptions onto JSON error responses."""
    app.add_exception_handler(ValidationError, _validation_error_handler)
    app.add_exception_handler(UpstreamError, _upstream_error_handler)
