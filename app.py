"""CHEF-TI Application - Ingredient-Constrained Recipe Service.

Single entry point for the HTTP service:
- Validates configuration (API keys, sampling parameters) fail-fast
- Wires the YouTube search and Gemini generation clients into RecipeService
- Serves POST /getRecipe and GET /health via FastAPI
- Serves the browser client from STATIC_DIR when the directory exists

Run with: python app.py
"""

from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from chefti.api.routes import register_error_handlers, router
from chefti.services.recipe_service import RecipeService, create_recipe_service
from chefti.utils.config import config
from chefti.utils.logger import logger


def create_app(recipe_service: Optional[RecipeService] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        recipe_service: Service handling /getRecipe. When omitted, one is built
            from configuration (which must then pass validation).

    Returns:
        Configured FastAPI instance.

    Raises:
        ValueError: If no service is supplied and configuration is invalid.
    """
    if recipe_service is None:
        logger.info("Initializing recipe service from configuration...")
        recipe_service = create_recipe_service()

    app = FastAPI(title="CHEF-TI Recipe Service", version="1.0.0")
    app.state.recipe_service = recipe_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(router)
    register_error_handlers(app)

    static_dir = Path(config.STATIC_DIR)
    if static_dir.is_dir():
        # Mounted last so API routes take precedence over "/"
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        logger.info(f"Serving browser client from {static_dir.resolve()}")

    return app


if __name__ == "__main__":
    try:
        application = create_app()
    except ValueError as e:
        logger.error(f"Configuration invalid: {e}")
        raise SystemExit(1) from e

    logger.info(f"Starting CHEF-TI on port {config.PORT}")
    logger.info(f"API docs available at: http://localhost:{config.PORT}/docs")
    uvicorn.run(application, host="0.0.0.0", port=config.PORT)
