"""Main FastAPI application entry point."""

import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import health, generation
from .providers import GeminiClient
from .core import PromptEnhancer, ImageGenerator, Orchestrator, SessionStore
from .utils.config import load_config
from .utils.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown.

    Initializes the provider client and core components on startup,
    closes the client on shutdown.
    """
    logger.info("Application starting up...")

    try:
        config = load_config(os.getenv("IMAGE_STUDIO_CONFIG"))

        gemini = GeminiClient(
            api_key=config.gemini_api_key,
            base_url=config.gemini_base_url,
            timeout=config.timeout_gemini_seconds,
        )
        await gemini.initialize()

        enhancer = PromptEnhancer(
            text_client=gemini,
            model_name=config.text_model.name,
        )
        generator = ImageGenerator(
            image_client=gemini,
            model_name=config.image_model.name,
            output_mime_type=config.image_model.output_mime_type,
        )
        orchestrator = Orchestrator(enhancer=enhancer, generator=generator)
        sessions = SessionStore(orchestrator, ttl_seconds=config.session_ttl_seconds)

        logger.info("Core components initialized")

        app.state.config = config
        app.state.gemini = gemini
        app.state.orchestrator = orchestrator
        app.state.sessions = sessions

    except Exception as e:
        logger.error(f"Startup failed: {e}")
        raise

    logger.info("Application startup complete")

    yield

    logger.info("Application shutting down...")
    await gemini.close()
    logger.info("Application shutdown complete")


def create_app(use_lifespan: bool = True) -> FastAPI:
    """Build the application; tests pass use_lifespan=False and wire app.state."""
    app = FastAPI(
        title="Image Studio",
        description="Prompt-enhanced text-to-image generation",
        version=__version__,
        lifespan=lifespan if use_lifespan else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(generation.router, tags=["generation"])

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": "image-studio",
            "version": __version__,
            "status": "running",
            "docs": "/docs",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", 8000))

    uvicorn.run(
        "image_studio.main:app",
        host="0.0.0.0",
        port=port,
        reload=os.getenv("APP_ENV", "development") == "development",
        log_level="info",
    )
