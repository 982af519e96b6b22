import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.settings import AppSettings, load_settings
from core.generate.summarizer import build_summarizer
from api.middleware import BodySizeLimitMiddleware, BodyTooLarge
from api.routes import health, summarize

logger = logging.getLogger(__name__)

def create_app(settings: AppSettings | None = None) -> FastAPI:
    """
    Builds the API around one settings object. The summarizer strategy is
    chosen here, once, and handed to the routes through app.state.
    """
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # --- Startup ---
        logger.info(f"Summarization API starting (strategy={app.state.summarizer.name})")
        yield
        # --- Shutdown ---
        logger.info("Shutting down summarization API...")

    app = FastAPI(
        title="Smart Content Summarizer API",
        description="Condenses text into short, medium or detailed summaries",
        version="1.0.0",
        lifespan=lifespan
    )

    # Built eagerly so a bad strategy fails at startup, not on first request
    app.state.settings = settings
    app.state.summarizer = build_summarizer(settings)

    # Added first so CORS headers also wrap its 413 responses
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.api.max_body_bytes)

    # The browser form is served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(BodyTooLarge)
    async def body_too_large_handler(request: Request, exc: BodyTooLarge):
        return JSONResponse(status_code=413, content={"error": exc.detail})

    # Malformed or non-string bodies get the same answer as short text
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Rejected invalid body on {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": summarize.VALIDATION_MESSAGE})

    app.include_router(health.router, prefix="/api", tags=["System"])
    app.include_router(summarize.router, prefix="/api", tags=["Summarization"])

    @app.get("/", tags=["System"])
    def root():
        return {"message": "Smart Content Summarizer API is running."}

    return app

def configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
