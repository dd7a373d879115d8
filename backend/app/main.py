"""
main.py - FastAPI application for the club site.

Provides REST API endpoints:
- GET /health: System status check with row counts
- /api/teams, /api/players, /api/coaches, /api/matches, /api/news, /api/media:
  list, get-by-id, create (POST), full replace (PUT) and delete for each entity

Key Features:
- Database opened once at startup and disposed on shutdown (lifespan handler)
- Uniform {"error": "..."} bodies for validation (400), missing rows (404),
  unknown team references (400) and database failures (500)
- CORS middleware for the Streamlit front end
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Depends, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import models, schemas
from .database import Database, get_db
from .routers import coaches, matches, media, news, players, teams
from utils.config_loader import AppSettings, get_settings

logger = logging.getLogger(__name__)

COUNTED_MODELS = {
    "teams": models.Team,
    "players": models.Player,
    "coaches": models.Coach,
    "matches": models.Match,
    "news": models.News,
    "media": models.Media,
}


# =============================================================================
# LIFESPAN HANDLER (Open the database once at startup)
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    On startup:
    - Opens the configured database and creates missing tables
    - Optionally inserts the demo team and players

    On shutdown:
    - Disposes the engine
    """
    settings: AppSettings = app.state.settings
    logger.info("🚀 Starting club site API...")

    database = Database(settings.database_url)
    database.create_all()
    app.state.database = database
    logger.info(f"✅ Database ready at {settings.database_url}")

    if settings.seed_demo_data:
        from etl.seed_data import seed_demo_data

        session = database.session()
        try:
            inserted = seed_demo_data(session)
            logger.info(f"Seeded {inserted} demo rows")
        finally:
            session.close()

    yield  # Application runs here

    logger.info("👋 Shutting down club site API...")
    database.dispose()
    app.state.database = None


# =============================================================================
# ERROR HANDLERS
# =============================================================================

async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    logger.info(f"Rejected {request.method} {request.url.path}: {messages}")
    return JSONResponse(status_code=400, content={"error": "; ".join(messages) or "Invalid request"})


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# =============================================================================
# FASTAPI APP INITIALIZATION
# =============================================================================

def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """Build the API with its middleware, routers and error handlers."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="Club Site API",
        description="REST API for the club's teams, players, coaches, matches, news and media",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = None

    # Credentials cannot be combined with a wildcard origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
        return response

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)

    for router in (teams.router, players.router, coaches.router, matches.router, news.router, media.router):
        app.include_router(router)

    @app.get("/")
    def read_root():
        return {"message": "Club site backend is running"}

    @app.get("/health", response_model=schemas.HealthResponse)
    def health_check(db: Session = Depends(get_db)):
        """
        System health check endpoint.

        Returns:
        - status: "healthy" if API is running
        - database: "connected" if SQLite is accessible
        - counts: number of rows per entity
        """
        try:
            counts = {name: db.query(model).count() for name, model in COUNTED_MODELS.items()}
        except SQLAlchemyError as e:
            logger.error(f"Health check failed: {e}")
            raise HTTPException(status_code=503, detail="Database unavailable")
        return {"status": "healthy", "database": "connected", "counts": counts}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)
