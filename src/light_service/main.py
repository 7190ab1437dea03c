"""
Light Service GraphQL

FastAPI + Strawberry GraphQL service exposing a single in-memory light:
one query to read it, one mutation to turn it on or off.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from light_service import __version__
from light_service.core.config import Settings, get_settings
from light_service.core.logging import setup_logger
from light_service.data.availability import AvailabilityPolicy, RandomAvailability
from light_service.data.repository import LightRepository
from light_service.schema import create_graphql_router
from light_service.service import LightService


def create_app(
    settings: Optional[Settings] = None,
    availability: Optional[AvailabilityPolicy] = None
) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        settings: Settings to use (defaults to the environment)
        availability: Policy deciding whether the light answers a mutation
            (defaults to RandomAvailability with settings.failure_rate)

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()
    logger = setup_logger("light_service", "DEBUG" if settings.debug else settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        repository = LightRepository(settings)
        app.state.light_service = LightService(
            repository,
            availability or RandomAvailability(settings.failure_rate),
        )
        logger.info(f"🚀 {settings.service_name} starting up...")
        logger.info(f"📊 Environment: {settings.environment}")
        logger.info(f"💡 Serving light: {repository.peek().name}")
        logger.info(f"🌐 GraphQL endpoint: http://{settings.host}:{settings.port}/graphql")
        yield
        logger.info(f"🛑 {settings.service_name} shutting down...")

    app = FastAPI(
        title="Light Service GraphQL",
        description="Single light service - query its state, turn it on or off",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.metrics_enabled:
        Instrumentator().instrument(app).expose(app)

    # GraphQL router
    app.include_router(create_graphql_router(), prefix="/graphql")

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        light = app.state.light_service.repository.peek()
        return {
            "status": "healthy",
            "service": settings.service_name,
            "light_id": light.id,
            "on": light.on
        }

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "service": settings.service_name,
            "version": __version__,
            "graphql": "/graphql",
            "graphiql": "/graphql (browser)"
        }

    return app


app = create_app()


def run():
    """Console entry point"""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "light_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )


if __name__ == "__main__":
    run()
