"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api import ingredients, recipes
from src.config import get_settings
from src.database import init_db

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    # Startup: make sure the tables exist
    init_db()
    yield


app = FastAPI(
    title="FODMAP Recipe API",
    description="Personal ingredient and recipe manager",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for configured browser clients
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register routers
app.include_router(ingredients.router)
app.include_router(recipes.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
