from fastapi import FastAPI
from typing import Any, AsyncGenerator
from .routers import search
from contextlib import asynccontextmanager
import os
import logging
from dotenv import load_dotenv
from vufind_search.config.backends import close_default_backend_registry

# Configure logging at module level
logging.basicConfig(
    level=logging.WARNING,  # Set default to WARNING for all loggers
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)

# Set your application loggers to DEBUG
logging.getLogger("vufind_search").setLevel(logging.DEBUG)

# Keep third-party loggers at INFO or WARNING to reduce noise
logging.getLogger("uvicorn.access").setLevel(logging.INFO)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[Any, Any]:
    # Load environment variables at startup
    env_path = os.path.join(os.path.dirname(__file__), "..", ".env")
    if os.path.exists(env_path):
        load_dotenv(env_path)
        logger.info(f"Loaded environment from {env_path}")
    else:
        logger.info(f"No .env file found at {env_path}, using system environment variables")
    yield

    # Close backend HTTP clients on shutdown
    close_default_backend_registry()


app = FastAPI(
    lifespan=lifespan,
    title="VuFind Search Commands",
    description="API dispatching typed search commands to pluggable search backends",
    version="1.0.0",
)

# Include routers
app.include_router(search.router)


@app.get("/")
def root() -> dict[str, Any]:
    return {
        "message": "VuFind search command service",
        "docs": "/docs",
        "health": "/search/healthz",
    }
