"""FastAPI application for search filter compilation.

Configuration (environment, or a .env file next to the project root):
    PORT          port the server is started on (informational, default 8080)
    LOG_LEVEL     root log level (default INFO)
    CORS_ORIGINS  comma-separated allowed origins (default *)
"""

import logging
import os
import sys
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.routes import filters

env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the effective configuration on startup."""
    logger.info(f"Starting {app.title} {app.version}")
    logger.info(f"Port: {os.getenv('PORT', '8080')}, log level: {LOG_LEVEL}")
    logger.info(f"CORS origins: {', '.join(CORS_ORIGINS) or '(none)'}")
    logger.info(f"Routes: {', '.join(sorted(r.path for r in filters.router.routes))}")
    yield
    logger.info(f"Stopped {app.title}")


app = FastAPI(
    title="Search Filter Compiler",
    description="Compiles filter-bar filters into Elasticsearch bool queries",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(filters.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
