"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Must run before importing modules that read env vars at import time
load_dotenv()

# main.py is at <root>/src/api/main.py
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.routes import dictionary, health, words
from adapter.mongodb.connection import get_database
from adapter.mongodb.word_repository import MongoWordRepository
from utils.logging import setup_structured_logging

setup_structured_logging()

logger = logging.getLogger(__name__)

_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "Wordbook API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: ensure MongoDB indexes when the database is reachable."""
    db = get_database()
    if db is None:
        logger.warning("MongoDB unavailable, skipping index creation")
    elif MongoWordRepository(db).ensure_indexes():
        logger.info("MongoDB indexes verified/created successfully")
    else:
        logger.warning("Failed to create some MongoDB indexes")

    yield


app = FastAPI(
    title=SERVICE_NAME,
    description="Personal vocabulary book with multi-source dictionary lookup",
    version=VERSION,
    lifespan=lifespan,
)

# "*" cannot be combined with credentials; explicit origins can
cors_origins_env = os.getenv("CORS_ORIGINS", "*")
if cors_origins_env == "*":
    cors_origins = ["*"]
    allow_credentials = False
else:
    cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]
    allow_credentials = True

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(words.router)
app.include_router(dictionary.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port, access_log=False)
