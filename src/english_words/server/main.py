"""
English Words API Server.
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from english_words.core.settings import config_path
from english_words.server.deps import VAULT_ENV
from english_words.server.routes import document, lookups


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Settings from %s, word list in %s",
        config_path(),
        os.path.abspath(os.environ.get(VAULT_ENV, ".")),
    )
    yield


app = FastAPI(title="English Words API", lifespan=lifespan)

app.include_router(lookups.router)
app.include_router(document.router)


@app.get("/")
async def root():
    return {"name": "English Words API", "version": "0.1.0"}
