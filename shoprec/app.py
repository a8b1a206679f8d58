from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .catalog.data_store import get_snapshot, load_snapshot
from .data_ingestion.config import DEFAULT_DATA_CONFIG
from .recommendations.models import RecommendationRequest, UserRecommendations
from .recommendations.retrieval import get_recommendations

logger = logging.getLogger(__name__)

_DATA_CONFIG = DEFAULT_DATA_CONFIG


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Build the snapshot before the first request; a DatasetLoadError here
    # aborts startup.
    load_snapshot(_DATA_CONFIG)
    logger.info("Recommendation service ready")
    yield


app = FastAPI(title="Purchase Recommendation API", version="1.0.0", lifespan=lifespan)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return get_snapshot().describe()


# Plain ``def`` handlers run on the threadpool, one worker per request, all
# reading the same immutable snapshot.


@app.post("/recommendations", response_model=UserRecommendations)
def recommendations(body: RecommendationRequest) -> UserRecommendations:
    return get_recommendations(body)
