"""Heartbeat and seeding endpoints."""

from fastapi import APIRouter

from courseapi.api.dependencies import DatabaseDep
from courseapi.api.models import OkResponse
from courseapi.store import seed_database

router = APIRouter(tags=["system"])


@router.get("/heartbeat", response_model=OkResponse)
def heartbeat() -> OkResponse:
    """Liveness check."""
    return OkResponse()


@router.post("/seed", response_model=OkResponse)
def seed(database: DatabaseDep) -> OkResponse:
    """Wipe courses and students and load the fixed seed set."""
    seed_database(database)
    return OkResponse()
