"""
Health routes.
Owns: Liveness probe and naming diagnostics.
"""

from typing import Any

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(request: Request) -> dict[str, Any]:
    return {
        "status": "ok",
        "segment_name": getattr(request.state, "segment_name", None),
    }
