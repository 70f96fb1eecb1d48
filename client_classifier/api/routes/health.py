"""
Health check endpoint
Provides system status information
"""

from typing import Dict, Optional
from fastapi import APIRouter, Request
from pydantic import BaseModel
from datetime import datetime, timezone
import time

from client_classifier import __version__
from client_classifier.utils.startup import get_init_status

router = APIRouter()

# Track startup time
_startup_time = time.time()


class HealthResponse(BaseModel):
    """Health check response model"""
    status: str
    version: str
    uptime_seconds: float
    timestamp: str


class StatusResponse(BaseModel):
    """System status response model"""
    ready: bool
    rule_counts: Dict[str, int]
    client_hints_enabled: bool
    error: Optional[str]


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint

    Returns:
        HealthResponse: System health status
    """
    uptime = time.time() - _startup_time

    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=round(uptime, 2),
        timestamp=datetime.now(timezone.utc).isoformat()
    )


@router.get("/status", response_model=StatusResponse)
async def system_status(request: Request):
    """
    System status endpoint - classifier readiness and rule counts

    Returns:
        StatusResponse: Rule tables and configuration state
    """
    status = get_init_status(request.app)

    return StatusResponse(
        ready=status["initialized"],
        rule_counts=status["rule_counts"],
        client_hints_enabled=status["client_hints_enabled"],
        error=status["error"]
    )
