"""
Client Detection API Endpoints
Classifies the calling client, or an explicit User-Agent, into browser, OS,
device type and rendering engine
"""

import logging
from dataclasses import replace
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel, Field
from slowapi import Limiter
from slowapi.util import get_remote_address

from client_classifier.core.classifier import classify
from client_classifier.core.config import settings
from client_classifier.core.models import ClassificationResult
from client_classifier.core.schemas import ClientHintsModel
from client_classifier.utils.request_signals import collect_runtime_signals, truncate_user_agent

logger = logging.getLogger(__name__)
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)
router = APIRouter()


class NameVersionResponse(BaseModel):
    """Name with optional version"""
    name: str
    version: Optional[str]


class ClassificationResponse(BaseModel):
    """Response model for client classification"""
    browser: NameVersionResponse
    os: NameVersionResponse
    device_type: str
    engine: str
    user_agent: str
    platform: str
    source: str


class ClassifyRequest(BaseModel):
    """
    Explicit classification request

    A non-empty user_agent is classified as-is and client hints are ignored.
    Without it, client_hints are used when given, then the request's own
    User-Agent header.
    """
    user_agent: Optional[str] = Field(default=None, description="User-Agent string to classify")
    client_hints: Optional[ClientHintsModel] = None
    platform: str = Field(default="", description="navigator.platform")
    max_touch_points: int = Field(default=0, ge=0, description="navigator.maxTouchPoints")
    brave: bool = Field(default=False, description="navigator.brave is present")


def _to_response(result: ClassificationResult) -> ClassificationResponse:
    return ClassificationResponse(**result.to_dict())


@router.get("/client/detect", response_model=ClassificationResponse)
@limiter.limit(settings.RATE_LIMIT_DETECT)
async def detect_client(
    request: Request,
    platform: str = Query(default="", max_length=64, description="navigator.platform"),
    max_touch_points: int = Query(default=0, ge=0, description="navigator.maxTouchPoints"),
    brave: bool = Query(default=False, description="navigator.brave is present"),
) -> ClassificationResponse:
    """
    Detect the calling client's browser, OS, device type and engine

    Reads the User-Agent and Sec-CH-UA headers. Client hints, when sent,
    take precedence over the User-Agent string.

    Returns:
        ClassificationResponse for the caller
    """
    try:
        signals = collect_runtime_signals(request, platform, max_touch_points, brave)
        result = classify(signals=signals)
        logger.info(f"Detected client: {result.browser.name} on {result.os.name} via {result.source.value}")
        return _to_response(result)
    except Exception as e:
        logger.error(f"Client detection failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to detect client")


@router.post("/client/classify", response_model=ClassificationResponse)
@limiter.limit(settings.RATE_LIMIT_CLASSIFY)
async def classify_client(request: Request, body: ClassifyRequest) -> ClassificationResponse:
    """
    Classify an explicit User-Agent or set of client hints

    Returns:
        ClassificationResponse for the supplied signals
    """
    try:
        client_hints = body.client_hints.to_client_hints() if body.client_hints is not None else None

        signals = collect_runtime_signals(request, body.platform, body.max_touch_points, body.brave)
        signals = replace(signals, client_hints=client_hints)

        result = classify(truncate_user_agent(body.user_agent) or None, signals)
        return _to_response(result)
    except Exception as e:
        logger.error(f"Client classification failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to classify client")
