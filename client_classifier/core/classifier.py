"""
Client classification entry point
Reconciles the Client Hints and User-Agent paths and applies vendor overrides
"""

import logging
from dataclasses import replace
from typing import Optional

from client_classifier.core.hints_detector import detect_from_client_hints
from client_classifier.core.models import ClassificationResult, RuntimeSignals
from client_classifier.core.ua_detector import detect_from_user_agent

logger = logging.getLogger(__name__)


def apply_vendor_override(result: ClassificationResult, is_brave: bool) -> ClassificationResult:
    """
    Relabel Chrome as Brave when the client exposes navigator.brave

    Brave reports itself exactly like Chrome otherwise. No other browser name
    is ever changed.
    """
    if is_brave and result.browser.name == "Chrome":
        logger.debug("Brave capability flag set, relabelling Chrome as Brave")
        return replace(result, browser=replace(result.browser, name="Brave"))
    return result


def classify(
    user_agent: Optional[str] = None,
    signals: Optional[RuntimeSignals] = None,
) -> ClassificationResult:
    """
    Classify a client's browser, OS, device type and engine

    Priority:
    1. An explicit user_agent skips Client Hints and parses that string
    2. Client Hints data, when the runtime provides it
    3. The runtime's own User-Agent string

    Args:
        user_agent: Optional User-Agent to classify instead of the runtime's
        signals: Ambient runtime signals (User-Agent, client hints, platform,
                 touch points, Brave flag)

    Returns:
        ClassificationResult; never raises for missing or odd input
    """
    signals = signals or RuntimeSignals()
    result = None

    if not user_agent:
        result = detect_from_client_hints(signals.client_hints, (signals.user_agent or "").strip())

    if result is None:
        result = detect_from_user_agent(
            user_agent or (signals.user_agent or "").strip(),
            signals.platform,
            signals.max_touch_points,
        )

    return apply_vendor_override(result, signals.is_brave)
