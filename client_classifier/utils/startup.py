"""
Startup initialization logic
Verifies the detection rules and records readiness on server startup
"""

import logging
from fastapi import FastAPI

from client_classifier.core.classifier import classify
from client_classifier.core.config import settings
from client_classifier.core.ua_patterns import rule_counts

logger = logging.getLogger(__name__)

# Known agent used to confirm the rule tables load and match
_SELF_CHECK_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/129.0.6668.59 Safari/537.36"
)


async def initialize_system(app: FastAPI):
    """
    Initialize system components on startup

    Args:
        app: FastAPI application instance
    """
    app.state.initialized = False
    app.state.init_error = None
    app.state.rule_counts = {}

    try:
        logger.info("[1/2] Loading detection rules...")
        app.state.rule_counts = rule_counts()
        logger.info(f"Loaded rules: {app.state.rule_counts}")

        logger.info("[2/2] Running classifier self-check...")
        result = classify(_SELF_CHECK_USER_AGENT)
        if result.browser.name != "Chrome" or result.os.name != "Windows":
            raise RuntimeError(f"Self-check misclassified agent as {result.browser.name} on {result.os.name}")

        app.state.initialized = True
        logger.info(f"Classifier ready (client hints {'enabled' if settings.ENABLE_CLIENT_HINTS else 'disabled'})")

    except Exception as e:
        logger.error(f"Startup failed: {e}")
        app.state.init_error = str(e)
        raise


def get_init_status(app: FastAPI) -> dict:
    """Get current initialization status"""
    return {
        "initialized": getattr(app.state, "initialized", False),
        "rule_counts": getattr(app.state, "rule_counts", {}),
        "client_hints_enabled": settings.ENABLE_CLIENT_HINTS,
        "error": getattr(app.state, "init_error", None)
    }
