"""
Client detection from User-Agent Client Hints
Only Chromium-based browsers expose navigator.userAgentData, so the engine
defaults to Blink
"""

import logging
import re
from typing import Optional

from client_classifier.core.brand_mapper import map_platform, normalize_brand, select_brand
from client_classifier.core.models import (
    ClassificationResult,
    ClientHintsData,
    DeviceType,
    NameVersion,
    ResultSource,
)

logger = logging.getLogger(__name__)

# Android, iOS and unmapped labels such as "iPadOS" or "Android TV"
MOBILE_OS_PATTERN = re.compile(r"android|ios", re.IGNORECASE)

ENGINE_BY_BROWSER = {
    "Firefox": "Gecko",
    "Safari": "WebKit",
}
DEFAULT_ENGINE = "Blink"


def device_type_from_os(os_name: str) -> DeviceType:
    """Client hints cannot tell tablets from phones, so Tablet is never returned"""
    return DeviceType.MOBILE if MOBILE_OS_PATTERN.search(os_name or "") else DeviceType.DESKTOP


def detect_from_client_hints(
    data: Optional[ClientHintsData],
    user_agent: str = "",
) -> Optional[ClassificationResult]:
    """
    Classify a client from its Client Hints data

    Args:
        data: Low-entropy client hints, None when the client exposes none
        user_agent: The client's own User-Agent, kept on the result for reference

    Returns:
        ClassificationResult with source StructuredData, or None without data
    """
    if data is None:
        return None

    brand = select_brand(data.brands)
    browser = NameVersion(
        name=normalize_brand(brand.brand if brand else ""),
        version=(brand.version or None) if brand else None,
    )

    os_info = map_platform(data.platform)
    device_type = DeviceType.MOBILE if data.mobile else device_type_from_os(os_info.name)

    logger.debug(f"Client hints classified: {browser.name} on {os_info.name} (mobile={data.mobile})")

    return ClassificationResult(
        browser=browser,
        os=os_info,
        device_type=device_type,
        engine=ENGINE_BY_BROWSER.get(browser.name, DEFAULT_ENGINE),
        raw_identifier=user_agent or "",
        declared_platform=data.platform or "",
        source=ResultSource.STRUCTURED_DATA,
    )
