"""
Client Hints brand and platform mapping
Turns navigator.userAgentData brands/platform into canonical names
"""

import re
from typing import Optional, Sequence

from client_classifier.core.models import ClientHintsBrand, NameVersion, UNKNOWN


# Most recognizable brands first; GREASE entries never appear here
PREFERRED_BRANDS = ["Microsoft Edge", "Opera", "Google Chrome", "Chromium"]

# GREASE placeholders such as "Not A;Brand", "Not=A?Brand", "Not_A Brand"
PLACEHOLDER_BRAND_PATTERN = re.compile(r"not.*brand", re.IGNORECASE)

# Order matters: Edge and Opera brands also mention Chromium in some builds
BRAND_NAME_RULES = [
    (re.compile(r"edge", re.IGNORECASE), "Edge"),
    (re.compile(r"opera", re.IGNORECASE), "Opera"),
    (re.compile(r"chrome|chromium", re.IGNORECASE), "Chrome"),
]

PLATFORM_NAMES = {
    "windows": "Windows",
    "macos": "macOS",
    "android": "Android",
    "ios": "iOS",
    "chrome os": "Chrome OS",
    "chromeos": "Chrome OS",
    "linux": "Linux",
}


def normalize_brand(label: str) -> str:
    """
    Map a free-form brand label to a canonical browser name

    Args:
        label: Brand text from Client Hints (e.g. "Microsoft Edge")

    Returns:
        "Edge", "Opera", "Chrome", the label itself, or "Unknown" when empty
    """
    label = label or ""
    for pattern, name in BRAND_NAME_RULES:
        if pattern.search(label):
            return name
    return label or UNKNOWN


def is_placeholder_brand(label: str) -> bool:
    """True for GREASE brand entries"""
    return bool(PLACEHOLDER_BRAND_PATTERN.search(label or ""))


def select_brand(brands: Sequence[ClientHintsBrand]) -> Optional[ClientHintsBrand]:
    """
    Pick the brand that represents the real browser.

    Preferred brands win in list order. Otherwise the first non-placeholder
    brand is used, then the first brand of any kind.

    Args:
        brands: Brands in the order the client reported them

    Returns:
        The selected brand, or None for an empty list
    """
    for preferred in PREFERRED_BRANDS:
        for brand in brands:
            if (brand.brand or "").lower() == preferred.lower():
                return brand

    for brand in brands:
        if not is_placeholder_brand(brand.brand):
            return brand

    return brands[0] if brands else None


def map_platform(label: str) -> NameVersion:
    """Map a Client Hints platform label to an OS name (never versioned)"""
    label = label or ""
    name = PLATFORM_NAMES.get(label.lower())
    if name:
        return NameVersion(name=name)
    return NameVersion(name=label or UNKNOWN)
