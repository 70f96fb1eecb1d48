"""
Client detection from the User-Agent string
Applies the pattern library to a raw User-Agent plus navigator.platform and
navigator.maxTouchPoints
"""

import logging

from client_classifier.core.models import (
    ClassificationResult,
    DeviceType,
    NameVersion,
    ResultSource,
    UNKNOWN,
)
from client_classifier.core.ua_patterns import (
    ANDROID_PATTERN,
    BROWSER_RULES,
    CHROMIUM_FAMILY_PATTERN,
    FIREFOX_PATTERN,
    GECKO_PATTERN,
    HANDHELD_PATTERN,
    IOS_BROWSER_RULES,
    IOS_DEVICE_PATTERN,
    IPAD_PATTERN,
    MOBILE_TOKEN_PATTERN,
    OS_RULES,
    TRIDENT_PATTERN,
    WEBKIT_PATTERN,
    is_touch_mac,
)

logger = logging.getLogger(__name__)


def detect_os(user_agent: str, platform: str = "", max_touch_points: int = 0) -> NameVersion:
    """
    Detect the operating system from a User-Agent string

    iOS is checked before macOS because iOS agents contain "like Mac OS X",
    and touch-enabled "MacIntel" hosts are treated as iPadOS.

    Args:
        user_agent: The User-Agent string
        platform: navigator.platform as reported by the client
        max_touch_points: navigator.maxTouchPoints

    Returns:
        NameVersion with the OS name, version None when not extractable
    """
    touch_mac = is_touch_mac(platform, max_touch_points)

    for rule in OS_RULES:
        if rule.pattern is None:
            if not touch_mac:
                continue
        elif not rule.pattern.search(user_agent):
            continue

        version = None
        if rule.version_pattern is not None:
            match = rule.version_pattern.search(user_agent)
            if match:
                version = rule.format_version(match.group(1))
        return NameVersion(name=rule.name, version=version)

    return NameVersion(name=UNKNOWN)


def detect_browser(user_agent: str) -> NameVersion:
    """
    Detect browser name and version from a User-Agent string
    """
    browser = NameVersion(name=UNKNOWN)
    for name, pattern in BROWSER_RULES:
        match = pattern.search(user_agent)
        if match:
            browser = NameVersion(name=name, version=match.group(1))
            break

    # Third-party iOS browsers; the version stays whatever the rules captured
    if IOS_DEVICE_PATTERN.search(user_agent):
        for name, pattern in IOS_BROWSER_RULES:
            if pattern.search(user_agent):
                browser = NameVersion(name=name, version=browser.version)
                break

    return browser


def detect_engine(user_agent: str) -> str:
    """Detect the rendering engine (Gecko, Blink, WebKit, Trident)"""
    if GECKO_PATTERN.search(user_agent) and FIREFOX_PATTERN.search(user_agent):
        return "Gecko"

    if WEBKIT_PATTERN.search(user_agent):
        # iOS browsers are all WebKit whatever token they carry
        if CHROMIUM_FAMILY_PATTERN.search(user_agent) and not IOS_DEVICE_PATTERN.search(user_agent):
            return "Blink"
        return "WebKit"

    if TRIDENT_PATTERN.search(user_agent):
        return "Trident"

    return UNKNOWN


def detect_device_type(user_agent: str, platform: str = "", max_touch_points: int = 0) -> DeviceType:
    """Tablet checks take precedence over mobile checks"""
    has_mobile_token = bool(MOBILE_TOKEN_PATTERN.search(user_agent))

    is_tablet = (
        bool(IPAD_PATTERN.search(user_agent))
        or (bool(ANDROID_PATTERN.search(user_agent)) and not has_mobile_token)
        or is_touch_mac(platform, max_touch_points)
    )
    if is_tablet:
        return DeviceType.TABLET

    if has_mobile_token or HANDHELD_PATTERN.search(user_agent):
        return DeviceType.MOBILE

    return DeviceType.DESKTOP


def detect_from_user_agent(
    user_agent: str,
    platform: str = "",
    max_touch_points: int = 0,
) -> ClassificationResult:
    """
    Classify a client from its User-Agent string

    Never fails: unmatched fields fall back to "Unknown" and Desktop.

    Args:
        user_agent: The User-Agent string (may be empty)
        platform: navigator.platform, used for iPadOS detection
        max_touch_points: navigator.maxTouchPoints, used for iPadOS detection

    Returns:
        ClassificationResult with source StringHeuristic
    """
    user_agent = user_agent or ""
    platform = platform or ""
    max_touch_points = max_touch_points or 0

    result = ClassificationResult(
        browser=detect_browser(user_agent),
        os=detect_os(user_agent, platform, max_touch_points),
        device_type=detect_device_type(user_agent, platform, max_touch_points),
        engine=detect_engine(user_agent),
        raw_identifier=user_agent,
        declared_platform=platform,
        source=ResultSource.STRING_HEURISTIC,
    )
    logger.debug(
        f"User-Agent classified: {result.browser.name} on {result.os.name} "
        f"({result.device_type.value}, {result.engine})"
    )
    return result
