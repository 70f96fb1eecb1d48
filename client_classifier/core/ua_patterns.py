"""
User-Agent pattern library
Ordered detection rules for browsers, operating systems, engines and devices.
Every list is evaluated first-match-wins, so order is significant.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Pattern


# Windows NT kernel version -> marketing name
WINDOWS_NT_VERSIONS = {
    "10.0": "10/11",
    "6.3": "8.1",
    "6.2": "8",
    "6.1": "7",
    "6.0": "Vista",
    "5.2": "Server 2003 / XP x64",
    "5.1": "XP",
    "5.0": "2000",
}


def map_windows_version(nt_version: str) -> str:
    """Translate an NT token (e.g. "6.1") to its marketing name"""
    return WINDOWS_NT_VERSIONS.get(nt_version, nt_version)


def underscores_to_dots(version: str) -> str:
    """Apple platforms write versions as 17_0_1"""
    return version.replace("_", ".")


def _identity(version: str) -> str:
    return version


@dataclass(frozen=True)
class OSRule:
    """
    One operating system rule.

    A rule with no pattern matches touch-enabled "MacIntel" hosts, which is
    how iPadOS 13+ presents itself in desktop mode.
    """
    name: str
    pattern: Optional[Pattern]
    version_pattern: Optional[Pattern] = None
    format_version: Callable[[str], str] = _identity


OS_RULES = (
    OSRule(
        "Windows",
        re.compile(r"\bWindows NT\b"),
        re.compile(r"Windows NT ([\d.]+)"),
        map_windows_version,
    ),
    OSRule(
        "Android",
        re.compile(r"\bAndroid\b", re.IGNORECASE),
        re.compile(r"Android (\d+(?:\.\d+)?)", re.IGNORECASE),
    ),
    OSRule(
        "iOS",
        re.compile(r"iPhone|iPad|iPod", re.IGNORECASE),
        re.compile(r"OS (\d+[_.\d]*)", re.IGNORECASE),
        underscores_to_dots,
    ),
    OSRule("iOS", None),
    OSRule(
        "macOS",
        re.compile(r"\bMac OS X\b"),
        re.compile(r"Mac OS X (\d+[_.\d]*)"),
        underscores_to_dots,
    ),
    OSRule("Chrome OS", re.compile(r"\bCrOS\b")),
    OSRule("Linux", re.compile(r"\bLinux\b")),
)

# (canonical name, pattern capturing the version)
# Edge and Opera embed a Chrome token, Chrome embeds a Safari token
BROWSER_RULES = (
    ("Edge", re.compile(r"EdgA?/([\d.]+)")),
    ("Opera", re.compile(r"OPR/([\d.]+)")),
    ("Samsung Internet", re.compile(r"SamsungBrowser/([\d.]+)")),
    ("Firefox", re.compile(r"(?:Firefox|FxiOS)/([\d.]+)")),
    ("Chrome", re.compile(r"(?:Chrome|CriOS)/([\d.]+)")),
    ("Safari", re.compile(r"Version/([\d.]+).*Safari")),
)

# Every iOS browser runs WebKit and looks like Safari; the app token tells them apart
IOS_BROWSER_RULES = (
    ("Chrome (iOS)", re.compile(r"CriOS")),
    ("Firefox (iOS)", re.compile(r"FxiOS")),
    ("Edge (iOS)", re.compile(r"EdgiOS")),
    ("Opera (iOS)", re.compile(r"OPiOS")),
    ("Safari", re.compile(r"Safari")),
)

IOS_DEVICE_PATTERN = re.compile(r"iPhone|iPad|iPod")

# Engine tokens
GECKO_PATTERN = re.compile(r"Gecko/\d", re.IGNORECASE)
FIREFOX_PATTERN = re.compile(r"Firefox/", re.IGNORECASE)
WEBKIT_PATTERN = re.compile(r"AppleWebKit/", re.IGNORECASE)
CHROMIUM_FAMILY_PATTERN = re.compile(r"Chrome|CriOS|OPR|Edg|SamsungBrowser")
TRIDENT_PATTERN = re.compile(r"Trident|MSIE")

# Device tokens
IPAD_PATTERN = re.compile(r"iPad")
ANDROID_PATTERN = re.compile(r"\bAndroid\b", re.IGNORECASE)
MOBILE_TOKEN_PATTERN = re.compile(r"\bMobile\b", re.IGNORECASE)
HANDHELD_PATTERN = re.compile(r"iPhone|iPod")

# navigator.platform reported by Intel Macs and by iPadOS in desktop mode
MAC_INTEL_PLATFORM = "MacIntel"


def is_touch_mac(platform: str, max_touch_points: int) -> bool:
    """A "Mac" with a multi-touch screen is an iPad in desktop mode"""
    return platform == MAC_INTEL_PLATFORM and (max_touch_points or 0) > 1


def rule_counts() -> dict:
    """Number of rules per category, reported by the status endpoint"""
    return {
        "os": len(OS_RULES),
        "browser": len(BROWSER_RULES),
        "ios_browser": len(IOS_BROWSER_RULES),
        "windows_versions": len(WINDOWS_NT_VERSIONS),
    }
