"""
Client classification data model
Immutable value types shared by the structured-data and User-Agent paths
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


UNKNOWN = "Unknown"


class DeviceType(Enum):
    """Device form factor"""
    MOBILE = "Mobile"
    TABLET = "Tablet"
    DESKTOP = "Desktop"


class ResultSource(Enum):
    """Which resolution path produced a result"""
    STRUCTURED_DATA = "userAgentData"
    STRING_HEURISTIC = "userAgent"


@dataclass(frozen=True)
class NameVersion:
    """A classified attribute with an optional precise version"""
    name: str
    version: Optional[str] = None


@dataclass(frozen=True)
class ClientHintsBrand:
    """One vendor-reported brand claim (may be anti-fingerprinting noise)"""
    brand: str
    version: str = ""


@dataclass(frozen=True)
class ClientHintsData:
    """Low-entropy client hints: brands, mobile flag and platform label"""
    brands: Tuple[ClientHintsBrand, ...] = ()
    mobile: bool = False
    platform: str = ""


@dataclass(frozen=True)
class RuntimeSignals:
    """
    Ambient signals reported by the host runtime.

    Collected at the call boundary (HTTP headers, CLI flags) and passed into
    the classifier explicitly.
    """
    user_agent: str = ""
    client_hints: Optional[ClientHintsData] = None
    platform: str = ""                  # navigator.platform, e.g. "MacIntel"
    max_touch_points: int = 0
    is_brave: bool = False              # navigator.brave is present


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of a single classification call"""
    browser: NameVersion
    os: NameVersion
    device_type: DeviceType
    engine: str
    raw_identifier: str
    declared_platform: str
    source: ResultSource

    def to_dict(self) -> dict:
        """Plain dict form used by the API and CLI"""
        return {
            "browser": {"name": self.browser.name, "version": self.browser.version},
            "os": {"name": self.os.name, "version": self.os.version},
            "device_type": self.device_type.value,
            "engine": self.engine,
            "user_agent": self.raw_identifier,
            "platform": self.declared_platform,
            "source": self.source.value,
        }
