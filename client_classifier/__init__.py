"""
Client Classifier
Browser, OS, device type and engine detection from User-Agent strings and
User-Agent Client Hints
"""

from client_classifier.core.classifier import apply_vendor_override, classify
from client_classifier.core.models import (
    ClassificationResult,
    ClientHintsBrand,
    ClientHintsData,
    DeviceType,
    NameVersion,
    ResultSource,
    RuntimeSignals,
)

__version__ = "1.0.0"

__all__ = [
    "classify",
    "apply_vendor_override",
    "ClassificationResult",
    "ClientHintsBrand",
    "ClientHintsData",
    "DeviceType",
    "NameVersion",
    "ResultSource",
    "RuntimeSignals",
]
