"""Unit tests for the classify entry point and vendor override."""

import pytest

from client_classifier import (
    ClientHintsBrand,
    ClientHintsData,
    DeviceType,
    NameVersion,
    ResultSource,
    RuntimeSignals,
    apply_vendor_override,
    classify,
)
from client_classifier.core.ua_detector import detect_from_user_agent
from tests.conftest import USER_AGENTS


CHROME_HINTS = ClientHintsData(
    brands=(
        ClientHintsBrand("Chromium", "140"),
        ClientHintsBrand("Not=A?Brand", "24"),
        ClientHintsBrand("Google Chrome", "140"),
    ),
    mobile=False,
    platform="Windows",
)


class TestClassify:
    """Tests for classify."""

    def test_android_edge(self) -> None:
        """Edge on an Android phone."""
        result = classify(USER_AGENTS["android_edge"])

        assert result.os == NameVersion("Android", "13")
        assert result.device_type == DeviceType.MOBILE
        assert result.browser.name == "Edge"

    def test_iphone_safari(self) -> None:
        """Safari on an iPhone."""
        result = classify(USER_AGENTS["iphone_safari"])

        assert result.os == NameVersion("iOS", "17.0")
        assert result.browser == NameVersion("Safari", "17.0")
        assert result.engine == "WebKit"

    def test_windows_chrome(self) -> None:
        """Chrome on Windows."""
        result = classify(USER_AGENTS["windows_chrome"])

        assert result.os == NameVersion("Windows", "10/11")
        assert result.device_type == DeviceType.DESKTOP
        assert result.engine == "Blink"

    def test_unknown_agent(self) -> None:
        """Unrecognized agents never fail."""
        result = classify(USER_AGENTS["unknown"])

        assert result.os.name == "Unknown"
        assert result.browser.name == "Unknown"
        assert result.device_type == DeviceType.DESKTOP
        assert result.engine == "Unknown"

    def test_no_input_at_all(self) -> None:
        """No override and no signals still returns a result."""
        result = classify()

        assert result.browser.name == "Unknown"
        assert result.source == ResultSource.STRING_HEURISTIC

    def test_idempotent(self) -> None:
        """Identical inputs give identical results."""
        signals = RuntimeSignals(user_agent=USER_AGENTS["mac_safari"], platform="MacIntel", max_touch_points=5)
        assert classify(signals=signals) == classify(signals=signals)
        assert classify(USER_AGENTS["android_samsung"]) == classify(USER_AGENTS["android_samsung"])


class TestPrecedence:
    """Tests for the client hints / User-Agent precedence."""

    def test_client_hints_win_over_user_agent(self) -> None:
        """Structured data is used even when the string says otherwise."""
        signals = RuntimeSignals(user_agent=USER_AGENTS["linux_firefox"], client_hints=CHROME_HINTS)
        result = classify(signals=signals)

        assert result.source == ResultSource.STRUCTURED_DATA
        assert result.browser == NameVersion("Chrome", "140")
        assert result.os.name == "Windows"
        assert result.raw_identifier == USER_AGENTS["linux_firefox"]

    def test_falls_back_to_user_agent(self) -> None:
        """Without client hints the runtime User-Agent is parsed."""
        signals = RuntimeSignals(user_agent="  " + USER_AGENTS["linux_firefox"] + "  ")
        result = classify(signals=signals)

        assert result.source == ResultSource.STRING_HEURISTIC
        assert result.browser == NameVersion("Firefox", "121.0")
        assert result.raw_identifier == USER_AGENTS["linux_firefox"]

    def test_override_skips_client_hints(self) -> None:
        """An explicit User-Agent bypasses structured data."""
        signals = RuntimeSignals(user_agent=USER_AGENTS["windows_chrome"], client_hints=CHROME_HINTS)
        result = classify(USER_AGENTS["iphone_safari"], signals)

        assert result.source == ResultSource.STRING_HEURISTIC
        assert result.browser.name == "Safari"
        assert result.raw_identifier == USER_AGENTS["iphone_safari"]

    def test_override_uses_platform_signals(self) -> None:
        """Touch signals still apply to an explicit User-Agent."""
        signals = RuntimeSignals(platform="MacIntel", max_touch_points=5)
        result = classify(USER_AGENTS["mac_safari"], signals)

        assert result.os == NameVersion("iOS", None)
        assert result.device_type == DeviceType.TABLET

    def test_empty_override_is_ignored(self) -> None:
        """An empty override behaves like no override."""
        result = classify("", RuntimeSignals(client_hints=CHROME_HINTS))
        assert result.source == ResultSource.STRUCTURED_DATA


class TestVendorOverride:
    """Tests for the Brave relabelling."""

    def test_brave_on_string_path(self) -> None:
        """Chrome becomes Brave when the flag is set."""
        result = classify(USER_AGENTS["windows_chrome"], RuntimeSignals(is_brave=True))

        assert result.browser == NameVersion("Brave", "129.0.6668.59")
        assert result.engine == "Blink"
        assert result.source == ResultSource.STRING_HEURISTIC

    def test_brave_on_client_hints_path(self) -> None:
        """The override also applies to structured results."""
        result = classify(signals=RuntimeSignals(client_hints=CHROME_HINTS, is_brave=True))

        assert result.browser.name == "Brave"
        assert result.source == ResultSource.STRUCTURED_DATA

    def test_no_flag_no_override(self) -> None:
        """Without the flag Chrome stays Chrome."""
        assert classify(USER_AGENTS["windows_chrome"]).browser.name == "Chrome"

    @pytest.mark.parametrize("key", [
        "windows_edge", "windows_opera", "linux_firefox", "mac_safari",
        "iphone_chrome", "android_samsung", "unknown",
    ])
    def test_other_browsers_untouched(self, key: str) -> None:
        """Only the exact name Chrome is ever relabelled."""
        plain = classify(USER_AGENTS[key])
        flagged = classify(USER_AGENTS[key], RuntimeSignals(is_brave=True))
        assert flagged == plain

    def test_override_returns_new_result(self) -> None:
        """The original result is not mutated."""
        original = detect_from_user_agent(USER_AGENTS["windows_chrome"])
        relabelled = apply_vendor_override(original, True)

        assert original.browser.name == "Chrome"
        assert relabelled.browser.name == "Brave"
        assert relabelled.os == original.os
