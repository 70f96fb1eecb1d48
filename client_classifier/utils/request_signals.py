"""
Runtime signal collection from HTTP requests
Reads the User-Agent and Sec-CH-UA* headers into RuntimeSignals
"""

import logging
import re
from typing import List, Mapping, Optional

from fastapi import Request

from client_classifier.core.config import settings
from client_classifier.core.models import ClientHintsBrand, ClientHintsData, RuntimeSignals

logger = logging.getLogger(__name__)

# "Google Chrome";v="140"  ->  brand text plus its parameter string
_MEMBER_PATTERN = re.compile(r'^"((?:[^"\\]|\\.)*)"\s*(.*)$', re.DOTALL)
_VERSION_PARAM_PATTERN = re.compile(r';\s*v\s*=\s*"?([^";]*)"?')
_ESCAPE_PATTERN = re.compile(r'\\(.)')


def _split_members(header: str) -> List[str]:
    """Split a structured-field list on commas that are not inside quotes"""
    members = []
    current = []
    in_quotes = False
    escaped = False

    for char in header:
        if escaped:
            current.append(char)
            escaped = False
            continue
        if char == "\\" and in_quotes:
            current.append(char)
            escaped = True
            continue
        if char == '"':
            in_quotes = not in_quotes
        if char == "," and not in_quotes:
            members.append("".join(current).strip())
            current = []
            continue
        current.append(char)

    members.append("".join(current).strip())
    return [m for m in members if m]


def parse_sec_ch_ua(header: Optional[str]) -> List[ClientHintsBrand]:
    """
    Parse a Sec-CH-UA header into brands

    Example:
        '"Chromium";v="140", "Not=A?Brand";v="24"'
        -> [ClientHintsBrand("Chromium", "140"), ClientHintsBrand("Not=A?Brand", "24")]

    Malformed members are skipped; the header is never rejected outright.
    """
    if not header:
        return []

    brands = []
    for member in _split_members(header):
        match = _MEMBER_PATTERN.match(member)
        if not match:
            logger.warning(f"Skipping malformed Sec-CH-UA member: {member[:80]!r}")
            continue

        brand = _ESCAPE_PATTERN.sub(r"\1", match.group(1))
        version_match = _VERSION_PARAM_PATTERN.search(match.group(2))
        brands.append(ClientHintsBrand(brand=brand, version=version_match.group(1) if version_match else ""))

    return brands


def parse_sec_ch_ua_mobile(header: Optional[str]) -> bool:
    """Structured boolean: "?1" is true, anything else false"""
    return (header or "").strip() == "?1"


def parse_sec_ch_ua_platform(header: Optional[str]) -> str:
    """Structured string: strip the surrounding quotes"""
    value = (header or "").strip()
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        value = value[1:-1]
    return value


def client_hints_from_headers(headers: Mapping[str, str]) -> Optional[ClientHintsData]:
    """
    Build ClientHintsData from request headers

    Returns None unless Sec-CH-UA yields at least one brand, so clients that
    do not send client hints fall through to the User-Agent path.
    """
    brands = parse_sec_ch_ua(headers.get("sec-ch-ua"))
    if not brands:
        return None

    return ClientHintsData(
        brands=tuple(brands),
        mobile=parse_sec_ch_ua_mobile(headers.get("sec-ch-ua-mobile")),
        platform=parse_sec_ch_ua_platform(headers.get("sec-ch-ua-platform")),
    )


def truncate_user_agent(user_agent: Optional[str]) -> str:
    """Limit User-Agent length before pattern matching"""
    user_agent = (user_agent or "").strip()
    if len(user_agent) > settings.MAX_USER_AGENT_LENGTH:
        logger.warning(f"User-Agent truncated from {len(user_agent)} characters")
        user_agent = user_agent[:settings.MAX_USER_AGENT_LENGTH]
    return user_agent


def collect_runtime_signals(
    request: Request,
    platform: str = "",
    max_touch_points: int = 0,
    is_brave: bool = False,
) -> RuntimeSignals:
    """
    Collect the runtime signals of the client making a request

    Headers carry the User-Agent and client hints; navigator.platform,
    navigator.maxTouchPoints and navigator.brave have no header equivalent
    and are supplied by the caller.

    Args:
        request: Incoming FastAPI request
        platform: navigator.platform reported by the page
        max_touch_points: navigator.maxTouchPoints reported by the page
        is_brave: Whether navigator.brave exists

    Returns:
        RuntimeSignals for the classifier
    """
    headers = request.headers
    client_hints = client_hints_from_headers(headers) if settings.ENABLE_CLIENT_HINTS else None

    return RuntimeSignals(
        user_agent=truncate_user_agent(headers.get("user-agent")),
        client_hints=client_hints,
        platform=platform or "",
        max_touch_points=max(0, max_touch_points or 0),
        is_brave=is_brave,
    )
