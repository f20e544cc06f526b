"""
Environment Probe
=================

Collects the local introspection values for the system audit. In the
dashboard the browser talks to the server over HTTP, so user agent, device
memory and connection quality come from the request headers (including the
Client Hints ``Device-Memory``, ``ECT``, ``Downlink`` and ``RTT``). Platform
and core count fall back to the server runtime when the browser does not
expose them.
"""

import math
import os
import platform
from typing import Mapping, Optional
from urllib.parse import urlparse

from models.diagnostic_models import EnvironmentHints


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    # Streamlit headers are case-insensitive, plain dicts used in tests are not
    for key, value in headers.items():
        if key.lower() == name.lower():
            return value.strip() if isinstance(value, str) else value
    return None


def _to_float(value: Optional[str]) -> Optional[float]:
    if value in (None, ""):
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    # Headers are client-controlled: reject inf, nan and negatives
    if not math.isfinite(number) or number < 0:
        return None
    return number


def _to_int(value: Optional[str]) -> Optional[int]:
    number = _to_float(value)
    return int(number) if number is not None else None


def probe_environment(headers: Optional[Mapping[str, str]] = None) -> EnvironmentHints:
    headers = headers or {}

    client_platform = _header(headers, "Sec-CH-UA-Platform")
    if client_platform:
        client_platform = client_platform.strip('"')

    return EnvironmentHints(
        user_agent=_header(headers, "User-Agent") or "",
        platform=client_platform or platform.system() or "Unknown",
        cores=os.cpu_count() or 0,
        device_memory=_to_float(_header(headers, "Device-Memory")),
        effective_type=_header(headers, "ECT") or None,
        downlink=_to_float(_header(headers, "Downlink")),
        rtt=_to_int(_header(headers, "RTT")),
    )


def is_secure_transport(headers: Optional[Mapping[str, str]] = None) -> bool:
    """True when the page was served over HTTPS, as seen through the proxy headers."""
    headers = headers or {}

    forwarded_proto = _header(headers, "X-Forwarded-Proto")
    if forwarded_proto:
        # Proxy chains list every hop; the first one faces the browser
        return forwarded_proto.split(",")[0].strip().lower() == "https"

    origin = _header(headers, "Origin") or _header(headers, "Referer")
    if origin:
        return urlparse(origin).scheme == "https"
    return False
