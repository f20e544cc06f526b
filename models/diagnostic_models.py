"""
Data Models for the System Audit
================================

Values exchanged between the environment probe, the diagnostic collector and
the dashboard. All of them are immutable and safe to share between reruns.
"""

from dataclasses import dataclass
from typing import Optional

BLOCKED_IP = "Blocked"
UNAVAILABLE_IP = "Unavailable"
DETECTION_BLOCKED_IP = "Detection Blocked"
SENTINEL_IPS = frozenset({BLOCKED_IP, UNAVAILABLE_IP, DETECTION_BLOCKED_IP})

FALLBACK_ISP = "VPN/Firewall Active"
FALLBACK_LOCATION = "Restricted"

SEVERITY_WARNING = "warning"
SEVERITY_INFO = "info"
SEVERITY_SUCCESS = "success"


@dataclass(frozen=True)
class EnvironmentHints:
    """Raw local introspection values supplied by the host runtime."""
    user_agent: str = ""
    platform: str = ""
    cores: int = 0
    device_memory: Optional[float] = None
    effective_type: Optional[str] = None
    downlink: Optional[float] = None
    rtt: Optional[int] = None


@dataclass(frozen=True)
class NetworkInfo:
    ip: str = BLOCKED_IP
    isp: str = FALLBACK_ISP
    location: str = FALLBACK_LOCATION

    @property
    def is_masked(self) -> bool:
        return self.ip in SENTINEL_IPS


@dataclass(frozen=True)
class DiagnosticSnapshot:
    ip: str
    isp: str
    location: str
    connection_type: str
    downlink: str
    rtt: str
    user_agent: str
    platform: str
    cores: int
    memory: str

    @property
    def ip_masked(self) -> bool:
        return self.ip in SENTINEL_IPS


@dataclass(frozen=True)
class Suggestion:
    severity: str
    title: str
    text: str
    icon: str
