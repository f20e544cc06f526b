"""
Rule-based security suggestions derived from a diagnostic snapshot.
"""

from typing import List

from models.diagnostic_models import (
    SEVERITY_INFO,
    SEVERITY_SUCCESS,
    SEVERITY_WARNING,
    DiagnosticSnapshot,
    Suggestion,
)


def derive_suggestions(snapshot: DiagnosticSnapshot, secure_transport: bool) -> List[Suggestion]:
    """
    Evaluates every rule independently; the list keeps rule order:
    1. IP exposure (or masked identity)
    2. Hardware fingerprint
    3. Unencrypted page transport
    """
    suggestions = []

    if not snapshot.ip_masked:
        suggestions.append(Suggestion(
            severity=SEVERITY_WARNING,
            title="IP Address Exposed",
            text="Your public IP is visible. Use a VPN to mask your location.",
            icon="🕵️",
        ))
    else:
        suggestions.append(Suggestion(
            severity=SEVERITY_SUCCESS,
            title="Identity Masked",
            text="Your network identity is obscured from trackers.",
            icon="🎭",
        ))

    if snapshot.cores > 0:
        suggestions.append(Suggestion(
            severity=SEVERITY_INFO,
            title="Hardware Profile",
            text=f"{snapshot.cores} CPU cores detectable via fingerprinting.",
            icon="🧬",
        ))

    if not secure_transport:
        suggestions.append(Suggestion(
            severity=SEVERITY_WARNING,
            title="Unencrypted Path",
            text="Browsing over insecure HTTP. Use HTTPS everywhere.",
            icon="⚠️",
        ))

    return suggestions
