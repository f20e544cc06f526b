"""
DiagnosticCollector Module (Async Version)
==========================================
Gathers the system audit snapshot: one public IP/geolocation lookup through
httpx.AsyncClient raced against a hard deadline, plus the local environment
hints supplied by the host. Lookup failures never reach the caller, they turn
into sentinel values instead.
"""

import asyncio
import logging
from typing import List, Optional, Tuple

import httpx

import config
from diagnostics.suggestions import derive_suggestions
from models.diagnostic_models import (
    UNAVAILABLE_IP,
    DiagnosticSnapshot,
    EnvironmentHints,
    NetworkInfo,
    Suggestion,
)

logger = logging.getLogger(__name__)


def _format_number(value: float) -> str:
    return f"{value:g}"


def parse_lookup_payload(payload) -> NetworkInfo:
    """Maps an ipapi-style JSON body to the network facet."""
    if not isinstance(payload, dict):
        raise ValueError(f"Unexpected lookup payload: {type(payload).__name__}")
    for key in ("ip", "org", "city", "country_name", "country"):
        if payload.get(key) is not None and not isinstance(payload[key], str):
            raise ValueError(f"Lookup field {key!r} is not a string")

    city = payload.get("city")
    country = payload.get("country_name") or payload.get("country")
    return NetworkInfo(
        ip=payload.get("ip") or UNAVAILABLE_IP,
        isp=payload.get("org") or "Gateway",
        location=f"{city}, {country}" if city and country else "Unknown",
    )


def build_snapshot(network: NetworkInfo, hints: EnvironmentHints) -> DiagnosticSnapshot:
    # Only the trailing product token is kept
    tokens = hints.user_agent.split()
    user_agent = tokens[-1] if tokens else ""
    return DiagnosticSnapshot(
        ip=network.ip,
        isp=network.isp,
        location=network.location,
        connection_type=hints.effective_type.upper() if hints.effective_type else "Direct",
        downlink=f"{_format_number(hints.downlink)} Mbps" if hints.downlink else "N/A",
        rtt=f"{hints.rtt} ms" if hints.rtt else "N/A",
        user_agent=user_agent,
        platform=hints.platform,
        cores=max(hints.cores or 0, 0),
        memory=f"{_format_number(hints.device_memory)} GB" if hints.device_memory else "Standard",
    )


class DiagnosticCollector:
    def __init__(self, lookup_url: str = config.IP_LOOKUP_URL,
                 timeout: float = config.LOOKUP_TIMEOUT_SECONDS,
                 min_loading: float = config.MIN_LOADING_SECONDS,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.lookup_url = lookup_url
        self.timeout = timeout
        self.min_loading = min_loading
        self.loading = False
        self.client = httpx.AsyncClient(
            headers={"Accept": "application/json"},
            follow_redirects=True,
            timeout=timeout,
            transport=transport,
        )

    async def _lookup(self) -> NetworkInfo:
        resp = await self.client.get(self.lookup_url)
        resp.raise_for_status()
        return parse_lookup_payload(resp.json())

    async def fetch_network_info(self) -> NetworkInfo:
        """
        Single attempt against the lookup service.
        The deadline cancels the in-flight request; any failure yields the
        "Blocked" sentinels.
        """
        try:
            network = await asyncio.wait_for(self._lookup(), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning("IP lookup timed out after %.1fs, using fallback", self.timeout)
            return NetworkInfo()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("IP lookup failed (%s), using fallback", e)
            return NetworkInfo()

        logger.info("IP lookup resolved %s", network.ip)
        return network

    async def run(self, hints: EnvironmentHints,
                  secure_transport: bool) -> Tuple[DiagnosticSnapshot, List[Suggestion]]:
        """
        Main execution flow:
        1. Resolve the network facet (lookup or fallback)
        2. Compose the snapshot with the local hints
        3. Derive suggestions
        4. Hold the loading phase for the minimum visible duration
        """
        loop = asyncio.get_running_loop()
        started = loop.time()
        self.loading = True
        try:
            network = await self.fetch_network_info()
            snapshot = build_snapshot(network, hints)
            suggestions = derive_suggestions(snapshot, secure_transport)

            remaining = self.min_loading - (loop.time() - started)
            if remaining > 0:
                await asyncio.sleep(remaining)
            return snapshot, suggestions
        finally:
            self.loading = False

    async def close(self):
        """Closes the async client session."""
        await self.client.aclose()


async def run_diagnostic_async(hints: EnvironmentHints, secure_transport: bool, **kwargs):
    collector = DiagnosticCollector(**kwargs)
    try:
        return await collector.run(hints, secure_transport)
    finally:
        await collector.close()
