import asyncio
import time

import httpx
import pytest

from diagnostics.collector import (
    DiagnosticCollector,
    build_snapshot,
    parse_lookup_payload,
    run_diagnostic_async,
)
from models.diagnostic_models import EnvironmentHints, NetworkInfo

LOOKUP_URL = "https://ipapi.example/json/"

EXAMPLE_PAYLOAD = {
    "ip": "203.0.113.5",
    "org": "Example Telecom",
    "city": "Pune",
    "country_name": "India",
}


def collect(handler, hints, secure_transport=True, timeout=2.0, min_loading=0.0):
    async def go():
        collector = DiagnosticCollector(
            lookup_url=LOOKUP_URL,
            timeout=timeout,
            min_loading=min_loading,
            transport=httpx.MockTransport(handler),
        )
        try:
            return await collector.run(hints, secure_transport)
        finally:
            await collector.close()

    return asyncio.run(go())


def titles(suggestions):
    return [s.title for s in suggestions]


def test_successful_lookup(hints):
    snapshot, suggestions = collect(lambda request: httpx.Response(200, json=EXAMPLE_PAYLOAD), hints)

    assert snapshot.ip == "203.0.113.5"
    assert snapshot.isp == "Example Telecom"
    assert snapshot.location == "Pune, India"
    assert suggestions[0].severity == "warning"
    assert suggestions[0].title == "IP Address Exposed"


def test_lookup_hits_configured_url_once(hints):
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json=EXAMPLE_PAYLOAD)

    collect(handler, hints)
    assert seen == [LOOKUP_URL]


def test_hanging_lookup_falls_back_within_deadline(hints):
    async def handler(request):
        await asyncio.sleep(30)
        return httpx.Response(200, json=EXAMPLE_PAYLOAD)

    started = time.monotonic()
    snapshot, suggestions = collect(handler, hints, timeout=0.1)
    elapsed = time.monotonic() - started

    assert elapsed < 5
    assert snapshot.ip == "Blocked"
    assert snapshot.isp == "VPN/Firewall Active"
    assert snapshot.location == "Restricted"
    assert "Identity Masked" in titles(suggestions)
    assert suggestions[0].severity == "success"


def test_transport_error_falls_back(hints):
    def handler(request):
        raise httpx.ConnectError("dns failure", request=request)

    snapshot, suggestions = collect(handler, hints)
    assert snapshot.ip == "Blocked"
    assert "Identity Masked" in titles(suggestions)


@pytest.mark.parametrize("response", [
    httpx.Response(503, json={"error": True}),
    httpx.Response(429, text="rate limited"),
    httpx.Response(200, text="<html>not json</html>"),
    httpx.Response(200, json=["not", "a", "dict"]),
    httpx.Response(200, json={"ip": ["203.0.113.5"], "org": "x"}),
    httpx.Response(200, json={"ip": "203.0.113.5", "city": {"name": "Pune"}, "country_name": "India"}),
    httpx.Response(200, json={"ip": "203.0.113.5", "org": 42}),
])
def test_bad_responses_fall_back(hints, response):
    snapshot, suggestions = collect(lambda request: response, hints)
    assert snapshot.ip == "Blocked"
    assert snapshot.location == "Restricted"
    assert suggestions[0].title == "Identity Masked"


def test_unencrypted_transport_warning_on_success_and_failure(hints):
    ok, ok_suggestions = collect(lambda r: httpx.Response(200, json=EXAMPLE_PAYLOAD), hints,
                                 secure_transport=False)
    _, failed_suggestions = collect(lambda r: httpx.Response(500), hints, secure_transport=False)

    assert "Unencrypted Path" in titles(ok_suggestions)
    assert "Unencrypted Path" in titles(failed_suggestions)


def test_local_facet_from_hints(hints):
    snapshot, suggestions = collect(lambda r: httpx.Response(200, json=EXAMPLE_PAYLOAD), hints)

    assert snapshot.user_agent == "Safari/537.36"
    assert snapshot.platform == "Linux"
    assert snapshot.cores == 8
    assert snapshot.memory == "8 GB"
    assert snapshot.connection_type == "4G"
    assert snapshot.downlink == "10 Mbps"
    assert snapshot.rtt == "50 ms"
    assert titles(suggestions) == ["IP Address Exposed", "Hardware Profile"]


def test_minimum_loading_duration(hints):
    started = time.monotonic()
    collect(lambda r: httpx.Response(200, json=EXAMPLE_PAYLOAD), hints, min_loading=0.2)
    assert time.monotonic() - started >= 0.2


def test_loading_flag_tracks_run(hints):
    observed = []

    async def slow_handler(request):
        await asyncio.sleep(0.05)
        return httpx.Response(200, json=EXAMPLE_PAYLOAD)

    async def go():
        collector = DiagnosticCollector(
            lookup_url=LOOKUP_URL,
            min_loading=0.0,
            transport=httpx.MockTransport(slow_handler),
        )
        try:
            observed.append(collector.loading)
            task = asyncio.ensure_future(collector.run(hints, True))
            await asyncio.sleep(0)
            observed.append(collector.loading)
            await task
            observed.append(collector.loading)
        finally:
            await collector.close()

    asyncio.run(go())
    assert observed == [False, True, False]


def test_run_diagnostic_async_returns_snapshot(hints):
    snapshot, _ = asyncio.run(run_diagnostic_async(
        hints, True,
        lookup_url=LOOKUP_URL,
        min_loading=0.0,
        transport=httpx.MockTransport(lambda r: httpx.Response(200, json=EXAMPLE_PAYLOAD)),
    ))
    assert snapshot.ip == "203.0.113.5"


def test_parse_payload_defaults():
    info = parse_lookup_payload({})
    assert info.ip == "Unavailable"
    assert info.isp == "Gateway"
    assert info.location == "Unknown"
    assert info.is_masked


def test_parse_payload_accepts_country_field():
    info = parse_lookup_payload({"ip": "198.51.100.7", "city": "Lyon", "country": "FR"})
    assert info.location == "Lyon, FR"


def test_parse_payload_missing_city():
    info = parse_lookup_payload({"ip": "198.51.100.7", "country_name": "France"})
    assert info.location == "Unknown"


def test_build_snapshot_defaults_without_hints():
    snapshot = build_snapshot(NetworkInfo(), EnvironmentHints())
    assert snapshot.connection_type == "Direct"
    assert snapshot.downlink == "N/A"
    assert snapshot.rtt == "N/A"
    assert snapshot.memory == "Standard"
    assert snapshot.cores == 0
    assert snapshot.user_agent == ""


def test_build_snapshot_fractional_values():
    snapshot = build_snapshot(NetworkInfo(), EnvironmentHints(device_memory=0.5, downlink=1.45))
    assert snapshot.memory == "0.5 GB"
    assert snapshot.downlink == "1.45 Mbps"
