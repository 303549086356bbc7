import json

from route_telemetry import CANONICAL_ROUTES, RouteTelemetry


def test_canonical_vocabulary_is_fixed() -> None:
    assert CANONICAL_ROUTES == ("pattern", "t5", "slm", "gemini", "direct_llm", "fallback")


def test_empty_engine_wire_shape() -> None:
    assert RouteTelemetry().get_stats().to_dict() == {
        "total": 0,
        "avgLatency": 0,
        "routeBreakdown": {},
        "routePercentages": {
            "pattern": 0,
            "t5": 0,
            "slm": 0,
            "gemini": 0,
            "direct_llm": 0,
            "fallback": 0,
        },
    }


def test_stats_payload_is_json_serializable() -> None:
    telemetry = RouteTelemetry()
    telemetry.record("direct llm", 250.0, True, query="explain this page")
    telemetry.record("legacy-router", 80.0, False)

    payload = json.loads(json.dumps(telemetry.get_stats().to_dict()))

    assert payload["routeBreakdown"]["direct_llm"]["count"] == 1
    assert payload["routeBreakdown"]["legacy-router"]["successRate"] == 0
    assert payload["routePercentages"]["direct_llm"] == 50
