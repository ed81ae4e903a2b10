"""Testes da normalização de headers Fiware."""

from __future__ import annotations

from api.connectors.ngsi import FiwareHeaders, resolve_fiware_headers


class TestResolveFiwareHeaders:
    """Testes de resolve_fiware_headers."""

    def test_reads_headers_case_insensitively(self) -> None:
        headers = {
            "Fiware-Service": "smartcity",
            "FIWARE-SERVICEPATH": "/parking",
            "Fiware-Correlator": "corr-1",
        }

        assert resolve_fiware_headers(headers) == FiwareHeaders(
            service="smartcity", service_path="/parking", correlator="corr-1"
        )

    def test_defaults_when_missing(self) -> None:
        assert resolve_fiware_headers({}) == FiwareHeaders(service="nd", service_path="/nd")

    def test_defaults_when_empty(self) -> None:
        result = resolve_fiware_headers({"fiware-service": "", "fiware-servicepath": "  "})

        assert result.service == "nd"
        assert result.service_path == "/nd"

    def test_custom_defaults(self) -> None:
        result = resolve_fiware_headers(
            {"fiware-service": "t1"}, default_service="x", default_service_path="/x"
        )

        assert result == FiwareHeaders(service="t1", service_path="/x")

    def test_logs_fallback(self, caplog) -> None:
        caplog.set_level("INFO")

        resolve_fiware_headers({"fiware-service": "t1"})

        reasons = [getattr(r, "reason", None) for r in caplog.records if getattr(r, "fallback_used", False)]
        assert reasons == ["servicepath_header_missing"]
