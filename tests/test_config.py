"""Tests for ServiceSettings."""

from __future__ import annotations

from pathlib import Path

import pytest

from metricgraph.config import ServiceSettings


class TestServiceSettings:
    def test_defaults(self):
        settings = ServiceSettings.from_env({})
        assert settings.source_path == Path("datas.md")
        assert settings.host == "127.0.0.1"
        assert settings.port == 3001
        assert settings.allowed_origins == ["*"]

    def test_from_env(self):
        settings = ServiceSettings.from_env(
            {
                "METRICGRAPH_SOURCE": "/data/metrics.md",
                "METRICGRAPH_HOST": "0.0.0.0",
                "METRICGRAPH_PORT": "8080",
                "METRICGRAPH_ALLOWED_ORIGINS": "http://a.test, http://b.test,",
            }
        )
        assert settings.source_path == Path("/data/metrics.md")
        assert settings.host == "0.0.0.0"
        assert settings.port == 8080
        assert settings.allowed_origins == ["http://a.test", "http://b.test"]

    def test_invalid_port(self):
        with pytest.raises(ValueError):
            ServiceSettings.from_env({"METRICGRAPH_PORT": "not-a-port"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("METRICGRAPH_PORT", "4000")
        assert ServiceSettings.from_env().port == 4000

    def test_to_dict(self):
        data = ServiceSettings(source_path=Path("x.md")).to_dict()
        assert data["source_path"] == "x.md"
        assert data["port"] == 3001
