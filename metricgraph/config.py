"""Service configuration loaded from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

ENV_PREFIX = "METRICGRAPH_"


def _split_origins(value: str) -> list[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class ServiceSettings:
    """Settings for the graph service.

    Attributes:
        source_path: Markdown file the graph is compiled from.
        host: Bind address for the server.
        port: Port number for the server.
        allowed_origins: CORS origins allowed to call the API.
    """

    source_path: Path = Path("datas.md")
    host: str = "127.0.0.1"
    port: int = 3001
    allowed_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServiceSettings:
        """Build settings from ``METRICGRAPH_*`` variables, defaulting the rest.

        Raises:
            ValueError: If METRICGRAPH_PORT is not an integer.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        port_value = env.get(f"{ENV_PREFIX}PORT")
        origins_value = env.get(f"{ENV_PREFIX}ALLOWED_ORIGINS")

        return cls(
            source_path=Path(env.get(f"{ENV_PREFIX}SOURCE", str(defaults.source_path))),
            host=env.get(f"{ENV_PREFIX}HOST", defaults.host),
            port=int(port_value) if port_value else defaults.port,
            allowed_origins=_split_origins(origins_value)
            if origins_value
            else defaults.allowed_origins,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "source_path": str(self.source_path),
            "host": self.host,
            "port": self.port,
            "allowed_origins": self.allowed_origins,
        }
