"""Client configuration, overridable through environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from quake_query.boundaries import DEFAULT_ID_PROPERTY
from quake_query.query import DEFAULT_BASE_URL

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_USER_AGENT = "quake-query/0.1"


@dataclass(frozen=True)
class ClientConfig:
    """Settings for :class:`~quake_query.usgs_client.UsgsClient`."""

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    boundaries_path: str | None = None
    boundary_id_property: str = DEFAULT_ID_PROPERTY
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Build a config from ``QUAKE_QUERY_*`` environment variables."""
        raw_timeout = os.environ.get("QUAKE_QUERY_TIMEOUT", "")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_SECONDS
        except ValueError as exc:
            raise ValueError(f"QUAKE_QUERY_TIMEOUT must be a number, got '{raw_timeout}'") from exc
        if timeout <= 0:
            raise ValueError(f"QUAKE_QUERY_TIMEOUT must be positive, got {timeout}")

        return cls(
            base_url=os.environ.get("QUAKE_QUERY_BASE_URL", DEFAULT_BASE_URL),
            timeout_seconds=timeout,
            boundaries_path=os.environ.get("QUAKE_QUERY_BOUNDARIES") or None,
            boundary_id_property=os.environ.get(
                "QUAKE_QUERY_BOUNDARY_ID_PROPERTY", DEFAULT_ID_PROPERTY
            ),
        )
