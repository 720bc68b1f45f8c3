"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, roadmap.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    # False makes DirectedGraph.set reject unregistered endpoints.
    auto_register: bool = True


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False

