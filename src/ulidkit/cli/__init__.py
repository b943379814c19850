"""CLI module."""

from __future__ import annotations

from ulidkit.cli.config import UlidkitConfig, get_config
from ulidkit.cli.main import app

__all__ = ["UlidkitConfig", "app", "get_config"]
