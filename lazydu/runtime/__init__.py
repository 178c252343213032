"""Interactive browser runtime: state, key dispatch, rendering, terminal loop."""

from __future__ import annotations

from .loop import run_browser

__all__ = ["run_browser"]
