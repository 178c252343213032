"""Public package surface for lazydu.

Exports ``main`` for programmatic CLI invocation.
The scanning and size-aggregation core lives in ``lazydu.scan_model``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
