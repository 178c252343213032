"""Human-readable byte sizes and counters."""

from __future__ import annotations

_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def format_size(size_bytes: int) -> str:
    """Format ``size_bytes`` with binary units, e.g. ``512 B`` or ``1.5 KiB``."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    value = float(size_bytes)
    for unit in _UNITS[1:]:
        value /= 1024.0
        if value < 1024.0 or unit == _UNITS[-1]:
            return f"{value:.1f} {unit}"
    return f"{value:.1f} {_UNITS[-1]}"


def commaify(value: int) -> str:
    """Group thousands with commas."""
    return f"{value:,}"


__all__ = ["format_size", "commaify"]
