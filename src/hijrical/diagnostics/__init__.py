"""Diagnostics package.

- round_trip, pretty_month: always available (stdlib only)
- drift_scatter: optional (requires numpy + matplotlib, "hijrical[diagnostics]")
"""

__all__ = ["round_trip", "pretty_month", "drift_scatter"]
