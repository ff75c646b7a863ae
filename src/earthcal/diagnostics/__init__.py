"""Diagnostics package.

Optional tooling on top of the engine; numpy/matplotlib come from the
`diagnostics` extra and are only imported inside the scripts that need them.
"""

__all__ = ["round_trip", "month_grid", "plot_leap_offsets"]
