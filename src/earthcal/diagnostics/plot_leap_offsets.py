#!/usr/bin/env python3
from __future__ import annotations

import argparse

import earthcal
from earthcal.core.types import Date
from earthcal.reference.leap_seconds import tai_minus_utc


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "earthcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "earthcal[diagnostics]"') from e


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Plot TAI-UTC (seconds) from the built-in leap-second table.")
    p.add_argument("--y0", type=int, default=1970, help="start year")
    p.add_argument("--y1", type=int, default=2030, help="end year")
    p.add_argument("--step-days", type=int, default=30, help="sampling step in days")
    p.add_argument("--out", default="tai_utc.png", help="output image filename")
    args = p.parse_args(argv)

    if args.y1 < args.y0:
        raise SystemExit("--y1 must be >= --y0")

    np = _need_numpy()
    plt = _need_matplotlib()

    cal = earthcal.ISO
    d0 = cal.date_to_days(Date(args.y0, 1, 1))
    d1 = cal.date_to_days(Date(args.y1, 1, 1))
    days = np.arange(d0, d1 + 1, args.step_days)

    years = np.array([float(args.y0) + float(n - d0) / 365.2425 for n in days], dtype=float)
    offsets = np.array(
        [float(tai_minus_utc(earthcal.instant(cal.days_to_date(int(n))))) for n in days],
        dtype=float,
    )

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.step(years, offsets, where="post", linewidth=2)
    ax.set_title("TAI - UTC (seconds)")
    ax.set_xlabel("Year")
    ax.set_ylabel("TAI - UTC (s)")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
