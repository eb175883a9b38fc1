"""Chart series — illustrative hourly load shape and uniform weekly breakdown.

The hourly profile is deliberately *not* derived from the aggregate
statistics: it is a time-of-day baseline curve plus uniform noise, drawn
from a caller-supplied ``numpy.random.Generator`` so tests can seed it.

The weekly breakdown repeats the day-level statistic for every weekday.
"""

from __future__ import annotations

import math

import numpy as np

from ev_demand_sim.config.engine import EngineConfig
from ev_demand_sim.models.results import DerivedStatistics, HourlyPowerSample, WeeklySample

SAMPLE_HOURS: tuple[int, ...] = tuple(range(0, 24, 2))
"""12 samples, one every 2 hours."""

WEEKDAY_LABELS: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# (end hour exclusive, baseline kW) — scanned in order.
_BASELINE_BANDS: tuple[tuple[int, float], ...] = (
    (6, 20.0),     # late night → early morning
    (9, 50.0),     # morning
    (17, 150.0),   # daytime peak
    (20, 100.0),   # evening
    (24, 40.0),    # late night
)


def baseline_intensity(hour: float) -> float:
    """Reference power level (kW) for a time of day in ``[0, 24)``."""
    if not 0 <= hour < 24:
        raise ValueError(f"hour must be in [0, 24), got {hour!r}")
    for end, baseline in _BASELINE_BANDS[:-1]:
        if hour < end:
            return baseline
    return _BASELINE_BANDS[-1][1]


def hour_label(hour: int) -> str:
    return f"{hour}:00"


def generate_hourly_profile(
    rng: np.random.Generator,
    config: EngineConfig | None = None,
) -> list[HourlyPowerSample]:
    """Draw 12 hourly power samples.

    power = clip(U(0, 1) × baseline + floor, floor, capacity)

    Parameters
    ----------
    rng : numpy.random.Generator
        Source of the uniform draws.  Seed it for reproducible output.
    config : EngineConfig, optional
        Supplies the floor offset and the capacity ceiling.

    Returns
    -------
    list[HourlyPowerSample]
        Ordered by hour, ``0:00`` through ``22:00``.
    """
    config = config or EngineConfig()

    baselines = np.array([baseline_intensity(h) for h in SAMPLE_HOURS], dtype=np.float64)
    draws = rng.uniform(0.0, 1.0, size=len(SAMPLE_HOURS))
    power = np.clip(
        draws * baselines + config.hourly_floor_kw,
        config.hourly_floor_kw,
        config.peak_capacity_kw,
    )

    return [
        HourlyPowerSample(
            hour=hour,
            hour_label=hour_label(hour),
            baseline_kw=float(baseline),
            power_kw=float(kw),
        )
        for hour, baseline, kw in zip(SAMPLE_HOURS, baselines, power)
    ]


def generate_weekly_breakdown(statistics: DerivedStatistics) -> list[WeeklySample]:
    """Seven identical days, Mon → Sun, built from the day-level figures."""
    events = math.floor(statistics.charging_events_per_day)
    energy_kwh = math.floor(statistics.total_energy_kwh.day)
    return [
        WeeklySample(day_label=label, events=events, energy_kwh=energy_kwh)
        for label in WEEKDAY_LABELS
    ]
