"""Result types — the contract between engine and dashboard.

Every field is recomputed from scratch on each call to the simulator;
nothing here is cached or persisted.
"""

from __future__ import annotations

from pydantic import BaseModel

from ev_demand_sim.config.parameters import SimulationParameters


# ═══════════════════════════════════════════════════════════════════════════
# Aggregate statistics
# ═══════════════════════════════════════════════════════════════════════════

class HorizonEvents(BaseModel):
    """Charging events extrapolated linearly over fixed horizons."""

    day: int
    week: int
    """day × 7"""
    month: int
    """day × 30"""
    year: int
    """day × 365"""


class HorizonEnergy(BaseModel):
    """Energy delivered (kWh) over the same horizons as ``HorizonEvents``."""

    day: float
    week: float
    month: float
    year: float


class DerivedStatistics(BaseModel):
    """Headline figures derived from one parameter set."""

    average_visit_duration_h: float
    """consumption_per_visit / charging_power — how long one car occupies a bay."""

    charging_events_per_day: int
    """floor(charge_points × arrival/100 × 24 / duration).  Never negative."""

    total_events: HorizonEvents
    total_energy_kwh: HorizonEnergy

    peak_power_demand_kw: float
    """min(charge_points × charging_power, site capacity ceiling)."""


# ═══════════════════════════════════════════════════════════════════════════
# Chart series
# ═══════════════════════════════════════════════════════════════════════════

class HourlyPowerSample(BaseModel):
    """One point of the illustrative daily load shape (every 2 hours)."""

    hour: int
    hour_label: str
    """Display label: ``0:00``, ``2:00`` … ``22:00``."""
    baseline_kw: float
    """Time-of-day reference intensity the noisy draw is anchored to."""
    power_kw: float


class WeeklySample(BaseModel):
    """One weekday of the uniform weekly breakdown."""

    day_label: str
    events: int
    energy_kwh: int


class SimulationResult(BaseModel):
    """Complete output of one simulation run."""

    parameters: SimulationParameters
    statistics: DerivedStatistics
    hourly: list[HourlyPowerSample]
    weekly: list[WeeklySample]
    seed: int | None = None
    """Seed the hourly profile was drawn with, when one was configured."""
