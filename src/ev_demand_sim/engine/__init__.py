"""Engine — parameter validation and demand simulation."""

from ev_demand_sim.engine.validation import FieldErrors, is_valid, validate_parameters
from ev_demand_sim.engine.statistics import HORIZON_DAYS, compute_statistics
from ev_demand_sim.engine.profile import (
    SAMPLE_HOURS,
    WEEKDAY_LABELS,
    baseline_intensity,
    generate_hourly_profile,
    generate_weekly_breakdown,
)
from ev_demand_sim.engine.simulator import simulate_demand

__all__ = [
    "FieldErrors",
    "validate_parameters",
    "is_valid",
    "HORIZON_DAYS",
    "compute_statistics",
    "SAMPLE_HOURS",
    "WEEKDAY_LABELS",
    "baseline_intensity",
    "generate_hourly_profile",
    "generate_weekly_breakdown",
    "simulate_demand",
]
