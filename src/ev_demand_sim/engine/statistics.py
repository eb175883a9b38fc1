"""Derived demand statistics.

Pure arithmetic: parameters + engine constants → DerivedStatistics.
"""

from __future__ import annotations

import math

from ev_demand_sim.config.engine import EngineConfig
from ev_demand_sim.config.parameters import SimulationParameters
from ev_demand_sim.errors import DomainError
from ev_demand_sim.models.results import DerivedStatistics, HorizonEnergy, HorizonEvents

HOURS_PER_DAY = 24

HORIZON_DAYS: dict[str, int] = {"day": 1, "week": 7, "month": 30, "year": 365}
"""Fixed multipliers — a month is always 30 days, a year 365."""


def _require_positive(name: str, value: float) -> None:
    # `not value > 0` also catches NaN.
    if not value > 0 or math.isinf(value):
        raise DomainError(f"{name} must be a positive finite number, got {value!r}")


def compute_statistics(
    params: SimulationParameters,
    config: EngineConfig | None = None,
) -> DerivedStatistics:
    """Compute events, energy and peak power for one parameter set.

    Raises ``DomainError`` if either divisor is zero, negative or not finite.
    Callers are expected to gate on ``validate_parameters`` first.
    """
    config = config or EngineConfig()

    _require_positive("charging_power_kw", params.charging_power_kw)
    _require_positive("consumption_per_visit_kwh", params.consumption_per_visit_kwh)

    # ── Visit duration ─────────────────────────────────────────────────
    # One car fills one bay for consumption / power hours.
    average_visit_duration_h = params.consumption_per_visit_kwh / params.charging_power_kw

    # ── Events per day ─────────────────────────────────────────────────
    # Each bay hosts 24 / duration back-to-back visits at nominal arrivals,
    # scaled by the multiplier.  Only the day figure is floored.
    events_per_day = math.floor(
        params.charge_points
        * (params.arrival_multiplier_pct / 100)
        * (HOURS_PER_DAY / average_visit_duration_h)
    )
    events_per_day = max(events_per_day, 0)

    total_events = HorizonEvents(
        **{horizon: events_per_day * days for horizon, days in HORIZON_DAYS.items()}
    )
    total_energy = HorizonEnergy(
        **{
            horizon: getattr(total_events, horizon) * params.consumption_per_visit_kwh
            for horizon in HORIZON_DAYS
        }
    )

    # ── Peak power ─────────────────────────────────────────────────────
    peak_power_demand_kw = min(
        params.charge_points * params.charging_power_kw,
        config.peak_capacity_kw,
    )

    return DerivedStatistics(
        average_visit_duration_h=average_visit_duration_h,
        charging_events_per_day=events_per_day,
        total_events=total_events,
        total_energy_kwh=total_energy,
        peak_power_demand_kw=peak_power_demand_kw,
    )
