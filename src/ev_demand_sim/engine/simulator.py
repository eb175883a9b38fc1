"""Demand simulator — single entry point used by the dashboard and session.

Wires together:
  1. Statistics  — events, energy, peak power (pure arithmetic)
  2. Hourly      — illustrative time-of-day load shape (seeded noise)
  3. Weekly      — uniform Mon–Sun breakdown from the day-level figures

Entry point: ``simulate_demand(params, config, rng)``
"""

from __future__ import annotations

import logging

import numpy as np

from ev_demand_sim.config.engine import EngineConfig
from ev_demand_sim.config.parameters import SimulationParameters
from ev_demand_sim.engine.profile import generate_hourly_profile, generate_weekly_breakdown
from ev_demand_sim.engine.statistics import compute_statistics
from ev_demand_sim.models.results import SimulationResult

logger = logging.getLogger(__name__)


def simulate_demand(
    params: SimulationParameters,
    config: EngineConfig | None = None,
    rng: np.random.Generator | None = None,
) -> SimulationResult:
    """Run one full simulation.

    When ``rng`` is omitted a generator is built from ``config.random_seed``
    (``None`` → fresh OS entropy each call).  Either the complete result is
    returned or ``DomainError`` propagates; there are no partial results.
    """
    config = config or EngineConfig()
    if rng is None:
        rng = np.random.default_rng(config.random_seed)

    statistics = compute_statistics(params, config)
    hourly = generate_hourly_profile(rng, config)
    weekly = generate_weekly_breakdown(statistics)

    logger.debug(
        "simulated %s → %d events/day, %.1f kWh/day, peak %.1f kW",
        params.model_dump(),
        statistics.charging_events_per_day,
        statistics.total_energy_kwh.day,
        statistics.peak_power_demand_kw,
    )

    return SimulationResult(
        parameters=params,
        statistics=statistics,
        hourly=hourly,
        weekly=weekly,
        seed=config.random_seed,
    )
