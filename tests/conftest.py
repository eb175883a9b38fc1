"""Shared test fixtures — the default form values and a few edge sets."""

from __future__ import annotations

import numpy as np
import pytest

from ev_demand_sim.config import EngineConfig, SimulationParameters


@pytest.fixture
def default_params() -> SimulationParameters:
    """20 bays, nominal arrivals, 18 kWh per visit at 11 kW."""
    return SimulationParameters(
        charge_points=20,
        arrival_multiplier_pct=100,
        consumption_per_visit_kwh=18,
        charging_power_kw=11,
    )


@pytest.fixture
def small_site() -> SimulationParameters:
    """10 × 11 kW = 110 kW — below the capacity ceiling."""
    return SimulationParameters(
        charge_points=10,
        arrival_multiplier_pct=100,
        consumption_per_visit_kwh=22,
        charging_power_kw=11,
    )


@pytest.fixture
def engine_config() -> EngineConfig:
    return EngineConfig(random_seed=42)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)
