"""Result models — simulation output contracts."""

from ev_demand_sim.models.results import (
    DerivedStatistics,
    HorizonEnergy,
    HorizonEvents,
    HourlyPowerSample,
    SimulationResult,
    WeeklySample,
)

__all__ = [
    "DerivedStatistics",
    "HorizonEnergy",
    "HorizonEvents",
    "HourlyPowerSample",
    "SimulationResult",
    "WeeklySample",
]
