"""Configuration models — operator parameters and engine constants."""

from ev_demand_sim.config.parameters import PARAMETER_RULES, ParameterRule, SimulationParameters
from ev_demand_sim.config.engine import EngineConfig

__all__ = [
    "PARAMETER_RULES",
    "ParameterRule",
    "SimulationParameters",
    "EngineConfig",
]
