"""Operator-supplied simulation parameters.

The four inputs an operator types into the form.  Ranges are inclusive and
declared once in ``PARAMETER_RULES`` so the pydantic constraints and the
validator messages can never drift apart.
"""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class ParameterRule(NamedTuple):
    """Inclusive range plus the message shown when a value falls outside it."""

    low: float
    high: float
    message: str


PARAMETER_RULES: dict[str, ParameterRule] = {
    "charge_points": ParameterRule(1, 50, "Must be between 1 and 50"),
    "arrival_multiplier_pct": ParameterRule(20, 200, "Must be between 20% and 200%"),
    "consumption_per_visit_kwh": ParameterRule(1, 100, "Must be between 1 and 100 kWh"),
    "charging_power_kw": ParameterRule(1, 50, "Must be between 1 and 50 kW"),
}


def _rule(name: str) -> ParameterRule:
    return PARAMETER_RULES[name]


class SimulationParameters(BaseModel):
    """One candidate parameter set.  Immutable — build a new one per edit."""

    model_config = ConfigDict(frozen=True)

    charge_points: int = Field(
        default=20,
        ge=_rule("charge_points").low,
        le=_rule("charge_points").high,
        description="Number of charging bays at the site",
    )
    arrival_multiplier_pct: float = Field(
        default=100.0,
        ge=_rule("arrival_multiplier_pct").low,
        le=_rule("arrival_multiplier_pct").high,
        allow_inf_nan=False,
        description="Scaling on the nominal arrival rate (%). "
                    "100 = nominal, 50 = half the traffic, 200 = double.",
    )
    consumption_per_visit_kwh: float = Field(
        default=18.0,
        ge=_rule("consumption_per_visit_kwh").low,
        le=_rule("consumption_per_visit_kwh").high,
        allow_inf_nan=False,
        description="Energy delivered during one charging event (kWh)",
    )
    charging_power_kw: float = Field(
        default=11.0,
        ge=_rule("charging_power_kw").low,
        le=_rule("charging_power_kw").high,
        allow_inf_nan=False,
        description="Power rating of a single bay (kW)",
    )
