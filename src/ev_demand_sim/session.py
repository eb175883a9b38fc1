"""Caller-owned parameter cell for the form layer.

Holds the raw values the operator has typed so far, re-validates on every
edit and, when the set is valid, recomputes the simulation and notifies
subscribers.  The engine itself stays stateless.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

import numpy as np

from ev_demand_sim.config.engine import EngineConfig
from ev_demand_sim.config.parameters import PARAMETER_RULES, SimulationParameters
from ev_demand_sim.engine.simulator import simulate_demand
from ev_demand_sim.engine.validation import FieldErrors, validate_parameters
from ev_demand_sim.models.results import SimulationResult

logger = logging.getLogger(__name__)

Subscriber = Callable[[SimulationResult], None]


def parse_field_input(raw: Any) -> Any:
    """Turn text from a number box into a value for the validator.

    ``""`` → ``None``; ``"0"`` stays ``0``; leading zeros are dropped
    (``"007"`` → ``7``); numeric text → int or float; anything else is
    returned unchanged so the validator can flag it.
    """
    if not isinstance(raw, str):
        return raw
    text = raw.strip()
    if text != "0":
        text = text.lstrip("0")
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return raw


class ParameterSession:
    """Mutable current-value cell around immutable ``SimulationParameters``."""

    def __init__(
        self,
        config: EngineConfig | None = None,
        rng: np.random.Generator | None = None,
        values: Mapping[str, Any] | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self._rng = rng
        self._subscribers: list[Subscriber] = []
        self._values: dict[str, Any] = SimulationParameters().model_dump()
        if values is not None:
            self._values.update(
                {name: parse_field_input(values[name]) for name in PARAMETER_RULES if name in values}
            )
        self._errors: FieldErrors = {}
        self._result: SimulationResult | None = None
        self._recompute()

    # ── State ──────────────────────────────────────────────────────────

    @property
    def values(self) -> dict[str, Any]:
        """Raw field values as last entered (copy)."""
        return dict(self._values)

    @property
    def errors(self) -> FieldErrors:
        return dict(self._errors)

    @property
    def is_valid(self) -> bool:
        """Submission gate: False while any field has an error."""
        return not self._errors

    @property
    def parameters(self) -> SimulationParameters | None:
        if self._errors:
            return None
        return SimulationParameters.model_validate(self._values)

    @property
    def result(self) -> SimulationResult | None:
        """Latest result, or None while the current input is invalid."""
        return self._result

    # ── Edits ──────────────────────────────────────────────────────────

    def subscribe(self, callback: Subscriber) -> None:
        self._subscribers.append(callback)

    def update(self, field: str, raw: Any) -> FieldErrors:
        """Set one field from raw input and return the new error map."""
        if field not in PARAMETER_RULES:
            raise KeyError(f"unknown parameter: {field!r}")
        self._values[field] = parse_field_input(raw)
        self._recompute()
        return self.errors

    def reset(self) -> None:
        """Restore every field to its default."""
        self._values = SimulationParameters().model_dump()
        self._recompute()

    def _recompute(self) -> None:
        self._errors = validate_parameters(self._values)
        if self._errors:
            logger.debug("parameters invalid: %s", self._errors)
            self._result = None
            return

        params = SimulationParameters.model_validate(self._values)
        self._result = simulate_demand(params, self.config, self._rng)
        logger.info(
            "recomputed demand: %d events/day, peak %.1f kW",
            self._result.statistics.charging_events_per_day,
            self._result.statistics.peak_power_demand_kw,
        )
        for callback in self._subscribers:
            callback(self._result)
