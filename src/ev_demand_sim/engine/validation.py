"""Parameter validator.

Checks a candidate parameter set against the fixed ranges in
``PARAMETER_RULES`` and returns one message per offending field.  Never
raises: the form layer feeds it transient input (empty boxes, half-typed
numbers) on every keystroke.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ev_demand_sim.config.parameters import PARAMETER_RULES, SimulationParameters

FieldErrors = dict[str, str]


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_parameters(params: SimulationParameters | Mapping[str, Any]) -> FieldErrors:
    """Return ``{field: message}`` for every invalid field; empty dict means valid.

    ``params`` may be a ``SimulationParameters`` or a raw mapping.  Missing,
    ``None``, empty-string and non-numeric values are invalid for that field
    only; the other fields are still checked.  Unknown keys are ignored.
    """
    if isinstance(params, SimulationParameters):
        # Re-check instances too: model_construct() skips validation.
        raw: dict[str, Any] = params.model_dump()
    else:
        raw = {name: params.get(name) for name in PARAMETER_RULES}

    # Missing fields would otherwise silently pick up the model defaults.
    # Booleans are coerced to 0/1 by pydantic, so they are rejected here.
    errors: FieldErrors = {
        name: rule.message
        for name, rule in PARAMETER_RULES.items()
        if _is_blank(raw.get(name)) or isinstance(raw.get(name), bool)
    }

    try:
        SimulationParameters.model_validate(raw)
    except ValidationError as exc:
        for err in exc.errors():
            name = err["loc"][0] if err["loc"] else None
            if name in PARAMETER_RULES:
                errors[name] = PARAMETER_RULES[name].message

    return {name: errors[name] for name in PARAMETER_RULES if name in errors}


def is_valid(params: SimulationParameters | Mapping[str, Any]) -> bool:
    """True when ``validate_parameters`` reports no errors."""
    return not validate_parameters(params)
