"""Engine-level constants — site capacity ceiling, hourly floor, RNG seed."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class EngineConfig(BaseModel):
    """Deployment settings for the demand engine.

    ``peak_capacity_kw`` models the feeder / transformer limit of the site.
    It caps both the headline peak-power figure and every point of the
    hourly profile.  Swap it per deployment rather than editing the engine.
    """

    peak_capacity_kw: float = Field(
        default=180.0,
        gt=0,
        allow_inf_nan=False,
        description="Installed-capacity ceiling for the whole site (kW)",
    )
    hourly_floor_kw: float = Field(
        default=10.0,
        ge=0,
        allow_inf_nan=False,
        description="Offset added to every hourly draw; also its lower clamp (kW)",
    )
    random_seed: int | None = Field(
        default=None,
        description="Optional RNG seed for a reproducible hourly profile. "
                    "None = non-deterministic (seeded from OS entropy).",
    )

    @model_validator(mode="after")
    def _floor_below_ceiling(self) -> "EngineConfig":
        if self.hourly_floor_kw > self.peak_capacity_kw:
            raise ValueError(
                f"hourly_floor_kw ({self.hourly_floor_kw}) must not exceed "
                f"peak_capacity_kw ({self.peak_capacity_kw})"
            )
        return self
