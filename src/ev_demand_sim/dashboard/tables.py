"""DataFrames backing the dashboard tables."""

from __future__ import annotations

import pandas as pd

from ev_demand_sim.models.results import DerivedStatistics, HourlyPowerSample, WeeklySample

_HORIZON_ROWS = {"day": "Per Day", "week": "Per Week", "month": "Per Month", "year": "Per Year"}


def hourly_frame(hourly: list[HourlyPowerSample]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Hour": [s.hour_label for s in hourly],
            "Baseline (kW)": [s.baseline_kw for s in hourly],
            "Power (kW)": [round(s.power_kw, 2) for s in hourly],
        }
    )


def weekly_frame(weekly: list[WeeklySample]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Day": [s.day_label for s in weekly],
            "Charging Events": [s.events for s in weekly],
            "Energy (kWh)": [s.energy_kwh for s in weekly],
        }
    )


def totals_frame(statistics: DerivedStatistics) -> pd.DataFrame:
    """Events and energy per horizon, indexed Per Day … Per Year."""
    events = statistics.total_events.model_dump()
    energy = statistics.total_energy_kwh.model_dump()
    return pd.DataFrame(
        {
            "Charging Events": [events[h] for h in _HORIZON_ROWS],
            "Energy Charged (kWh)": [round(energy[h], 2) for h in _HORIZON_ROWS],
        },
        index=pd.Index(list(_HORIZON_ROWS.values()), name="Horizon"),
    )
