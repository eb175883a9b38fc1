"""EV Charging Station Demand — Streamlit Dashboard.

Layout: sidebar parameter form → main area with headline cards,
hourly power demand, weekly overview and horizon totals.
The page only reads and renders; all numbers come from the engine via
``ParameterSession``.

Run with:
    streamlit run src/ev_demand_sim/dashboard/app.py
"""

from __future__ import annotations

import logging

import numpy as np
import streamlit as st

from ev_demand_sim.config import EngineConfig, SimulationParameters
from ev_demand_sim.dashboard.charts import hourly_power_figure, weekly_overview_figure
from ev_demand_sim.dashboard.tables import hourly_frame, totals_frame, weekly_frame
from ev_demand_sim.session import ParameterSession

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# ---------------------------------------------------------------------------
# Defaults — single source of truth for form defaults
# ---------------------------------------------------------------------------
_DEF_P = SimulationParameters()

_FIELDS = [
    ("charge_points", "Number of Charge Points"),
    ("arrival_multiplier_pct", "Arrival Multiplier (%)"),
    ("consumption_per_visit_kwh", "Consumption (kWh)"),
    ("charging_power_kw", "Charging Power (kW)"),
]

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="EV Charging Simulation", page_icon="⚡", layout="wide")
st.title("EV Charging Station Simulation")


def _card(icon: str, label: str, value: str, caption: str, accent: str = "#6c5ce7") -> str:
    """Return HTML for a styled metric card with colored top accent."""
    return f"""
    <div style="
        background: linear-gradient(135deg, rgba(30,34,44,0.95), rgba(22,26,35,0.98));
        border: 1px solid rgba(255,255,255,0.05);
        border-top: 3px solid {accent};
        border-radius: 8px;
        padding: 14px 16px 12px;
        text-align: center;
    ">
        <div style="font-size: 1.3rem; line-height: 1;">{icon}</div>
        <div style="font-size: 1.25rem; font-weight: 700; color: #fff;">{value}</div>
        <div style="font-size: 0.65rem; color: rgba(255,255,255,0.42); text-transform: uppercase;">{label}</div>
        <div style="font-size: 0.65rem; color: rgba(255,255,255,0.30);">{caption}</div>
    </div>
    """


# ---------------------------------------------------------------------------
# Session — one parameter cell per browser session
# ---------------------------------------------------------------------------
def _new_session(seed: int | None, values: dict | None = None) -> ParameterSession:
    config = EngineConfig(random_seed=seed)
    return ParameterSession(config=config, rng=np.random.default_rng(seed), values=values)


if "param_session" not in st.session_state:
    st.session_state["param_session"] = _new_session(None)

session: ParameterSession = st.session_state["param_session"]


def _on_edit(field: str) -> None:
    session.update(field, st.session_state[f"in_{field}"])


# ---------------------------------------------------------------------------
# SIDEBAR — Inputs
# ---------------------------------------------------------------------------
st.sidebar.header("Simulation Parameters")

for field, label in _FIELDS:
    st.sidebar.text_input(
        label,
        value=str(getattr(_DEF_P, field)),
        key=f"in_{field}",
        on_change=_on_edit,
        args=(field,),
    )
    if field in session.errors:
        st.sidebar.error(session.errors[field])

with st.sidebar.expander("Engine", expanded=False):
    use_seed = st.checkbox("Fixed seed", value=False, help="Reproducible hourly profile")
    seed = st.number_input("Seed", 0, 999_999, 42, disabled=not use_seed)
    st.caption(f"Site capacity ceiling: {session.config.peak_capacity_kw:.0f} kW")

if st.sidebar.button("Update Simulation", disabled=not session.is_valid, type="primary"):
    session = _new_session(int(seed) if use_seed else None, session.values)
    st.session_state["param_session"] = session

result = session.result
if result is None:
    st.info("Fix the highlighted parameters to see the simulation.")
    st.stop()

stats = result.statistics

# ---------------------------------------------------------------------------
# Headline cards
# ---------------------------------------------------------------------------
c1, c2, c3 = st.columns(3)
c1.markdown(_card("🔋", "Total Energy Charged", f"{stats.total_energy_kwh.week:,.0f} kWh",
                  "Last 7 days", "#00b894"), unsafe_allow_html=True)
c2.markdown(_card("⚡", "Peak Power Demand", f"{stats.peak_power_demand_kw:,.0f} kW",
                  "Maximum this week", "#e17055"), unsafe_allow_html=True)
c3.markdown(_card("🚗", "Charging Events", f"{stats.total_events.week:,}",
                  "Total this week", "#0984e3"), unsafe_allow_html=True)

with st.expander("Show the math"):
    p = result.parameters
    st.markdown(
        f"**Visit duration** — `consumption / power` = {p.consumption_per_visit_kwh} / "
        f"{p.charging_power_kw} = **{stats.average_visit_duration_h:.3f} h**"
    )
    st.markdown(
        f"**Events per day** — `floor(points × arrival% × 24 / duration)` = "
        f"floor({p.charge_points} × {p.arrival_multiplier_pct / 100:.2f} × "
        f"24 / {stats.average_visit_duration_h:.3f}) = **{stats.charging_events_per_day:,}**"
    )
    st.markdown(
        f"**Peak power** — `min(points × power, capacity)` = min({p.charge_points} × "
        f"{p.charging_power_kw}, {session.config.peak_capacity_kw:.0f}) = **{stats.peak_power_demand_kw:.0f} kW**"
    )

# ---------------------------------------------------------------------------
# Hourly power demand
# ---------------------------------------------------------------------------
st.header("Hourly Power Demand")
st.caption("Illustrative load shape — time-of-day baseline plus random variation.")
st.plotly_chart(
    hourly_power_figure(result.hourly, session.config.peak_capacity_kw),
    use_container_width=True,
)
st.dataframe(hourly_frame(result.hourly), hide_index=True, use_container_width=True)

# ---------------------------------------------------------------------------
# Weekly overview
# ---------------------------------------------------------------------------
st.header("Weekly Overview")
st.plotly_chart(weekly_overview_figure(result.weekly), use_container_width=True)
st.dataframe(weekly_frame(result.weekly), hide_index=True, use_container_width=True)

# ---------------------------------------------------------------------------
# Totals
# ---------------------------------------------------------------------------
st.header("Totals by Horizon")
st.dataframe(totals_frame(stats), use_container_width=True)
