"""Plotly figures for the dashboard."""

from __future__ import annotations

import plotly.graph_objects as go

from ev_demand_sim.models.results import HourlyPowerSample, WeeklySample

_LAYOUT = dict(
    height=300,
    margin=dict(l=20, r=20, t=30, b=20),
    plot_bgcolor="rgba(0,0,0,0)",
    paper_bgcolor="rgba(0,0,0,0)",
    font=dict(family="Inter", size=11, color="rgba(255,255,255,0.7)"),
    legend=dict(orientation="h", yanchor="bottom", y=1.02, x=0),
)


def hourly_power_figure(
    hourly: list[HourlyPowerSample],
    capacity_kw: float | None = None,
) -> go.Figure:
    """Line chart of the hourly load shape, with the site ceiling if given."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[s.hour_label for s in hourly],
        y=[s.power_kw for s in hourly],
        mode="lines+markers",
        line=dict(color="#3b82f6", shape="spline"),
        name="Power Demand",
    ))
    if capacity_kw is not None:
        fig.add_hline(
            y=capacity_kw, line_dash="dash", line_color="#e17055",
            annotation_text=f"Capacity {capacity_kw:.0f} kW",
            annotation_position="top left",
        )
    fig.update_layout(xaxis_title="Hour", yaxis_title="kW", **_LAYOUT)
    return fig


def weekly_overview_figure(weekly: list[WeeklySample]) -> go.Figure:
    """Grouped bars: events on the left axis, energy on the right."""
    days = [s.day_label for s in weekly]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=days, y=[s.events for s in weekly],
        name="Charging Events", marker_color="#007BFF",
        offsetgroup=0, yaxis="y",
    ))
    fig.add_trace(go.Bar(
        x=days, y=[s.energy_kwh for s in weekly],
        name="Energy Consumed (kWh)", marker_color="#10b981",
        offsetgroup=1, yaxis="y2",
    ))
    fig.update_layout(
        barmode="group",
        yaxis=dict(title="Events"),
        yaxis2=dict(title="kWh", overlaying="y", side="right", showgrid=False),
        **_LAYOUT,
    )
    return fig
