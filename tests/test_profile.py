"""Tests for engine/profile.py — hourly load shape and weekly breakdown."""

from __future__ import annotations

import numpy as np
import pytest

from ev_demand_sim.config import EngineConfig, SimulationParameters
from ev_demand_sim.engine.profile import (
    SAMPLE_HOURS,
    WEEKDAY_LABELS,
    baseline_intensity,
    generate_hourly_profile,
    generate_weekly_breakdown,
)
from ev_demand_sim.engine.statistics import compute_statistics


# ═══════════════════════════════════════════════════════════════════════════
# Baseline curve
# ═══════════════════════════════════════════════════════════════════════════

class TestBaselineIntensity:

    @pytest.mark.parametrize(
        "hour, expected",
        [
            (0, 20), (5.99, 20),
            (6, 50), (8, 50),
            (9, 150), (16, 150),
            (17, 100), (19, 100),
            (20, 40), (23.5, 40),
        ],
    )
    def test_bands(self, hour, expected):
        assert baseline_intensity(hour) == expected

    @pytest.mark.parametrize("hour", [-1, 24, 30])
    def test_out_of_day_rejected(self, hour):
        with pytest.raises(ValueError):
            baseline_intensity(hour)


# ═══════════════════════════════════════════════════════════════════════════
# Hourly profile
# ═══════════════════════════════════════════════════════════════════════════

class TestHourlyProfile:

    def test_twelve_samples_in_order(self, rng):
        hourly = generate_hourly_profile(rng)
        assert len(hourly) == 12
        assert [s.hour for s in hourly] == list(SAMPLE_HOURS)
        assert [s.hour_label for s in hourly] == [f"{h}:00" for h in range(0, 24, 2)]

    def test_labels_exact(self, rng):
        labels = [s.hour_label for s in generate_hourly_profile(rng)]
        assert labels[0] == "0:00"
        assert labels[4] == "8:00"
        assert labels[-1] == "22:00"

    def test_power_within_bounds(self):
        for seed in range(50):
            for s in generate_hourly_profile(np.random.default_rng(seed)):
                assert 10.0 <= s.power_kw <= 180.0

    def test_power_anchored_to_baseline(self, rng):
        for s in generate_hourly_profile(rng):
            assert s.power_kw <= s.baseline_kw + 10.0

    def test_seed_reproducible(self):
        a = generate_hourly_profile(np.random.default_rng(7))
        b = generate_hourly_profile(np.random.default_rng(7))
        assert [s.power_kw for s in a] == [s.power_kw for s in b]

    def test_different_seeds_differ(self):
        a = generate_hourly_profile(np.random.default_rng(1))
        b = generate_hourly_profile(np.random.default_rng(2))
        assert [s.power_kw for s in a] != [s.power_kw for s in b]

    def test_low_ceiling_clips(self):
        class _MaxRng:
            def uniform(self, low, high, size):
                return np.ones(size)

        config = EngineConfig(peak_capacity_kw=30, hourly_floor_kw=10)
        hourly = generate_hourly_profile(_MaxRng(), config)
        assert max(s.power_kw for s in hourly) == 30
        # Night baseline 20 kW + 10 kW floor lands exactly on the cap.
        assert [s.power_kw for s in hourly if s.hour < 6] == [30.0, 30.0, 30.0]

    def test_zero_noise_gives_floor_plus_zero(self):
        class _ZeroRng:
            def uniform(self, low, high, size):
                return np.zeros(size)

        hourly = generate_hourly_profile(_ZeroRng())
        assert all(s.power_kw == 10.0 for s in hourly)


# ═══════════════════════════════════════════════════════════════════════════
# Weekly breakdown
# ═══════════════════════════════════════════════════════════════════════════

class TestWeeklyBreakdown:

    def test_seven_days_mon_to_sun(self, default_params):
        weekly = generate_weekly_breakdown(compute_statistics(default_params))
        assert [w.day_label for w in weekly] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
        assert tuple(w.day_label for w in weekly) == WEEKDAY_LABELS

    def test_uniform_days(self, default_params):
        weekly = generate_weekly_breakdown(compute_statistics(default_params))
        assert {w.events for w in weekly} == {293}
        assert {w.energy_kwh for w in weekly} == {5274}

    def test_energy_floored(self):
        params = SimulationParameters(
            charge_points=1,
            arrival_multiplier_pct=100,
            consumption_per_visit_kwh=7.3,
            charging_power_kw=50,
        )
        stats = compute_statistics(params)
        weekly = generate_weekly_breakdown(stats)
        assert weekly[0].energy_kwh == int(stats.total_energy_kwh.day)
        assert isinstance(weekly[0].energy_kwh, int)
