"""Tests for session.py — form sanitisation and the reactive parameter cell."""

from __future__ import annotations

import numpy as np
import pytest

from ev_demand_sim.config import EngineConfig, SimulationParameters
from ev_demand_sim.engine.simulator import simulate_demand
from ev_demand_sim.session import ParameterSession, parse_field_input


# ═══════════════════════════════════════════════════════════════════════════
# Input sanitisation
# ═══════════════════════════════════════════════════════════════════════════

class TestParseFieldInput:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("20", 20),
            ("  18 ", 18),
            ("0", 0),
            ("007", 7),
            ("0.5", 0.5),
            ("12.5", 12.5),
            ("-3", -3),
            ("", None),
            ("   ", None),
            ("00", None),
        ],
    )
    def test_text(self, raw, expected):
        assert parse_field_input(raw) == expected

    def test_int_type_kept(self):
        assert isinstance(parse_field_input("42"), int)

    def test_garbage_passed_through(self):
        assert parse_field_input("abc") == "abc"

    def test_non_string_untouched(self):
        assert parse_field_input(11.0) == 11.0
        assert parse_field_input(None) is None


# ═══════════════════════════════════════════════════════════════════════════
# Session
# ═══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def session() -> ParameterSession:
    return ParameterSession(EngineConfig(random_seed=1), rng=np.random.default_rng(1))


class TestParameterSession:

    def test_starts_valid_with_defaults(self, session):
        assert session.is_valid
        assert session.parameters == SimulationParameters()
        assert session.result is not None
        assert session.result.statistics.charging_events_per_day == 293

    def test_invalid_edit_blocks_result(self, session):
        errors = session.update("charge_points", "0")
        assert errors == {"charge_points": "Must be between 1 and 50"}
        assert not session.is_valid
        assert session.result is None
        assert session.parameters is None

    def test_empty_box_is_transient_error(self, session):
        session.update("charging_power_kw", "")
        assert session.errors == {"charging_power_kw": "Must be between 1 and 50 kW"}
        session.update("charging_power_kw", "22")
        assert session.is_valid
        assert session.result.statistics.peak_power_demand_kw == 180

    def test_other_fields_still_checked(self, session):
        session.update("charge_points", "abc")
        session.update("arrival_multiplier_pct", "500")
        assert set(session.errors) == {"charge_points", "arrival_multiplier_pct"}

    def test_valid_edit_recomputes(self, session):
        session.update("charge_points", "10")
        session.update("consumption_per_visit_kwh", "22")
        stats = session.result.statistics
        assert stats.charging_events_per_day == 120
        assert stats.peak_power_demand_kw == 110

    def test_subscribers_notified_only_when_valid(self, session):
        seen = []
        session.subscribe(seen.append)
        session.update("charge_points", "0")
        assert seen == []
        session.update("charge_points", "5")
        assert len(seen) == 1
        assert seen[0].parameters.charge_points == 5

    def test_unknown_field(self, session):
        with pytest.raises(KeyError):
            session.update("voltage", "230")

    def test_reset(self, session):
        session.update("charge_points", "0")
        session.reset()
        assert session.is_valid
        assert session.values == SimulationParameters().model_dump()

    def test_values_is_copy(self, session):
        session.values["charge_points"] = 999
        assert session.values["charge_points"] == 20

    def test_initial_values_single_recompute(self):
        seen = []
        values = {"charge_points": "10", "consumption_per_visit_kwh": 22}
        session = ParameterSession(
            EngineConfig(random_seed=3), rng=np.random.default_rng(3), values=values
        )
        session.subscribe(seen.append)
        assert session.result.statistics.charging_events_per_day == 120
        assert seen == []

    def test_seeded_session_uses_first_draws(self):
        session = ParameterSession(
            EngineConfig(random_seed=8),
            rng=np.random.default_rng(8),
            values={"charge_points": 10},
        )
        expected = simulate_demand(session.parameters, rng=np.random.default_rng(8))
        assert session.result.hourly == expected.hourly
