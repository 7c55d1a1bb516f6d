"""Tests for src/daynight/engine/switches.py."""
from __future__ import annotations

import pytest

from daynight.engine.switches import (
    GameSwitches,
    GameVariables,
    PolicyViolation,
    VariableSlot,
)


class TestGameVariables:
    def test_unset_reads_zero(self, variables):
        assert variables.value(7) == 0

    def test_set_and_read(self, variables):
        variables.set_value(7, 42)
        assert variables.value(7) == 42

    def test_id_zero_ignored(self, variables):
        variables.set_value(0, 42)
        assert variables.value(0) == 0


class TestGameSwitches:
    def test_unreserved_switch_writable(self, switches):
        switches.set_value(5, True)
        assert switches.value(5) is True

    def test_reserved_switch_rejects_direct_write(self, switches):
        switches.reserve(1, 2)
        with pytest.raises(PolicyViolation, match="Switch 1 is reserved"):
            switches.set_value(1, True)
        assert switches.value(1) is False

    def test_reserved_switch_rejected_even_while_owner_guarded(self, switches):
        handle = switches.reserve(1, 2)
        with handle.guarded():
            with pytest.raises(PolicyViolation):
                switches.set_value(2, True)

    def test_zero_ids_not_reserved(self, switches):
        switches.reserve(0, 3)
        assert not switches.is_reserved(0)
        assert switches.is_reserved(3)

    def test_only_one_owner(self, switches):
        switches.reserve(1)
        with pytest.raises(PolicyViolation):
            switches.reserve(2)


class TestReservedSwitchHandle:
    def test_write_inside_guarded_section(self, switches):
        handle = switches.reserve(1, 2)
        with handle.guarded():
            assert handle.is_guarded
            handle.set_value(1, True)
        assert switches.value(1) is True
        assert not handle.is_guarded

    def test_write_outside_guarded_section_rejected(self, switches):
        handle = switches.reserve(1, 2)
        with pytest.raises(PolicyViolation, match="guarded"):
            handle.set_value(1, True)

    def test_cannot_write_unreserved_switch(self, switches):
        handle = switches.reserve(1, 2)
        with handle.guarded():
            with pytest.raises(PolicyViolation):
                handle.set_value(3, True)

    def test_guard_cleared_after_error(self, switches):
        handle = switches.reserve(1)
        with pytest.raises(RuntimeError):
            with handle.guarded():
                raise RuntimeError("boom")
        assert not handle.is_guarded

    def test_id_zero_is_a_no_op(self, switches):
        handle = switches.reserve(1)
        handle.set_value(0, True)
        assert switches.value(0) is False


class TestVariableSlot:
    def test_reads_and_writes_variable(self):
        variables = GameVariables()
        slot = VariableSlot(variables, 9)
        slot.set(480)
        assert slot.get() == 480
        assert variables.value(9) == 480

    def test_rejects_unset_id(self):
        with pytest.raises(ValueError):
            VariableSlot(GameVariables(), 0)
