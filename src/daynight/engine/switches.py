"""Game switches and variables, with reserved switches only the clock may set."""
from __future__ import annotations

import contextlib
import logging
from typing import Generator, Protocol

logger = logging.getLogger(__name__)


class PolicyViolation(RuntimeError):
    """A reserved switch was written from outside its owner's guarded section."""


class GameVariables:
    """Integer cells indexed by id. Unset ids read as 0."""

    def __init__(self) -> None:
        self._data: dict[int, int] = {}

    def value(self, variable_id: int) -> int:
        return self._data.get(variable_id, 0)

    def set_value(self, variable_id: int, value: int) -> None:
        if variable_id > 0:
            self._data[variable_id] = int(value)


class GameSwitches:
    """Boolean cells indexed by id. Unset ids read as False.

    Switches handed out through :meth:`reserve` can no longer be set through
    :meth:`set_value`; only the returned handle may write them, and only
    inside its guarded section.
    """

    def __init__(self) -> None:
        self._data: dict[int, bool] = {}
        self._reserved: frozenset[int] = frozenset()
        self._handle_issued = False

    def value(self, switch_id: int) -> bool:
        return self._data.get(switch_id, False)

    def set_value(self, switch_id: int, value: bool) -> None:
        if switch_id > 0 and switch_id in self._reserved:
            raise PolicyViolation(
                f"Switch {switch_id} is reserved for the day-night cycle "
                "and should not be set outside of it."
            )
        self._write(switch_id, value)

    def is_reserved(self, switch_id: int) -> bool:
        return switch_id in self._reserved

    def reserve(self, *switch_ids: int) -> ReservedSwitchHandle:
        """Reserve switches and return the only handle that can write them.

        Ids of 0 are ignored. A second call raises PolicyViolation.
        """
        if self._handle_issued:
            raise PolicyViolation("Reserved switches already have an owner.")
        self._handle_issued = True
        ids = frozenset(i for i in switch_ids if i > 0)
        self._reserved = ids
        logger.debug("Reserved switches: %s", sorted(ids))
        return ReservedSwitchHandle(self, ids)

    def _write(self, switch_id: int, value: bool) -> None:
        if switch_id > 0:
            self._data[switch_id] = bool(value)


class ReservedSwitchHandle:
    """Write capability for reserved switches.

    Writes are accepted only while :meth:`guarded` is open.
    """

    def __init__(self, switches: GameSwitches, switch_ids: frozenset[int]) -> None:
        self._switches = switches
        self._ids = switch_ids
        self._guarded = False

    @property
    def is_guarded(self) -> bool:
        return self._guarded

    @contextlib.contextmanager
    def guarded(self) -> Generator[ReservedSwitchHandle, None, None]:
        self._guarded = True
        try:
            yield self
        finally:
            self._guarded = False

    def set_value(self, switch_id: int, value: bool) -> None:
        if switch_id <= 0:
            return
        if switch_id not in self._ids:
            raise PolicyViolation(f"Switch {switch_id} is not reserved by this handle.")
        if not self._guarded:
            raise PolicyViolation(
                f"Switch {switch_id} may only be set inside the guarded sync section."
            )
        self._switches._write(switch_id, value)


class TimeSlot(Protocol):
    """Persisted integer cell holding the clock's total minutes."""

    def get(self) -> int: ...

    def set(self, value: int) -> None: ...


class VariableSlot:
    """TimeSlot stored in a game variable, so it is saved with the game."""

    def __init__(self, variables: GameVariables, variable_id: int) -> None:
        if variable_id <= 0:
            raise ValueError(f"Invalid time variable id: {variable_id}")
        self.variables = variables
        self.variable_id = variable_id

    def get(self) -> int:
        return self.variables.value(self.variable_id)

    def set(self, value: int) -> None:
        self.variables.set_value(self.variable_id, value)
