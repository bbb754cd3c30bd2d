"""Scoped option values and the log that rolls local overrides back.

Every option keeps its working value plus the value of its most recent
global write.  A global write bumps the option's generation; a local write
is recorded in :class:`ModifiedSettingsLog` together with the generation it
saw.  When a context closes, each recorded option goes back to the value it
had before the local write, unless a global write happened in the meantime,
in which case the latest global value wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ScopedOption(Generic[T]):
    """A single formatting value with a global default and local overrides."""

    def __init__(self, name: str, value: T) -> None:
        self._name = name
        self._value = value
        self._global_value = value
        self._generation = 0

    def __repr__(self) -> str:
        return f"ScopedOption({self._name!r}, {self._value!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> T:
        return self._value

    @property
    def global_value(self) -> T:
        return self._global_value

    @property
    def generation(self) -> int:
        """Number of global writes so far."""
        return self._generation

    def set_global(self, value: T) -> None:
        self._value = value
        self._global_value = value
        self._generation += 1

    def set_local(self, value: T) -> None:
        self._value = value

    def restore(self, change: SettingChange) -> None:
        """Undo a recorded local override."""
        if change.generation != self._generation:
            self._value = self._global_value
        else:
            self._value = change.previous


@dataclass(frozen=True)
class SettingChange:
    """One undo record: the option, its prior value and the generation seen."""

    option: ScopedOption[Any]
    previous: Any
    generation: int


class ModifiedSettingsLog:
    """Shared undo log for local overrides, sliced per open context.

    A context remembers :meth:`mark` when it opens; every change recorded
    after that mark belongs to it and is undone by :meth:`restore`.
    """

    def __init__(self) -> None:
        self._changes: list[SettingChange] = []

    def __len__(self) -> int:
        return len(self._changes)

    def mark(self) -> int:
        return len(self._changes)

    def record(self, option: ScopedOption[Any], since: int = 0) -> bool:
        """Record *option* as locally modified in the slice starting at *since*.

        Returns False if the option is already recorded in that slice, in
        which case the first undo record is kept.
        """
        if self.is_recorded(option, since):
            return False
        self._changes.append(
            SettingChange(option=option, previous=option.value, generation=option.generation)
        )
        return True

    def is_recorded(self, option: ScopedOption[Any], since: int = 0) -> bool:
        return any(change.option is option for change in self._changes[since:])

    def options(self, since: int = 0) -> list[str]:
        """Names of the options recorded in the slice starting at *since*."""
        return [change.option.name for change in self._changes[since:]]

    def restore(self, since: int = 0) -> list[str]:
        """Undo and drop every change recorded at or after *since*, newest first."""
        restored: list[str] = []
        while len(self._changes) > since:
            change = self._changes.pop()
            change.option.restore(change)
            restored.append(change.option.name)
        return restored
