"""Open sequence/mapping contexts and the stack that holds them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from yamlemit.models.manip import FlowType, GroupType


@dataclass
class Group:
    """One open sequence or mapping.

    ``indent`` is the absolute column of the group's children;
    ``indent_width`` is the part of it this group added.
    """

    kind: GroupType
    flow: FlowType
    indent: int
    indent_width: int
    log_mark: int
    child_count: int = 0

    @property
    def is_flow(self) -> bool:
        return self.flow == FlowType.FLOW


class GroupStack:
    """LIFO stack of open groups; empty means document top level."""

    def __init__(self) -> None:
        self._groups: list[Group] = []

    def __len__(self) -> int:
        return len(self._groups)

    def __bool__(self) -> bool:
        return bool(self._groups)

    def __iter__(self) -> Iterator[Group]:
        return iter(self._groups)

    @property
    def top(self) -> Group | None:
        return self._groups[-1] if self._groups else None

    @property
    def parent(self) -> Group | None:
        """The group enclosing the top one, if any."""
        return self._groups[-2] if len(self._groups) > 1 else None

    def push(self, group: Group) -> None:
        self._groups.append(group)

    def pop(self) -> Group:
        return self._groups.pop()
