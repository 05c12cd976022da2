"""The grouped set of gate templates offered to an editor.

Groups keep ``None`` gaps so a front end can lay them out in fixed cells.
A toolbox owns its evolving gates and the clock that drives them; slices
built from toolbox gates share those instances.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from . import library
from .evolving import (
    EvolvingGate,
    PhaseClock,
    evolving_h,
    evolving_r,
    evolving_x,
    evolving_y,
    evolving_z,
)
from .gate import ANTI_CONTROL, CONTROL, PEEK, Gate


@dataclass(frozen=True)
class ToolboxGroup:
    """A labelled column of gate templates."""

    hint: str
    gates: Tuple[Optional[Gate], ...]

    def present(self) -> Tuple[Gate, ...]:
        """The gates of this group without layout gaps."""
        return tuple(g for g in self.gates if g is not None)


class Toolbox:
    """Gate templates grouped for display, plus the clock for evolving ones."""

    def __init__(self, groups: Tuple[ToolboxGroup, ...], clock: PhaseClock) -> None:
        self.groups = groups
        self.clock = clock

    def __iter__(self) -> Iterator[Gate]:
        return iter(self.all_gates())

    def all_gates(self) -> Tuple[Gate, ...]:
        return tuple(g for group in self.groups for g in group.present())

    def evolving_gates(self) -> Tuple[EvolvingGate, ...]:
        return tuple(g for g in self.all_gates() if isinstance(g, EvolvingGate))

    def group(self, hint: str) -> ToolboxGroup:
        for group in self.groups:
            if group.hint == hint:
                return group
        raise KeyError(hint)

    def find(self, symbol: str) -> Gate:
        """Return the template whose symbol is ``symbol``."""
        for gate in self.all_gates():
            if gate.symbol == symbol:
                return gate
        raise KeyError(symbol)


def default_toolbox(step: Optional[float] = None) -> Toolbox:
    """
    Build the standard toolbox.

    Fixed gates and the slot markers are module-level singletons and are
    shared between toolboxes. Evolving gates are created fresh, together
    with a :class:`PhaseClock` that drives them.
    """
    spin_x = evolving_x()
    spin_y = evolving_y()
    spin_z = evolving_z()
    spin_r = evolving_r()
    spin_h = evolving_h()

    groups = (
        ToolboxGroup("Special", (CONTROL, PEEK, None, ANTI_CONTROL)),
        ToolboxGroup("Half Turns", (library.H, None, None, library.X, library.Y, library.Z)),
        ToolboxGroup("Quarter Turns (+/-)", library.QUARTER_TURNS),
        ToolboxGroup("Evolving", (spin_x, spin_y, spin_z, spin_r, spin_h)),
        ToolboxGroup("Other Z", library.OTHER_Z),
    )
    evolving = (spin_x, spin_y, spin_z, spin_r, spin_h)
    clock = PhaseClock(evolving) if step is None else PhaseClock(evolving, step=step)
    return Toolbox(groups, clock)


__all__ = ["Toolbox", "ToolboxGroup", "default_toolbox"]
