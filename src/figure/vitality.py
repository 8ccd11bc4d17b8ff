"""Energy, score and life state of a robot."""
from __future__ import annotations

import logging
from enum import Enum

from core.constants import MAX_ENERGY

logger = logging.getLogger(__name__)


class VitalityState(Enum):
    ALIVE = "alive"
    DEAD = "dead"


class Vitality:
    """Tracks energy and points; once dead, every mutator is a no-op.

    Damage may push energy below zero before the death check. There is no
    way back from the dead state. Negative amounts are ignored, so energy
    never rises above ``max_energy`` and points never decrease.
    """

    def __init__(self, max_energy: float = MAX_ENERGY) -> None:
        self.max_energy = max_energy
        self._energy = max_energy
        self._points = 0
        self._state = VitalityState.ALIVE

    @property
    def energy(self) -> float:
        return self._energy

    @property
    def points(self) -> float:
        return self._points

    @property
    def state(self) -> VitalityState:
        return self._state

    @property
    def alive(self) -> bool:
        return self._state is VitalityState.ALIVE

    @property
    def is_dead(self) -> bool:
        return self._state is VitalityState.DEAD

    def _accepts(self, action: str, amount: float) -> bool:
        if self.is_dead:
            return False
        if amount < 0:
            logger.debug("Ignoring negative %s amount %s", action, amount)
            return False
        return True

    def apply_damage(self, amount: float) -> None:
        if not self._accepts("damage", amount):
            return
        self._energy -= amount
        if self._energy <= 0:
            self._state = VitalityState.DEAD
            logger.info("Robot died (energy %s, points %s)", self._energy, self._points)

    def heal(self, amount: float) -> None:
        if not self._accepts("heal", amount):
            return
        self._energy = min(self._energy + amount, self.max_energy)

    def add_points(self, amount: float) -> None:
        if not self._accepts("points", amount):
            return
        self._points += amount
