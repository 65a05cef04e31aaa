"""Pointer gestures on the slingshot converted into a launch velocity."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from .simulation import ArenaConfig, Projectile, SimulationConfig
from .vector_math import Vector, distance, from_polar, to_vector


@dataclass(slots=True)
class AimState:
    is_aiming: bool = False
    angle: float = 0.0  # radians, from anchor towards the pointer
    pull_distance: float = 0.0
    pointer: Vector | None = None


class LaunchController:
    """Press near the anchor, drag to pull, release to fire the other way.

    Calls that make no sense in the current state (dragging before a press,
    pressing away from the anchor, releasing twice) are ignored and report
    ``False``.
    """

    def __init__(self, config: SimulationConfig, arena: ArenaConfig) -> None:
        self.config = config
        self.arena = arena
        self.anchor = arena.anchor_point
        self.aim = AimState()

    def begin_aim(self, pointer: Iterable[float], projectile: Projectile) -> bool:
        point = to_vector(pointer)
        if distance(point, self.anchor) > self.arena.activation_radius:
            return False
        self.aim.is_aiming = True
        self.aim.pointer = point
        projectile.reset(self.anchor)
        return True

    def update_aim(self, pointer: Iterable[float]) -> bool:
        if not self.aim.is_aiming:
            return False
        point = to_vector(pointer)
        offset = point - self.anchor
        self.aim.angle = math.atan2(offset[1], offset[0])
        self.aim.pull_distance = min(self.config.max_pull_distance, distance(point, self.anchor))
        self.aim.pointer = point
        return True

    def launch_velocity(self) -> Vector:
        return -self.config.launch_power * from_polar(self.aim.angle, self.aim.pull_distance)

    def release_aim(self, projectile: Projectile) -> bool:
        if not self.aim.is_aiming:
            return False
        velocity = self.launch_velocity()
        self.aim.is_aiming = False
        projectile.launch(velocity)
        return True
