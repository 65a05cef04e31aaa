from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .vector_math import Vector, distance, to_vector, zeros


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    gravity: float = 0.5
    air_resistance: float = 0.99
    ground_bounce: float = -0.6
    ground_friction: float = 0.8
    wall_bounce: float = -0.6
    max_pull_distance: float = 120.0
    launch_power: float = 0.3


@dataclass(frozen=True, slots=True)
class ArenaConfig:
    width: float = 800.0
    height: float = 600.0
    anchor: tuple[float, float] = (150.0, 450.0)
    activation_radius: float = 30.0
    projectile_radius: float = 15.0
    target_radius: float = 30.0
    target_x_range: tuple[int, int] = (400, 750)
    target_y_range: tuple[int, int] = (100, 450)
    time_limit: float = 30.0  # seconds

    @property
    def ground_y(self) -> float:
        return self.height

    @property
    def left_bound(self) -> float:
        return 0.0

    @property
    def right_bound(self) -> float:
        return self.width

    @property
    def anchor_point(self) -> Vector:
        return to_vector(self.anchor)


@dataclass(slots=True)
class Projectile:
    position: Vector
    radius: float
    velocity: Vector = field(default_factory=zeros)
    is_flying: bool = False

    def reset(self, anchor: Vector) -> None:
        """Put the projectile back at rest on the anchor."""
        self.position = to_vector(anchor)
        self.velocity = zeros()
        self.is_flying = False

    def launch(self, velocity: Vector) -> None:
        self.velocity = to_vector(velocity)
        self.is_flying = True

    def copy(self) -> "Projectile":
        return Projectile(
            position=self.position.copy(),
            radius=self.radius,
            velocity=self.velocity.copy(),
            is_flying=self.is_flying,
        )


@dataclass(slots=True)
class Target:
    position: Vector
    radius: float
    hit: bool = False

    def relocate(
        self,
        rng: np.random.Generator,
        x_range: tuple[int, int],
        y_range: tuple[int, int],
    ) -> None:
        """Move to a random integer point inside the closed ranges and clear the hit flag."""
        x = rng.integers(x_range[0], x_range[1], endpoint=True)
        y = rng.integers(y_range[0], y_range[1], endpoint=True)
        self.position = np.array([x, y], dtype=np.float64)
        self.hit = False

    def copy(self) -> "Target":
        return Target(position=self.position.copy(), radius=self.radius, hit=self.hit)


@dataclass(slots=True)
class StepReport:
    ground_contact: bool = False
    wall_contact: bool = False
    target_hit: bool = False
    hit_position: Optional[Vector] = None


class PhysicsStepper:
    """Fixed-frame point-mass integrator with ground, wall and target resolution."""

    def __init__(self, config: SimulationConfig, arena: ArenaConfig) -> None:
        self.config = config
        self.arena = arena

    def integrate(self, projectile: Projectile) -> None:
        velocity = projectile.velocity.copy()
        velocity[1] += self.config.gravity
        velocity *= self.config.air_resistance
        projectile.velocity = velocity
        projectile.position = projectile.position + velocity

    def resolve_ground(self, projectile: Projectile) -> bool:
        ground_y = self.arena.ground_y
        if projectile.position[1] + projectile.radius <= ground_y:
            return False
        projectile.position[1] = ground_y - projectile.radius
        projectile.velocity[1] *= self.config.ground_bounce
        projectile.velocity[0] *= self.config.ground_friction
        return True

    def resolve_walls(self, projectile: Projectile) -> bool:
        # Velocity only; the position may overlap the wall until the next frame.
        x = projectile.position[0]
        r = projectile.radius
        if x + r > self.arena.right_bound or x - r < self.arena.left_bound:
            projectile.velocity[0] *= self.config.wall_bounce
            return True
        return False

    @staticmethod
    def touches(projectile: Projectile, target: Target) -> bool:
        return distance(projectile.position, target.position) <= projectile.radius + target.radius

    def step(
        self,
        projectile: Projectile,
        target: Target,
        rng: np.random.Generator,
    ) -> StepReport:
        """Advance a flying projectile by one frame and resolve its contacts.

        A target contact marks the target as hit and relocates it before
        returning, so the flag is never observed set between steps.
        """
        report = StepReport()
        if not projectile.is_flying:
            return report

        self.integrate(projectile)
        report.ground_contact = self.resolve_ground(projectile)
        report.wall_contact = self.resolve_walls(projectile)

        if not target.hit and self.touches(projectile, target):
            target.hit = True
            report.target_hit = True
            report.hit_position = target.position.copy()
            target.relocate(rng, self.arena.target_x_range, self.arena.target_y_range)
        return report
