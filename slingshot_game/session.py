"""Single-player game session: slingshot, projectile, target and score."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from .launch import AimState, LaunchController
from .simulation import (
    ArenaConfig,
    PhysicsStepper,
    Projectile,
    SimulationConfig,
    StepReport,
    Target,
)
from .vector_math import zeros

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SessionSnapshot:
    projectile: Projectile
    aim: AimState
    target: Target
    hits: int
    game_over: bool


class GameSession:
    """Owns all mutable state of one game.

    The driver calls ``begin_aim``/``update_aim``/``release_aim`` for pointer
    events and ``step`` once per frame. Once ``game_over`` is set every one
    of them leaves the state untouched.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        arena: Optional[ArenaConfig] = None,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> None:
        config = config if config is not None else SimulationConfig()
        arena = arena if arena is not None else ArenaConfig()
        self.config = config
        self.arena = arena
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.launcher = LaunchController(config, arena)
        self.stepper = PhysicsStepper(config, arena)
        self.projectile = Projectile(position=arena.anchor_point, radius=arena.projectile_radius)
        self.target = Target(position=zeros(), radius=arena.target_radius)
        self.target.relocate(self.rng, arena.target_x_range, arena.target_y_range)
        self.hits = 0
        self.game_over = False

    @property
    def aim(self) -> AimState:
        return self.launcher.aim

    def begin_aim(self, point: Iterable[float]) -> bool:
        if self.game_over:
            return False
        return self.launcher.begin_aim(point, self.projectile)

    def update_aim(self, point: Iterable[float]) -> bool:
        if self.game_over:
            return False
        return self.launcher.update_aim(point)

    def release_aim(self) -> bool:
        if self.game_over:
            return False
        launched = self.launcher.release_aim(self.projectile)
        if launched:
            logger.debug(
                "launch angle=%.3f pull=%.1f velocity=%s",
                self.aim.angle,
                self.aim.pull_distance,
                self.projectile.velocity,
            )
        return launched

    def step(self) -> StepReport:
        if self.game_over:
            return StepReport()
        report = self.stepper.step(self.projectile, self.target, self.rng)
        if report.target_hit:
            self.hits += 1
            logger.info("target hit at %s, hits=%d", report.hit_position, self.hits)
            logger.debug("target moved to %s", self.target.position)
        return report

    def end(self) -> None:
        if not self.game_over:
            self.game_over = True
            logger.info("game over, hits=%d", self.hits)

    def snapshot(self) -> SessionSnapshot:
        aim = self.aim
        return SessionSnapshot(
            projectile=self.projectile.copy(),
            aim=AimState(
                is_aiming=aim.is_aiming,
                angle=aim.angle,
                pull_distance=aim.pull_distance,
                pointer=None if aim.pointer is None else aim.pointer.copy(),
            ),
            target=self.target.copy(),
            hits=self.hits,
            game_over=self.game_over,
        )


class Countdown:
    """Wall-clock budget that ends the session when it runs out."""

    def __init__(self, time_limit: float) -> None:
        self.time_limit = time_limit
        self.remaining = time_limit

    @property
    def expired(self) -> bool:
        return self.remaining <= 0.0

    @property
    def seconds_left(self) -> int:
        return max(0, math.ceil(self.remaining))

    def advance(self, dt: float, session: GameSession) -> bool:
        """Consume dt seconds; returns True on the call that exhausts the budget."""
        if self.expired:
            return False
        self.remaining = max(0.0, self.remaining - dt)
        if self.expired:
            session.end()
            return True
        return False
