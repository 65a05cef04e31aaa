"""2D slingshot target game: launch control and per-frame physics."""

from .launch import AimState, LaunchController
from .session import Countdown, GameSession, SessionSnapshot
from .simulation import (
    ArenaConfig,
    PhysicsStepper,
    Projectile,
    SimulationConfig,
    StepReport,
    Target,
)

__all__ = [
    "AimState",
    "ArenaConfig",
    "Countdown",
    "GameSession",
    "LaunchController",
    "PhysicsStepper",
    "Projectile",
    "SessionSnapshot",
    "SimulationConfig",
    "StepReport",
    "Target",
]
