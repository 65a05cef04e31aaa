from __future__ import annotations

import math

import numpy as np
import pytest

from slingshot_game.launch import LaunchController
from slingshot_game.simulation import ArenaConfig, Projectile, SimulationConfig


@pytest.fixture
def controller() -> LaunchController:
    return LaunchController(SimulationConfig(), ArenaConfig(anchor=(150.0, 450.0)))


@pytest.fixture
def projectile() -> Projectile:
    return Projectile(position=np.array([150.0, 450.0]), radius=15.0)


def test_press_near_anchor_starts_aiming(controller, projectile):
    projectile.launch(np.array([5.0, -3.0]))
    projectile.position = np.array([500.0, 200.0])

    assert controller.begin_aim((165.0, 470.0), projectile)

    assert controller.aim.is_aiming
    assert not projectile.is_flying
    assert np.array_equal(projectile.position, [150.0, 450.0])
    assert np.array_equal(projectile.velocity, [0.0, 0.0])


def test_press_far_from_anchor_is_ignored(controller, projectile):
    projectile.launch(np.array([5.0, -3.0]))

    assert not controller.begin_aim((150.0, 481.0), projectile)

    assert not controller.aim.is_aiming
    assert projectile.is_flying


def test_drag_without_press_is_ignored(controller, projectile):
    assert not controller.update_aim((100.0, 450.0))
    assert not controller.release_aim(projectile)

    assert controller.aim.pull_distance == 0.0
    assert not projectile.is_flying


def test_update_aim_tracks_angle_and_distance(controller, projectile):
    controller.begin_aim((150.0, 450.0), projectile)

    controller.update_aim((120.0, 490.0))

    assert controller.aim.angle == pytest.approx(math.atan2(40.0, -30.0))
    assert controller.aim.pull_distance == pytest.approx(50.0)
    assert np.array_equal(controller.aim.pointer, [120.0, 490.0])


def test_pull_distance_is_clamped(controller, projectile):
    controller.begin_aim((150.0, 450.0), projectile)

    for pointer in [(0.0, 450.0), (-900.0, 1200.0), (150.0, -5000.0), (151.0, 451.0)]:
        controller.update_aim(pointer)
        assert 0.0 <= controller.aim.pull_distance <= controller.config.max_pull_distance


def test_release_launches_opposite_the_pull(controller, projectile):
    controller.begin_aim((150.0, 450.0), projectile)
    controller.update_aim((0.0, 450.0))

    assert controller.aim.angle == pytest.approx(math.pi)
    assert controller.aim.pull_distance == pytest.approx(120.0)
    assert controller.release_aim(projectile)

    assert projectile.is_flying
    assert not controller.aim.is_aiming
    assert projectile.velocity[0] == pytest.approx(36.0)
    assert projectile.velocity[1] == pytest.approx(0.0, abs=1e-9)


def test_release_after_downward_pull_fires_upward(controller, projectile):
    controller.begin_aim((150.0, 450.0), projectile)
    controller.update_aim((150.0, 550.0))
    controller.release_aim(projectile)

    assert projectile.velocity[0] == pytest.approx(0.0, abs=1e-9)
    assert projectile.velocity[1] == pytest.approx(-30.0)


def test_second_release_is_ignored(controller, projectile):
    controller.begin_aim((150.0, 450.0), projectile)
    controller.update_aim((60.0, 450.0))
    controller.release_aim(projectile)
    velocity = projectile.velocity.copy()

    assert not controller.release_aim(projectile)
    assert np.array_equal(projectile.velocity, velocity)


def test_press_exactly_at_activation_radius_starts_aiming(controller, projectile):
    assert controller.begin_aim((150.0, 480.0), projectile)
    assert controller.aim.is_aiming


def test_press_without_drag_repeats_previous_pull(controller, projectile):
    controller.begin_aim((150.0, 450.0), projectile)
    controller.update_aim((30.0, 450.0))
    controller.release_aim(projectile)

    assert controller.begin_aim((150.0, 450.0), projectile)
    assert controller.aim.pull_distance == pytest.approx(120.0)
    assert controller.release_aim(projectile)

    assert projectile.is_flying
    assert projectile.velocity[0] == pytest.approx(36.0)
    assert projectile.velocity[1] == pytest.approx(0.0, abs=1e-9)
