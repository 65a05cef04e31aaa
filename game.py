from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pygame

from slingshot_game.session import Countdown, GameSession
from slingshot_game.simulation import ArenaConfig, SimulationConfig
from slingshot_game.vector_math import Vector, clamp

logger = logging.getLogger(__name__)

BACKGROUND_TOP = np.array([150, 200, 245])
BACKGROUND_BOTTOM = np.array([235, 245, 255])
FORK_COLOR = (139, 69, 19)
BAND_COLOR = (20, 20, 20)
PROJECTILE_COLOR = (90, 90, 90)
TARGET_COLOR = (220, 40, 40)
HIT_FLASH_COLOR = (255, 200, 120)
HUD_COLOR = (10, 10, 10)
OVERLAY_COLOR = (0, 0, 0, 150)

FPS_TARGET = 60
FORK_HALF_WIDTH = 30
FORK_HEIGHT = 100
FORK_TIP_OFFSET = 10


@dataclass
class HitFlash:
    position: Vector
    age: float = 0.0
    duration: float = 0.5

    def progress(self) -> float:
        return clamp(self.age / self.duration, 0.0, 1.0)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Slingshot target practice")
    parser.add_argument("--seed", type=int, default=None, help="seed for target placement")
    parser.add_argument("--time-limit", type=float, default=ArenaConfig().time_limit)
    parser.add_argument("--fps", type=int, default=FPS_TARGET)
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def build_background(width: int, height: int) -> pygame.Surface:
    strip = pygame.Surface((1, height))
    for y in range(height):
        t = y / max(height - 1, 1)
        color = BACKGROUND_TOP * (1 - t) + BACKGROUND_BOTTOM * t
        strip.set_at((0, y), tuple(color.astype(int)))
    return pygame.transform.smoothscale(strip, (width, height))


def to_screen(point: Vector) -> tuple[int, int]:
    return int(round(point[0])), int(round(point[1]))


def fork_tips(anchor: Vector) -> tuple[tuple[int, int], tuple[int, int]]:
    ax, ay = to_screen(anchor)
    return (ax - FORK_TIP_OFFSET, ay), (ax + FORK_TIP_OFFSET, ay)


def draw_slingshot(surface: pygame.Surface, session: GameSession) -> None:
    anchor = session.launcher.anchor
    ax, ay = to_screen(anchor)
    left_tip, right_tip = fork_tips(anchor)
    pygame.draw.line(surface, FORK_COLOR, (ax - FORK_HALF_WIDTH, ay + FORK_HEIGHT), left_tip, 6)
    pygame.draw.line(surface, FORK_COLOR, (ax + FORK_HALF_WIDTH, ay + FORK_HEIGHT), right_tip, 6)

    aim = session.aim
    if aim.is_aiming and aim.pointer is not None:
        grip = to_screen(aim.pointer)
        pygame.draw.line(surface, BAND_COLOR, left_tip, grip, 3)
        pygame.draw.line(surface, BAND_COLOR, right_tip, grip, 3)


def draw_projectile(surface: pygame.Surface, session: GameSession) -> None:
    projectile = session.projectile
    pygame.draw.circle(surface, PROJECTILE_COLOR, to_screen(projectile.position), int(projectile.radius))


def draw_target(surface: pygame.Surface, session: GameSession) -> None:
    target = session.target
    pygame.draw.circle(surface, TARGET_COLOR, to_screen(target.position), int(target.radius))


def draw_hit_flashes(surface: pygame.Surface, flashes: list[HitFlash], base_radius: float) -> None:
    for flash in flashes:
        t = flash.progress()
        if t >= 1.0:
            continue
        radius = int(base_radius * (1.0 + 1.5 * t))
        color = tuple(int(HIT_FLASH_COLOR[i] * (1 - t * 0.5)) for i in range(3))
        pygame.draw.circle(surface, color, to_screen(flash.position), radius, 3)


def hud_lines(session: GameSession, countdown: Countdown) -> list[str]:
    return [
        f"Hits: {session.hits}",
        f"Time Left: {countdown.seconds_left}s",
    ]


def draw_hud(
    surface: pygame.Surface,
    session: GameSession,
    countdown: Countdown,
    font: pygame.font.Font,
) -> None:
    for idx, text in enumerate(hud_lines(session, countdown)):
        surface.blit(font.render(text, True, HUD_COLOR), (20, 16 + idx * 28))


def draw_game_over(surface: pygame.Surface, session: GameSession, font: pygame.font.Font) -> None:
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill(OVERLAY_COLOR)
    surface.blit(overlay, (0, 0))
    text = font.render(f"Game Over! Hits: {session.hits}", True, (255, 255, 255))
    rect = text.get_rect(center=(surface.get_width() // 2, surface.get_height() // 2))
    surface.blit(text, rect)


def handle_event(session: GameSession, event: pygame.event.Event) -> bool:
    """Feed one pygame event to the session; returns False when the game should close."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
        return False
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        session.begin_aim(event.pos)
    elif event.type == pygame.MOUSEMOTION:
        session.update_aim(event.pos)
    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        session.release_aim()
    return True


def handle_events(session: GameSession) -> bool:
    running = True
    for event in pygame.event.get():
        running = handle_event(session, event) and running
    return running


def age_flashes(flashes: list[HitFlash], dt: float) -> None:
    for flash in flashes:
        flash.age += dt
    flashes[:] = [flash for flash in flashes if flash.age < flash.duration]


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    arena = ArenaConfig(time_limit=args.time_limit)
    session = GameSession(config=SimulationConfig(), arena=arena, seed=args.seed)
    countdown = Countdown(arena.time_limit)
    flashes: list[HitFlash] = []

    pygame.init()
    try:
        width, height = int(arena.width), int(arena.height)
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Slingshot")
        font = pygame.font.SysFont("Arial", 20)
        big_font = pygame.font.SysFont("Arial", 40)
        clock = pygame.time.Clock()
        background = build_background(width, height)
        logger.info("session started, time limit %.0fs", arena.time_limit)

        running = True
        while running:
            dt = clock.tick(args.fps) / 1000.0

            running = handle_events(session)
            if not running:
                break

            if countdown.advance(dt, session):
                logger.info("time is up after %.1fs", arena.time_limit)

            report = session.step()
            if report.target_hit and report.hit_position is not None:
                flashes.append(HitFlash(position=report.hit_position))
            age_flashes(flashes, dt)

            screen.blit(background, (0, 0))
            draw_slingshot(screen, session)
            draw_projectile(screen, session)
            draw_target(screen, session)
            draw_hit_flashes(screen, flashes, arena.target_radius)
            draw_hud(screen, session, countdown, font)
            if session.game_over:
                draw_game_over(screen, session, big_font)

            pygame.display.flip()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
