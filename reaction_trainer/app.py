"""Pygame UI shell for the reaction speed test.

The window shows a status line, a Start button, five level buttons, the ten
digit buttons, the numeric-pad grid (levels 4-5 only) and the latest reaction
chart. Clicks and key presses are turned into key identifiers and handed to
the ReactionTest controller; timing, sequencing, persistence and charting
live in reaction_trainer/* (core modules).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import pygame

from .clock import RealClock
from .config import TrainerConfig
from .keys import BASE_KEYS, LEVELS, NUMPAD_KEYS, resolve_key_name
from .reaction_core import Phase, ReactionSnapshot, ReactionTrainerError
from .reaction_test import ReactionTest, build_reaction_test
from .recorder import SessionRecorder

logger = logging.getLogger(__name__)

WINDOW_SIZE = (800, 700)
TARGET_FPS = 60

START_BUTTON_RECT = pygame.Rect(20, 100, 140, 40)
LEVEL_ROW_Y = 150
DIGIT_ROW_Y = 210
NUMPAD_TOP_Y = 270
CHART_RECT = pygame.Rect(360, 270, 400, 300)

BG = (18, 18, 24)
TEXT = (238, 245, 255)
MUTED = (170, 176, 190)
WARN = (240, 170, 90)
BUTTON_BG = (44, 52, 78)
BUTTON_BORDER = (98, 112, 160)
BUTTON_ACTIVE_BG = (36, 110, 230)
BUTTON_ACTIVE_BORDER = (200, 224, 255)
LEVEL_SELECTED_BG = (70, 84, 128)

_PYGAME_KEYS: dict[int, str] = {
    pygame.K_1: "1",
    pygame.K_2: "2",
    pygame.K_3: "3",
    pygame.K_4: "4",
    pygame.K_5: "5",
    pygame.K_6: "6",
    pygame.K_7: "7",
    pygame.K_8: "8",
    pygame.K_9: "9",
    pygame.K_0: "0",
    pygame.K_KP1: "Num1",
    pygame.K_KP2: "Num2",
    pygame.K_KP3: "Num3",
    pygame.K_KP4: "Num4",
    pygame.K_KP5: "Num5",
    pygame.K_KP6: "Num6",
    pygame.K_KP7: "Num7",
    pygame.K_KP8: "Num8",
    pygame.K_KP9: "Num9",
    pygame.K_KP0: "Num0",
}


def key_from_event(event: pygame.event.Event) -> str | None:
    """Map a KEYDOWN event to a key identifier, or None if it is not one."""

    key = _PYGAME_KEYS.get(event.key)
    if key is not None:
        return key
    return resolve_key_name(pygame.key.name(event.key))


def level_button_rect(level: int) -> pygame.Rect:
    return pygame.Rect(20 + (level - 1) * 130, LEVEL_ROW_Y, 120, 40)


def key_button_rect(key: str) -> pygame.Rect:
    """Screen rect of the digit or numeric-pad button for `key`."""

    if key in NUMPAD_KEYS:
        row, col = divmod(NUMPAD_KEYS.index(key), 3)
        return pygame.Rect(20 + col * 106, NUMPAD_TOP_Y + row * 50, 100, 44)
    width = (WINDOW_SIZE[0] - 40 - 9 * 6) // len(BASE_KEYS)
    i = BASE_KEYS.index(key)
    return pygame.Rect(20 + i * (width + 6), DIGIT_ROW_Y, width, 44)


class Screen(Protocol):
    def handle_event(self, event: pygame.event.Event) -> None: ...
    def render(self, surface: pygame.Surface) -> None: ...


@dataclass(frozen=True, slots=True)
class _Button:
    label: str
    rect: pygame.Rect
    action: Callable[[], None]
    key: str | None = None
    level: int | None = None


class App:
    def __init__(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        self._surface = surface
        self._font = font
        self._screens: list[Screen] = []
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    @property
    def font(self) -> pygame.font.Font:
        return self._font

    def push(self, screen: Screen) -> None:
        self._screens.append(screen)

    def quit(self) -> None:
        self._running = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.quit()
            return
        if not self._screens:
            return
        self._screens[-1].handle_event(event)

    def render(self) -> None:
        if not self._screens:
            return
        self._screens[-1].render(self._surface)


class ReactionTestScreen:
    def __init__(self, app: App, *, engine: ReactionTest, initial_chart: Path | None = None) -> None:
        self._app = app
        self._engine = engine

        self._small_font = pygame.font.Font(None, 24)
        self._button_font = pygame.font.Font(None, 30)

        self._chart_surface: pygame.Surface | None = None
        self._chart_loaded_from: Path | None = None
        self._chart_loaded_mtime: float | None = None
        self._initial_chart = initial_chart

        self._buttons = self._build_buttons()

    def _build_buttons(self) -> list[_Button]:
        buttons = [_Button("Start", START_BUTTON_RECT.copy(), self._engine.start)]

        for level in LEVELS:
            rect = level_button_rect(level)
            buttons.append(
                _Button(f"Level {level}", rect, lambda lvl=level: self._engine.change_level(lvl), level=level)
            )

        for key in BASE_KEYS:
            rect = key_button_rect(key)
            buttons.append(_Button(key, rect, lambda k=key: self._submit(k), key=key))

        for key in NUMPAD_KEYS:
            rect = key_button_rect(key)
            buttons.append(_Button(key, rect, lambda k=key: self._submit(k), key=key))

        return buttons

    def _visible(self, button: _Button, snap: ReactionSnapshot) -> bool:
        return button.key is None or button.key in snap.enabled_keys

    def visible_keys(self) -> tuple[str, ...]:
        """Key buttons currently drawn and clickable."""

        snap = self._engine.snapshot()
        return tuple(b.key for b in self._buttons if b.key is not None and self._visible(b, snap))

    def _submit(self, key: str) -> None:
        logger.debug("Key pressed: %s", key)
        self._engine.submit(key)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self._app.quit()
                return
            key = key_from_event(event)
            if key is None:
                name = pygame.key.name(event.key) or str(event.key)
                logger.debug("Unrecognized key: %s", name)
                self._engine.report_unrecognized(name)
                return
            self._submit(key)
            return

        if event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", 1) == 1:
            snap = self._engine.snapshot()
            for button in self._buttons:
                if self._visible(button, snap) and button.rect.collidepoint(event.pos):
                    button.action()
                    return

    def _chart(self, snap: ReactionSnapshot) -> pygame.Surface | None:
        path = snap.chart_path or self._initial_chart
        if path is None or not path.exists():
            return self._chart_surface
        mtime = path.stat().st_mtime
        if path == self._chart_loaded_from and mtime == self._chart_loaded_mtime:
            return self._chart_surface
        try:
            image = pygame.image.load(str(path))
        except pygame.error as exc:
            logger.warning("Cannot load chart image %s: %s", path, exc)
            self._chart_loaded_from = path
            self._chart_loaded_mtime = mtime
            return self._chart_surface
        self._chart_surface = pygame.transform.smoothscale(image, CHART_RECT.size)
        self._chart_loaded_from = path
        self._chart_loaded_mtime = mtime
        return self._chart_surface

    def _draw_button(self, surface: pygame.Surface, button: _Button, *, active: bool, selected: bool) -> None:
        if active:
            bg, border = BUTTON_ACTIVE_BG, BUTTON_ACTIVE_BORDER
        elif selected:
            bg, border = LEVEL_SELECTED_BG, BUTTON_ACTIVE_BORDER
        else:
            bg, border = BUTTON_BG, BUTTON_BORDER
        pygame.draw.rect(surface, bg, button.rect, border_radius=4)
        pygame.draw.rect(surface, border, button.rect, 2 if active else 1, border_radius=4)
        text = self._button_font.render(button.label, True, TEXT)
        surface.blit(text, text.get_rect(center=button.rect.center))

    def render(self, surface: pygame.Surface) -> None:
        snap = self._engine.snapshot()
        surface.fill(BG)

        y = 20
        for line in snap.prompt.split("\n"):
            text = self._app.font.render(line, True, TEXT)
            surface.blit(text, (20, y))
            y += text.get_height() + 4

        status = f"Level {snap.level}"
        if snap.phase is Phase.RUNNING:
            status += f"  |  {snap.attempts_completed}/{snap.attempts_total}"
        status_text = self._small_font.render(status, True, MUTED)
        surface.blit(status_text, (180, START_BUTTON_RECT.y + 12))

        if snap.feedback:
            fb = self._small_font.render(snap.feedback, True, WARN)
            surface.blit(fb, (360, START_BUTTON_RECT.y + 12))

        for button in self._buttons:
            if not self._visible(button, snap):
                continue
            self._draw_button(
                surface,
                button,
                active=button.key is not None and button.key == snap.target_key,
                selected=button.level == snap.level,
            )

        chart = self._chart(snap)
        if chart is not None:
            surface.blit(chart, CHART_RECT.topleft)
        else:
            pygame.draw.rect(surface, BUTTON_BORDER, CHART_RECT, 1)
            hint = self._small_font.render("Chart appears after a finished test", True, MUTED)
            surface.blit(hint, hint.get_rect(center=CHART_RECT.center))


def run(
    *,
    max_frames: int | None = None,
    event_injector: Callable[[int], None] | None = None,
    config: TrainerConfig | None = None,
) -> int:
    if config is None:
        config = TrainerConfig.from_env()

    pygame.init()
    pygame.display.set_caption("Reaction Speed Test")
    surface = pygame.display.set_mode(WINDOW_SIZE)

    font = pygame.font.Font(None, 36)
    clock = pygame.time.Clock()

    app = App(surface=surface, font=font)

    recorder = SessionRecorder(results_path=config.results_path, chart_path=config.chart_path)
    engine = build_reaction_test(
        clock=RealClock(),
        seed=config.seed,
        sink=recorder,
        attempts_per_session=config.attempts_per_session,
    )
    app.push(ReactionTestScreen(app, engine=engine, initial_chart=recorder.chart_path))
    logger.info("Results log: %s, chart: %s, seed: %d", config.results_path, config.chart_path, config.seed)

    frame = 0
    try:
        while app.running:
            if event_injector is not None:
                event_injector(frame)

            for event in pygame.event.get():
                app.handle_event(event)

            app.render()

            pygame.display.flip()

            frame += 1
            if max_frames is not None and frame >= max_frames:
                break

            clock.tick(TARGET_FPS)
    except ReactionTrainerError as exc:
        logger.critical("%s", exc)
        return 1
    finally:
        pygame.quit()

    return 0
