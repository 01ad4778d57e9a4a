from __future__ import annotations

from collections import namedtuple
from functools import lru_cache

import pygame

from . import config
from .state import Snapshot

Palette = namedtuple("Palette", ["background", "grid", "text", "food", "head", "body"])


def make_palette(theme: str, skin: str) -> Palette:
    chrome = config.THEMES[theme]
    head, body = config.SKINS[skin]
    return Palette(
        background=chrome["background"],
        grid=chrome["grid"],
        text=chrome["text"],
        food=chrome["food"],
        head=head,
        body=body,
    )


def window_size(grid_size: int) -> tuple[int, int]:
    return (grid_size * config.BLOCK, grid_size * config.BLOCK + config.HUD_HEIGHT)


def cell_rect(x: int, y: int) -> pygame.Rect:
    pad = config.CELL_PADDING
    return pygame.Rect(
        x * config.BLOCK + pad,
        y * config.BLOCK + pad + config.HUD_HEIGHT,
        config.BLOCK - pad * 2,
        config.BLOCK - pad * 2,
    )


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def forget_fonts() -> None:
    """Drop cached fonts; they die with pygame.quit()."""
    _font.cache_clear()


# Eyes sit in the upper half of the head, scaled from a 20px cell.
def eye_offsets() -> tuple[tuple[int, int], tuple[int, int]]:
    y = config.BLOCK * 8 // 20
    return ((config.BLOCK * 7 // 20, y), (config.BLOCK * 13 // 20, y))


def eye_radius() -> int:
    return max(1, config.BLOCK * 3 // 20)


def draw_grid(screen: pygame.Surface, grid_size: int, color) -> None:
    top = config.HUD_HEIGHT
    extent = grid_size * config.BLOCK
    for i in range(grid_size + 1):
        pygame.draw.line(screen, color, (i * config.BLOCK, top), (i * config.BLOCK, top + extent))
        pygame.draw.line(screen, color, (0, top + i * config.BLOCK), (extent, top + i * config.BLOCK))


def draw_food(screen: pygame.Surface, food, palette: Palette) -> None:
    rect = cell_rect(*food)
    pygame.draw.rect(screen, palette.food, rect, border_radius=8)

    # Soft highlight in the middle of the food cell.
    glow = pygame.Surface((14, 14), pygame.SRCALPHA)
    for radius, alpha in ((7, 40), (4, 110), (2, 230)):
        pygame.draw.circle(glow, (*config.WHITE, alpha), (7, 7), radius)
    screen.blit(glow, glow.get_rect(center=rect.center))


def draw_snake(screen: pygame.Surface, body, palette: Palette) -> None:
    # Tail first so the head is painted on top.
    for i in range(len(body) - 1, -1, -1):
        x, y = body[i]
        if i == 0:
            pygame.draw.rect(screen, palette.head, cell_rect(x, y), border_radius=6)
        else:
            pygame.draw.rect(screen, palette.body, cell_rect(x, y), border_radius=3)

    hx, hy = body[0]
    left = hx * config.BLOCK
    top = hy * config.BLOCK + config.HUD_HEIGHT
    for ex, ey in eye_offsets():
        pygame.draw.circle(screen, config.WHITE, (left + ex, top + ey), eye_radius())
        pygame.draw.circle(screen, config.PUPIL, (left + ex, top + ey), max(1, eye_radius() // 2))


def draw_hud(screen: pygame.Surface, score: int, best: int, message: str, palette: Palette) -> None:
    font = _font(24)
    screen.blit(font.render(f"Score: {score}  Best: {best}", True, palette.text), (8, 8))
    if message:
        text = font.render(message, True, palette.text)
        screen.blit(text, text.get_rect(topright=(screen.get_width() - 8, 8)))


def draw_pause(screen: pygame.Surface) -> None:
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 178))
    screen.blit(overlay, (0, 0))
    text = _font(48).render("PAUSED", True, config.WHITE)
    screen.blit(text, text.get_rect(center=screen.get_rect().center))


def draw_state(
    screen: pygame.Surface,
    snapshot: Snapshot,
    palette: Palette,
    paused: bool = False,
    message: str = "",
    best: int = 0,
) -> None:
    screen.fill(palette.background)
    draw_grid(screen, snapshot.grid_size, palette.grid)

    if snapshot.food is not None:
        draw_food(screen, snapshot.food, palette)
    draw_snake(screen, snapshot.body, palette)
    draw_hud(screen, snapshot.score, best, message, palette)

    if paused:
        draw_pause(screen)
