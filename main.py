"""
Solar Orrery - pygame preview

Top-down view of the scene (x/z plane) driven by the simulated clock, with
a procedural texture thumbnail for every body.

Keys:
    SPACE        pause / resume
    + / -        faster / slower
    R            reverse time
    N            back to now
    LEFT / RIGHT skip 30 days back / forward
    ESC          quit
"""

import argparse
import logging
import math
import sys

import pygame

from core.time_controller import SKIP_DAYS, TimeController
from rendering.texture_surface import TextureSurfaceCache
from universe.catalog import BODIES, rings_request_for, scene_positions, texture_request_for
from universe.orbital_solver import DEFAULT_SCALE_FACTOR

logger = logging.getLogger("orrery")

# Window settings
WIDTH, HEIGHT = 1280, 800
FPS = 60
TITLE = "Solar Orrery"

BACKGROUND = (4, 6, 14)
ORBIT_COLOR = (40, 48, 70)
TEXT_COLOR = (210, 215, 230)

# Scene units -> pixels
VIEW_SCALE = 4.2
# Thumbnail pixels per scene unit of body radius
BODY_SCALE = 5.0
MIN_BODY_PX = 6

THUMB_RESOLUTION = 128


class Orrery:
    """Window, clock and per-body sprites."""

    def __init__(self, resolution: int = THUMB_RESOLUTION, seed: int = 1,
                 scale_factor: float = DEFAULT_SCALE_FACTOR):
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Verdana", 14)

        self.time = TimeController()
        self.scale_factor = scale_factor
        self.textures = TextureSurfaceCache(cache_size=len(BODIES) * 2)
        self.sprites: dict[str, pygame.Surface] = {}
        self.rings: dict[str, pygame.Surface] = {}
        self._load_sprites(resolution, seed)

    # ── Setup ────────────────────────────────────────────────────────────────

    def _load_sprites(self, resolution: int, seed: int) -> None:
        for body in BODIES.values():
            size = max(MIN_BODY_PX, int(body.radius * BODY_SCALE * 2))
            try:
                req = texture_request_for(body.id, resolution, seed)
                if req is not None:
                    surf = self.textures.get(req)
                    if surf is not None:
                        self.sprites[body.id] = self._disc(surf, size)
                ring_req = rings_request_for(body.id, resolution, seed)
                if ring_req is not None:
                    surf = self.textures.get(ring_req)
                    if surf is not None:
                        self.rings[body.id] = pygame.transform.smoothscale(surf, (size * 3, size * 3))
            except Exception:
                logger.exception("Texture for %s failed, drawing a plain disc", body.id)

    @staticmethod
    def _disc(texture: pygame.Surface, size: int) -> pygame.Surface:
        """Equirectangular texture squeezed onto a round sprite."""
        surf = pygame.transform.smoothscale(texture, (size, size)).convert_alpha()
        mask = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(mask, (255, 255, 255, 255), (size // 2, size // 2), size // 2)
        surf.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MIN)
        return surf

    # ── Loop ─────────────────────────────────────────────────────────────────

    def handle_event(self, ev) -> bool:
        if ev.type == pygame.QUIT:
            return False
        if ev.type != pygame.KEYDOWN:
            return True
        if ev.key == pygame.K_ESCAPE:
            return False
        if ev.key == pygame.K_SPACE:
            self.time.toggle_pause()
        elif ev.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            self.time.speed_up()
        elif ev.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            self.time.speed_down()
        elif ev.key == pygame.K_r:
            self.time.reverse()
        elif ev.key == pygame.K_n:
            self.time.realtime()
        elif ev.key == pygame.K_LEFT:
            self.time.skip_days(-SKIP_DAYS)
        elif ev.key == pygame.K_RIGHT:
            self.time.skip_days(SKIP_DAYS)
        return True

    def to_screen(self, x: float, z: float):
        w, h = self.screen.get_size()
        return int(w / 2 + x * VIEW_SCALE), int(h / 2 + z * VIEW_SCALE)

    def draw(self) -> None:
        self.screen.fill(BACKGROUND)
        positions = scene_positions(self.time.utc, self.scale_factor)
        center = self.to_screen(0.0, 0.0)

        for body in BODIES.values():
            pos = positions[body.id]
            if body.is_satellite or body.fixed_position is not None:
                continue
            radius = int(math.hypot(pos.x, pos.z) * VIEW_SCALE)
            pygame.draw.circle(self.screen, ORBIT_COLOR, center, radius, 1)

        for body in BODIES.values():
            pos = positions[body.id]
            sx, sy = self.to_screen(pos.x, pos.z)
            ring = self.rings.get(body.id)
            if ring is not None:
                self.screen.blit(ring, ring.get_rect(center=(sx, sy)))
            sprite = self.sprites.get(body.id)
            if sprite is not None:
                self.screen.blit(sprite, sprite.get_rect(center=(sx, sy)))
            else:
                size = max(MIN_BODY_PX, int(body.radius * BODY_SCALE * 2))
                color = (90, 60, 140) if body.is_black_hole else (160, 160, 160)
                pygame.draw.circle(self.screen, color, (sx, sy), size // 2, 2)
            label = self.font.render(body.name, True, TEXT_COLOR)
            self.screen.blit(label, (sx + 8, sy + 8))

        status = f"{self.time.utc:%Y-%m-%d %H:%M} UTC   {self.time.speed_label}"
        self.screen.blit(self.font.render(status, True, TEXT_COLOR), (12, 10))

    def run(self) -> None:
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0
            for ev in pygame.event.get():
                running = self.handle_event(ev) and running
            self.time.step(dt)
            self.draw()
            pygame.display.flip()
        pygame.quit()


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description=TITLE)
    ap.add_argument("--resolution", type=int, default=THUMB_RESOLUTION, help="Texture size in pixels")
    ap.add_argument("--seed", type=int, default=1, help="Texture seed")
    ap.add_argument("--scale", type=float, default=DEFAULT_SCALE_FACTOR, help="Display scale factor")
    ap.add_argument("--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    Orrery(args.resolution, args.seed, args.scale).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
