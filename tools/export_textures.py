#!/usr/bin/env python3
"""
Texture Exporter

Renders procedural textures to PNG files.

Usage:
    python3 -m tools.export_textures --out textures_out                 # every catalog body
    python3 -m tools.export_textures --body saturn --resolution 512 --seed 7
    python3 -m tools.export_textures --type gas --color "#f0b578" --out jupiter_like

Catalog bodies with rings also get a <body>_rings.png.
"""

import argparse
import logging
import sys
from pathlib import Path

import pygame

from rendering.texture_surface import texture_to_surface
from textures.request import DEFAULT_RESOLUTION, TextureRequest, TextureType
from textures.synthesizer import synthesize
from universe.catalog import BODIES, rings_request_for, texture_request_for

logger = logging.getLogger("export_textures")


def export(request: TextureRequest, path: Path) -> bool:
    image = synthesize(request)
    if image.size == 0:
        logger.error("Skipping %s: texture could not be synthesized", path.name)
        return False
    pygame.image.save(texture_to_surface(image), str(path))
    logger.info("Wrote %s (%dx%d)", path, image.shape[1], image.shape[0])
    return True


def requests_for(args) -> list:
    """(file stem, request) pairs selected by the command line."""
    if args.type:
        req = TextureRequest(base_color=args.color, type=args.type,
                             resolution=args.resolution, seed=args.seed,
                             noise_intensity=args.noise, detail=args.detail)
        return [(args.type, req)]

    body_ids = [args.body] if args.body else list(BODIES)
    out = []
    for body_id in body_ids:
        req = texture_request_for(body_id, args.resolution, args.seed)
        if req is not None:
            out.append((body_id, req))
        rings = rings_request_for(body_id, args.resolution, args.seed)
        if rings is not None:
            out.append((f"{body_id}_rings", rings))
    return out


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Export procedural planet textures as PNG")
    ap.add_argument("--out", default="textures_out", help="Output directory")
    ap.add_argument("--resolution", type=int, default=DEFAULT_RESOLUTION, help="Texture size in pixels")
    ap.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    ap.add_argument("--body", default=None, help="Only this catalog body (e.g. mars)")
    ap.add_argument("--type", default=None, choices=[t.value for t in TextureType],
                    help="Render a single texture type instead of catalog bodies")
    ap.add_argument("--color", default="#b0b0b0", help="Base colour for --type")
    ap.add_argument("--noise", type=float, default=0.5, help="Noise intensity for --type")
    ap.add_argument("--detail", type=float, default=4.0, help="Noise detail for --type")
    ap.add_argument("--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)

    jobs = requests_for(args)
    if not jobs:
        logger.error("Nothing to export")
        return 1

    failed = 0
    for stem, req in jobs:
        if not export(req, out_dir / f"{stem}.png"):
            failed += 1
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
