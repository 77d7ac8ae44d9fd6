"""
Route Debug Utilities

Functions for saving annotated route images and managing debug output.
"""

import logging
from datetime import datetime
from pathlib import Path as FilePath
from typing import Optional

import numpy as np
from PIL import Image, ImageDraw

from .geometry import Path, Point, WeightedGrid

logger = logging.getLogger(__name__)


# Debug settings
DEBUG_DIR = FilePath("./debug")
MAX_DEBUG_IMAGES = 10

# Rendering
CELL_PX = 8
ROUTE_COLOR = (220, 40, 40)
START_COLOR = (40, 180, 60)
TARGET_COLOR = (40, 90, 220)


def save_route_image(
    grid: WeightedGrid,
    path: Path,
    filename: Optional[str] = None,
    debug_dir: FilePath = DEBUG_DIR,
) -> FilePath:
    """
    Save an image of the cost grid with a route drawn over it.

    Annotations include:
    - Cell costs as grayscale (brighter = more expensive)
    - Route polyline through cell centres
    - Start and target markers

    Args:
        grid: Cost grid the route crosses
        path: Route to draw
        filename: Output file name (default: timestamped debug_*.png)
        debug_dir: Output directory

    Returns:
        Path of the written PNG
    """
    debug_dir.mkdir(parents=True, exist_ok=True)
    if filename is None:
        filename = f"debug_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')[:-3]}.png"
    out_path = debug_dir / filename

    costs = grid.costs
    peak = int(costs.max())
    scaled = (costs * 255 // peak if peak > 0 else np.zeros_like(costs)).astype(np.uint8)
    image = Image.fromarray(scaled).convert("RGB")
    image = image.resize((grid.width * CELL_PX, grid.height * CELL_PX), Image.Resampling.NEAREST)
    draw = ImageDraw.Draw(image)

    centres = [_cell_centre(p) for p in path.points]
    if len(centres) > 1:
        draw.line(centres, fill=ROUTE_COLOR, width=max(1, CELL_PX // 4))
    _mark(draw, path.start, START_COLOR)
    _mark(draw, path.end, TARGET_COLOR)

    image.save(out_path, "PNG")
    logger.debug(f"Route image saved: {out_path}")

    _cleanup_debug_images(debug_dir)
    return out_path


def _cell_centre(point: Point):
    half = CELL_PX // 2
    return (point.x * CELL_PX + half, point.y * CELL_PX + half)


def _mark(draw: ImageDraw.ImageDraw, point: Point, color) -> None:
    x, y = point.x * CELL_PX, point.y * CELL_PX
    draw.rectangle([x, y, x + CELL_PX - 1, y + CELL_PX - 1], outline=color, width=2)


def _cleanup_debug_images(debug_dir: FilePath) -> None:
    """Remove old debug images, keeping only the most recent MAX_DEBUG_IMAGES."""
    debug_files = sorted(
        debug_dir.glob("debug_*.png"),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )

    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        try:
            old_file.unlink()
        except OSError as e:
            logger.warning(f"Failed to remove old debug image {old_file}: {e}")
