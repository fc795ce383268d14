from __future__ import annotations
import os
from typing import Dict, Optional, Set, Tuple
try:
    from PIL import Image, ImageDraw
    PIL_AVAILABLE = True
except Exception:
    PIL_AVAILABLE = False

from .types import Attribute, Coord
from .grid import WumpusWorld

# drawn in this order, later ones on top
ATTR_COLORS: Dict[Attribute, Tuple[int, int, int]] = {
    Attribute.BREEZE: (170, 210, 255),
    Attribute.STENCH: (200, 230, 150),
    Attribute.PIT: (30, 30, 40),
    Attribute.WUMPUS: (200, 60, 60),
    Attribute.GLITTER: (255, 235, 150),
    Attribute.GOLD: (240, 190, 40),
}


def draw_world_png(world: WumpusWorld,
                   visited: Optional[Set[Coord]],
                   out_png: str,
                   cell: int = 40) -> None:
    if not PIL_AVAILABLE:
        print("Pillow not installed; skipping PNG:", out_png)
        return

    n = world.n
    W = n * cell
    img = Image.new("RGB", (W, W), (255, 255, 255))
    drw = ImageDraw.Draw(img)

    for (r, c), attrs in world.cells():
        x0, y0 = c * cell, r * cell
        drw.rectangle((x0, y0, x0 + cell, y0 + cell), fill=(240, 240, 240), outline=(120, 120, 120))
        # markers as stripes, hazards/gold as a centered block
        stripe = cell // 6
        for i, attr in enumerate(a for a in (Attribute.BREEZE, Attribute.STENCH) if a in attrs):
            drw.rectangle((x0 + 1, y0 + 1 + i * stripe, x0 + cell - 1, y0 + (i + 1) * stripe),
                          fill=ATTR_COLORS[attr])
        for attr in (Attribute.PIT, Attribute.WUMPUS, Attribute.GLITTER, Attribute.GOLD):
            if attr in attrs:
                pad = cell // 4 if attr is not Attribute.GOLD else cell // 3
                drw.rectangle((x0 + pad, y0 + pad, x0 + cell - pad, y0 + cell - pad), fill=ATTR_COLORS[attr])

    # visited cells
    if visited:
        for (r, c) in visited:
            x0, y0 = c * cell, r * cell
            drw.rectangle((x0 + 2, y0 + 2, x0 + cell - 2, y0 + cell - 2), outline=(90, 120, 255), width=2)

    # agent
    pr, pc = world.position
    pad = cell // 3
    drw.ellipse((pc * cell + pad, pr * cell + pad, pc * cell + cell - pad, pr * cell + cell - pad),
                fill=(100, 220, 120))

    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    img.save(out_png)
