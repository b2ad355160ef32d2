import math
from typing import Dict, List, Tuple

from PIL import Image, ImageDraw

from paint_arena.constants import CANVAS_HEIGHT, CANVAS_WIDTH, TILE_SIZE
from paint_arena.grid import iter_cells
from paint_arena.snapshot import ActorView, RenderSnapshot
from paint_arena.types import Facing, Outcome, Phase, Team

Color = Tuple[int, int, int, int]
Rect = Tuple[int, int, int, int]

DEFAULT_SCALE = 1
BACKGROUND_COLOR: Color = (0, 0, 0, 255)
GRID_LINE_COLOR: Color = (51, 51, 51, 255)
EYE_COLOR: Color = (255, 255, 255, 255)
NOZZLE_READY_COLOR: Color = (255, 255, 255, 255)
NOZZLE_COOLING_COLOR: Color = (153, 153, 153, 255)
OVERLAY_COLOR: Color = (0, 0, 0, 178)
TEXT_COLOR: Color = (255, 255, 255, 255)

TEAM_COLORS: Dict[Team, Color] = {
    Team.TEAM_A: (85, 187, 255, 255),
    Team.TEAM_B: (255, 85, 85, 255),
}

TEAM_LABELS: Dict[Outcome, str] = {
    Outcome.TEAM_A: "Team 1 (Blue) wins!",
    Outcome.TEAM_B: "Team 2 (Red) wins!",
    Outcome.TIE: "It's a tie!",
}

# Sprite parts as (x, y, w, h) in unscaled pixels relative to the actor.
BODY: Rect = (2, 2, 12, 12)
EYES: Dict[Facing, Tuple[Rect, Rect]] = {
    Facing.DOWN: ((3, 6, 3, 3), (10, 6, 3, 3)),
    Facing.LEFT: ((2, 6, 3, 3), (2, 10, 3, 3)),
    Facing.RIGHT: ((11, 6, 3, 3), (11, 10, 3, 3)),
    Facing.UP: ((3, 3, 3, 3), (10, 3, 3, 3)),
}
TANK: Rect = (4, 8, 8, 6)
NOZZLES: Dict[Facing, Rect] = {
    Facing.DOWN: (7, 14, 2, 4),
    Facing.LEFT: (-2, 7, 4, 2),
    Facing.RIGHT: (14, 7, 4, 2),
    Facing.UP: (7, -2, 2, 4),
}


def bob_offset(frame: int) -> float:
    """Vertical offset of the paint tank for an animation phase."""
    return math.sin(frame * 0.1) * 2


def fill_rect(
    draw: ImageDraw.ImageDraw,
    x: float,
    y: float,
    w: float,
    h: float,
    color: Color,
    scale: int,
) -> None:
    x0, y0 = round(x * scale), round(y * scale)
    x1, y1 = round((x + w) * scale) - 1, round((y + h) * scale) - 1
    draw.rectangle((x0, y0, x1, y1), fill=color)


def draw_tiles(draw: ImageDraw.ImageDraw, snapshot: RenderSnapshot, scale: int) -> None:
    for x, y, owner in iter_cells(snapshot.grid):
        color = TEAM_COLORS.get(owner)
        if color is None:
            continue
        x0, y0 = x * TILE_SIZE, y * TILE_SIZE
        fill_rect(draw, x0, y0, TILE_SIZE, TILE_SIZE, color, scale)


def draw_grid_lines(
    draw: ImageDraw.ImageDraw, width: int, height: int, scale: int
) -> None:
    for gx in range(0, CANVAS_WIDTH + 1, TILE_SIZE):
        x = min(gx * scale, width - 1)
        draw.line((x, 0, x, height - 1), fill=GRID_LINE_COLOR)
    for gy in range(0, CANVAS_HEIGHT + 1, TILE_SIZE):
        y = min(gy * scale, height - 1)
        draw.line((0, y, width - 1, y), fill=GRID_LINE_COLOR)


def draw_actor(draw: ImageDraw.ImageDraw, actor: ActorView, scale: int) -> None:
    color = TEAM_COLORS.get(actor.team, EYE_COLOR)
    x, y = math.floor(actor.x), math.floor(actor.y)

    bx, by, bw, bh = BODY
    fill_rect(draw, x + bx, y + by, bw, bh, color, scale)

    for ex, ey, ew, eh in EYES[actor.facing]:
        fill_rect(draw, x + ex, y + ey, ew, eh, EYE_COLOR, scale)

    tx, ty, tw, th = TANK
    fill_rect(draw, x + tx, y + ty + bob_offset(actor.frame), tw, th, color, scale)

    nozzle_color = (
        NOZZLE_READY_COLOR if actor.ready_to_paint else NOZZLE_COOLING_COLOR
    )
    nx, ny, nw, nh = NOZZLES[actor.facing]
    fill_rect(draw, x + nx, y + ny, nw, nh, nozzle_color, scale)


def game_over_lines(snapshot: RenderSnapshot) -> List[str]:
    if snapshot.result is None:
        return []
    scores = snapshot.result.scores
    return [
        "GAME OVER",
        TEAM_LABELS[snapshot.result.outcome],
        f"Blue: {scores.team_a}% - Red: {scores.team_b}%",
        "Press SPACE to play again",
    ]


def draw_game_over(
    img: Image.Image, snapshot: RenderSnapshot, scale: int
) -> Image.Image:
    overlay = Image.new("RGBA", img.size, OVERLAY_COLOR)
    img = Image.alpha_composite(img, overlay)
    draw = ImageDraw.Draw(img)
    cx, cy = img.width / 2, img.height / 2
    for idx, line in enumerate(game_over_lines(snapshot)):
        ly = cy + (idx - 1) * 40 * scale
        left, top, right, bottom = draw.textbbox((0, 0), line)
        tw, th = right - left, bottom - top
        draw.text((cx - tw / 2, ly - th / 2), line, fill=TEXT_COLOR)
    return img


def render(snapshot: RenderSnapshot, scale: int = DEFAULT_SCALE) -> Image.Image:
    """
    Renders a match snapshot as an RGBA PIL Image (canvas size times ``scale``).
    """
    width, height = CANVAS_WIDTH * scale, CANVAS_HEIGHT * scale
    img = Image.new("RGBA", (width, height), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(img)

    draw_tiles(draw, snapshot, scale)
    draw_grid_lines(draw, width, height, scale)
    for actor in snapshot.actors:
        draw_actor(draw, actor, scale)

    if snapshot.phase == Phase.ENDED:
        img = draw_game_over(img, snapshot, scale)
    return img


class CanvasRenderer:
    scale: int

    def __init__(self, scale: int = DEFAULT_SCALE):
        if scale < 1:
            raise ValueError(f"scale must be >= 1, got {scale}")
        self.scale = scale

    @property
    def size(self) -> Tuple[int, int]:
        return CANVAS_WIDTH * self.scale, CANVAS_HEIGHT * self.scale

    def render(self, snapshot: RenderSnapshot) -> Image.Image:
        return render(snapshot, scale=self.scale)
