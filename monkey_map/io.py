import math

from monkey_map.models import Board, Direction, Tile
from monkey_map.walker import WalkResult


def read_notes(file_path: str) -> str:
    with open(file_path, "r", encoding="utf-8") as f:
        return f.read()


def render_trail(board: Board, result: WalkResult) -> str:
    """The board with the last facing drawn on every visited tile."""
    return board.to_string(marks=result.trail())


def write_trail(board: Board, result: WalkResult, file_path: str) -> None:
    if file_path.endswith(".svg"):
        write_trail_as_svg(board, result, file_path)
    else:
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(render_trail(board, result))


def write_trail_as_svg(board: Board, result: WalkResult, file_path: str, cell_size: int = 12) -> None:
    max_x, max_y = board.bounds
    width = max_x * cell_size
    height = max_y * cell_size
    trail = {position: Direction(glyph) for position, glyph in result.trail().items()}

    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" viewBox="0 0 {width} {height}">',
        "<defs>",
        "  <style>",
        "    .open { fill: #f4f4f4; stroke: #ccc; stroke-width: 0.5; }",
        "    .wall { fill: #333; }",
        "    .arrow { fill: #d62728; }",
        "    .final { fill: #1f77b4; }",
        "  </style>",
        "</defs>",
        # Background
        f'<rect width="{width}" height="{height}" fill="white"/>',
    ]

    # Tiles, in reading order so the output is stable
    for (x, y), tile in sorted(board.tiles.items(), key=lambda item: (item[0][1], item[0][0])):
        css_class = "wall" if tile == Tile.WALL else "open"
        lines.append(
            f'<rect x="{(x - 1) * cell_size}" y="{(y - 1) * cell_size}" '
            f'width="{cell_size}" height="{cell_size}" class="{css_class}"/>'
        )

    # Trail arrows, pointing along the last facing on each tile
    half = cell_size / 2
    for (x, y), facing in sorted(trail.items(), key=lambda item: (item[0][1], item[0][0])):
        cx = (x - 1) * cell_size + half
        cy = (y - 1) * cell_size + half
        dx, dy = facing.delta
        angle_deg = math.degrees(math.atan2(dy, dx))
        css_class = "final" if (x, y) == result.position else "arrow"

        lines.append(f'<g transform="translate({cx},{cy}) rotate({angle_deg})">')
        lines.append(f'<path d="M {-half * 0.6} {-half * 0.6} L {half * 0.7} 0 L {-half * 0.6} {half * 0.6} Z" class="{css_class}"/>')
        lines.append("</g>")

    lines.append("</svg>")

    with open(file_path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))
