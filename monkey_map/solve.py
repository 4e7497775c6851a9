from pathlib import Path

from monkey_map.cube import PUZZLE_NET, CubeNet, load_net
from monkey_map.parser import parse_notes
from monkey_map.walker import WalkResult, walk
from monkey_map.wrapping import CubeWrap, FlatWrap, WrapPolicy


def create_wrap(part: int, net: str | CubeNet | None = None, nets_file: str | Path | None = None) -> WrapPolicy:
    """
    Create the wrapping policy for a puzzle part.

    Args:
        part: 1 wraps around the flat drawing, 2 walks around the folded cube.
        net: Only for part 2. A CubeNet, or the name of a net in the nets file.
             If None, uses the fixed table for the 50x50 puzzle input.
        nets_file: Path to the YAML nets file. If None, uses config/cube_nets.yaml

    Returns:
        A WrapPolicy instance
    """
    if part == 1:
        return FlatWrap()
    if part != 2:
        raise ValueError(f"Unknown puzzle part: {part}")

    if net is None:
        return CubeWrap(PUZZLE_NET)
    if isinstance(net, str):
        return CubeWrap(load_net(net, nets_file))
    return CubeWrap(net)


def run(text: str, policy: WrapPolicy, trace: bool = False) -> WalkResult:
    board, path = parse_notes(text)
    return walk(board, path, policy, trace=trace)


def part_one(text: str) -> str:
    return str(run(text, create_wrap(1)).password)


def part_two(text: str, net: str | CubeNet | None = None) -> str:
    return str(run(text, create_wrap(2, net)).password)
