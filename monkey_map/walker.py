from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

from monkey_map.models import Board, Direction, Instruction, Move, Position
from monkey_map.wrapping import WrapPolicy


@dataclass
class WalkStep:
    """Records the state after a single instruction."""

    instruction: Instruction
    position: Position
    facing: Direction
    steps_taken: int = 0
    wraps: int = 0
    blocked: bool = False


@dataclass
class WalkResult:
    position: Position
    facing: Direction
    steps: List[WalkStep] = field(default_factory=list)
    visited: List[Tuple[Position, Direction]] = field(default_factory=list)

    @property
    def password(self) -> int:
        return password(self.position, self.facing)

    def trail(self) -> Dict[Position, str]:
        """Last facing on every visited tile, drawn as > v < ^."""
        return {position: facing.value for position, facing in self.visited}


def password(position: Position, facing: Union[Direction, Tuple[int, int]]) -> int:
    if not isinstance(facing, Direction):
        facing = Direction.from_delta(facing)
    column, row = position
    return 1000 * row + 4 * column + facing.code


def walk(
    board: Board,
    path: Sequence[Instruction],
    policy: WrapPolicy,
    start: Optional[Tuple[Position, Direction]] = None,
    trace: bool = False,
) -> WalkResult:
    """
    Follow the path over the board, handing every step off the board to `policy`.

    A wall ends the current move early, whether it is met inside the board or
    right after wrapping; the remaining steps of that move are dropped.

    Args:
        board: The parsed board.
        path: Instructions, applied in order.
        policy: How to re-enter the board after stepping off an edge.
        start: Initial position and facing. Defaults to the board's start tile.
        trace: If True, record a WalkStep per instruction and every visited tile.
    """
    position, facing = start if start is not None else board.start()
    bounds = board.bounds
    result = WalkResult(position, facing)
    if trace:
        result.visited.append((position, facing))

    for instruction in path:
        step = WalkStep(instruction, position, facing)

        if isinstance(instruction, Move):
            for _ in range(instruction.steps):
                candidate = facing.step(position)
                if candidate in board:
                    if board.is_wall(candidate):
                        step.blocked = True
                        break
                    position = candidate
                else:
                    target, target_facing = policy.wrap(board, position, facing, bounds)
                    if board.is_wall(target):
                        step.blocked = True
                        break
                    position, facing = target, target_facing
                    step.wraps += 1
                step.steps_taken += 1
                if trace:
                    result.visited.append((position, facing))
        else:
            facing = instruction.apply(facing)
            if trace:
                result.visited.append((position, facing))

        if trace:
            step.position, step.facing = position, facing
            result.steps.append(step)

    result.position, result.facing = position, facing
    return result
