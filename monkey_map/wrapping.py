from abc import ABC, abstractmethod
from typing import Tuple

from monkey_map.cube import CubeNet
from monkey_map.models import Board, Direction, Position


class WrapPolicy(ABC):
    """Decides where a walker re-enters the board after stepping off it."""

    def wrap(
        self, board: Board, position: Position, facing: Direction, bounds: Position
    ) -> Tuple[Position, Direction]:
        """
        Returns the re-entry position and facing. The re-entry tile may be a
        wall; the walker stays put in that case.
        """
        target, target_facing = self.target(board, position, facing, bounds)
        if board.get(target) is None:
            raise ValueError(f"Wrapping from {position} facing {facing.name.lower()} left the board at {target}")
        return target, target_facing

    @abstractmethod
    def target(
        self, board: Board, position: Position, facing: Direction, bounds: Position
    ) -> Tuple[Position, Direction]:
        pass


class FlatWrap(WrapPolicy):
    """Re-enter from the opposite edge of the same row or column."""

    def target(
        self, board: Board, position: Position, facing: Direction, bounds: Position
    ) -> Tuple[Position, Direction]:
        x, y = position
        max_x, max_y = bounds
        far_edge = {
            Direction.RIGHT: (1, y),
            Direction.LEFT: (max_x, y),
            Direction.DOWN: (x, 1),
            Direction.UP: (x, max_y),
        }
        wrapped = far_edge[facing]
        while wrapped not in board:
            wrapped = facing.step(wrapped)
        return wrapped, facing


class CubeWrap(WrapPolicy):
    """Walk over the fold onto the neighbouring cube face."""

    def __init__(self, net: CubeNet):
        self.net = net

    def target(
        self, board: Board, position: Position, facing: Direction, bounds: Position
    ) -> Tuple[Position, Direction]:
        return self.net.exit(self.net.face_of(position), facing, position)
