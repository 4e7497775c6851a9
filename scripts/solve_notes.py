# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import argparse
import sys
from pathlib import Path

# Add project root to sys path so we can import from monkey_map
# Assuming script is run from project root or scripts folder
current_dir = Path(__file__).resolve().parent
project_root = current_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from monkey_map.io import read_notes, write_trail  # noqa: E402
from monkey_map.parser import parse_notes  # noqa: E402
from monkey_map.solve import create_wrap  # noqa: E402
from monkey_map.walker import walk  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Follow the path in the monkeys' notes and print the password")
    parser.add_argument("notes", help="Notes file: board drawing followed by the path line")
    parser.add_argument("--part", type=int, choices=[1, 2], default=1, help="1: flat wrapping, 2: cube wrapping")
    parser.add_argument("--net", type=str, default=None, help="Cube net from config/cube_nets.yaml (part 2 only)")
    parser.add_argument("--trail", type=str, default=None, help="Write the visited trail (.svg or text)")
    parser.add_argument("--trace", action="store_true", help="Print the state after every instruction")

    args = parser.parse_args()

    notes_path = Path(args.notes)
    if not notes_path.exists():
        print(f"Error: {notes_path} not found")
        sys.exit(1)

    board, path = parse_notes(read_notes(str(notes_path)))
    policy = create_wrap(args.part, args.net)
    record = args.trace or args.trail is not None

    print(f"Walking {len(path)} instructions over {len(board.tiles)} tiles (part {args.part})...")
    result = walk(board, path, policy, trace=record)

    if args.trace:
        print("\n--- Walk Trace ---")
        for i, step in enumerate(result.steps, 1):
            flags = []
            if step.wraps:
                flags.append(f"wrapped x{step.wraps}")
            if step.blocked:
                flags.append("blocked")
            suffix = f" ({', '.join(flags)})" if flags else ""
            print(f"{i:>5}: {str(step.instruction):>3} -> {step.position} {step.facing.name.lower()}{suffix}")

    if args.trail is not None:
        write_trail(board, result, args.trail)
        print(f"Saved trail to {args.trail}")

    column, row = result.position
    print(f"\nFinal row {row}, column {column}, facing {result.facing.name.lower()}")
    print(f"Password: {result.password}")


if __name__ == "__main__":
    main()
