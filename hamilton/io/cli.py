"""Command-line interface."""

from __future__ import annotations

import argparse
import logging

from hamilton.core.check import check_grid
from hamilton.core.csp import solve
from hamilton.core.generator import GenerationError, generate
from hamilton.core.model import Difficulty
from hamilton.core.params import validate_params
from hamilton.core.rng import SeededRandom
from hamilton.core.sampler import path_to_grid, random_path

from . import codec, parser


def _params(text: str):
    params = codec.decode_params(text)
    validate_params(params)
    return params


def cmd_generate(args) -> int:
    config = parser.load_config(args.config) if args.config else parser.Config()
    if args.params:
        config.params = _params(args.params)
    if args.seed is not None:
        config.seed = args.seed
    if args.count is not None:
        config.count = args.count
    if args.max_attempts is not None:
        config.max_attempts = args.max_attempts

    params = config.params
    rng = SeededRandom(config.seed)
    for _ in range(config.count):
        try:
            grid = generate(params, rng, max_attempts=config.max_attempts)
        except GenerationError as exc:
            raise SystemExit(str(exc)) from exc
        print(f"{codec.encode_params(params, full=False)}:{codec.encode_desc(grid)}")
        print(codec.format_grid(grid, params.w, params.h))
        if args.solution:
            solution = solve(grid, params.w, params.h, params.diagonal,
                             steps_limit=config.solve_steps_limit)
            if solution is not None:
                print(codec.format_grid(solution, params.w, params.h))
    return 0


def cmd_solve(args) -> int:
    params = _params(args.params)
    grid = codec.decode_desc(args.desc, params.w, params.h)
    solution = solve(
        grid, params.w, params.h, params.diagonal,
        max_difficulty=Difficulty.EASY if args.easy else None,
        steps_limit=args.steps,
        unique_only=args.unique,
    )
    if solution is None:
        print("Cannot find a solution")
        return 1
    print(codec.format_grid(solution, params.w, params.h), end="")
    return 0


def cmd_path(args) -> int:
    params = _params(args.params)
    path = random_path(params.w, params.h, params.diagonal, SeededRandom(args.seed))
    print(codec.format_grid(path_to_grid(path, params.w, params.h), params.w, params.h), end="")
    return 0


def cmd_check(args) -> int:
    params = _params(args.params)
    grid = codec.decode_desc(args.desc, params.w, params.h)
    status = check_grid(grid, params.w, params.h, params.diagonal)
    for loc in status.bad:
        print(f"bad: {grid[loc.y * params.w + loc.x]} at ({loc.x},{loc.y})")
    print("completed" if status.completed else "not completed")
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="hamilton", description="Hamilton path puzzle generator and solver")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log generator and solver progress")
    sub = ap.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate new puzzles")
    gen.add_argument("params", nargs="?", help="Params string, e.g. 7x7pa or 9x9dh")
    gen.add_argument("--config", help="Path to a YAML generator config")
    gen.add_argument("--seed", help="Random seed")
    gen.add_argument("--count", type=int, help="Number of puzzles to generate")
    gen.add_argument("--max-attempts", type=int, help="Give up on a masked pattern after this many paths")
    gen.add_argument("--solution", action="store_true", help="Also print the solution")
    gen.set_defaults(func=cmd_generate)

    sol = sub.add_parser("solve", help="Solve a puzzle description")
    sol.add_argument("params", help="Params string, e.g. 4x4")
    sol.add_argument("desc", help="Comma-separated clues in row-major order")
    sol.add_argument("--easy", action="store_true", help="Necessary moves only, no trial-and-error")
    sol.add_argument("--unique", action="store_true", help="Fail if the solution is not unique")
    sol.add_argument("--steps", type=int, default=parser.DEFAULT_SOLVE_STEPS, help="Solver step limit (0 for none)")
    sol.set_defaults(func=cmd_solve)

    pth = sub.add_parser("path", help="Print a random Hamiltonian path")
    pth.add_argument("params", help="Params string, e.g. 6x4o")
    pth.add_argument("--seed", help="Random seed")
    pth.set_defaults(func=cmd_path)

    chk = sub.add_parser("check", help="Report misplaced numbers in a grid")
    chk.add_argument("params", help="Params string")
    chk.add_argument("desc", help="Comma-separated numbers in row-major order")
    chk.set_defaults(func=cmd_check)

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    try:
        return args.func(args)
    except ValueError as exc:
        raise SystemExit(f"error: {exc}") from exc


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
