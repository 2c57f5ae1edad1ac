from __future__ import annotations

import argparse
import logging
import os
import statistics
import sys
import time
from typing import List, Optional

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from game import GameConfig, SolveCancelled, deal_board, solve  # type: ignore


def process(args: argparse.Namespace) -> int:
    config = GameConfig(num_bolts=args.bolts, bolt_height=args.height, num_colours=args.colours)
    start_time = time.time()
    solved = 0
    unsolved = 0
    timed_out = 0
    lengths: List[int] = []
    for seed in range(args.offset, args.offset + args.count):
        board = deal_board(config, seed=seed)
        deadline = time.monotonic() + args.timeout if args.timeout > 0 else None
        stop = (lambda d=deadline: time.monotonic() >= d) if deadline is not None else None
        try:
            res = solve(board, should_stop=stop)
        except SolveCancelled:
            timed_out += 1
            print(f"seed={seed} key={board.state_key()} timeout")
            continue
        if res.solvable:
            solved += 1
            lengths.append(len(res.moves))
        else:
            unsolved += 1
        print(
            f"seed={seed} key={board.state_key()} solvable={int(res.solvable)} "
            f"moves={len(res.moves)} states={res.states_explored} ms={res.elapsed_ms}"
        )
    elapsed = time.time() - start_time
    print(f"\nboards={args.count} solvable={solved} unsolvable={unsolved} timeout={timed_out} in {elapsed:.1f}s")
    if lengths:
        print(
            f"solution length min={min(lengths)} median={statistics.median(lengths)} "
            f"max={max(lengths)}"
        )
    return 0 if timed_out == 0 else 1


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Deal seeded boards and report how many are solvable")
    ap.add_argument("--bolts", type=int, default=7)
    ap.add_argument("--height", type=int, default=4)
    ap.add_argument("--colours", type=int, default=5)
    ap.add_argument("--count", type=int, default=20, help="Number of seeds to try")
    ap.add_argument("--offset", type=int, default=0, help="First seed")
    ap.add_argument("--timeout", type=float, default=60.0, help="Per-board time limit in seconds (0 = none)")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    return process(args)


if __name__ == "__main__":
    raise SystemExit(main())
