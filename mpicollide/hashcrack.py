"""Brute-force inversion of a deliberately weak hash, serially or partitioned."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence, Tuple

DEFAULT_TARGET = 504981
DEFAULT_LIMIT = 10000
_MODULUS = 919393
_MAX_UINT = 2**32


def rubbish_hash(x: int) -> int:
    """Hash an unsigned 32-bit integer."""
    if not 0 <= x < _MAX_UINT:
        raise ValueError(f"x must be an unsigned 32-bit integer, got {x}")
    value = x
    for _ in range(7):
        value = (value * x) % _MODULUS
    return value


def crack(target: int = DEFAULT_TARGET, limit: int = DEFAULT_LIMIT) -> Optional[int]:
    """Return the smallest x below ``limit`` whose hash is ``target``, or None."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    return next((x for x in range(limit) if rubbish_hash(x) == target), None)


def partition_range(n: int, n_ranks: int, rank: int) -> Tuple[int, int]:
    """Return the half-open range of candidates that ``rank`` searches."""
    if n_ranks < 1:
        raise ValueError("n_ranks must be at least 1")
    if not 0 <= rank < n_ranks:
        raise ValueError(f"rank {rank} out of range for {n_ranks} ranks")
    chunk = n // n_ranks
    start = chunk * rank
    stop = n if rank == n_ranks - 1 else chunk * (rank + 1)
    return start, stop


def crack_partitioned(
    target: int = DEFAULT_TARGET, limit: int = DEFAULT_LIMIT, n_ranks: int = 4
) -> Optional[Tuple[int, int]]:
    """Search in lockstep over ``n_ranks`` partitions.

    Every rank tests one candidate per round; after each round the results
    are gathered and the search stops once any rank has found the key.
    Returns ``(winner, key)``, the highest-numbered finder in the first
    successful round, or None when no candidate matches.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    ranges = [range(*partition_range(limit, n_ranks, r)) for r in range(n_ranks)]
    rounds = max(len(r) for r in ranges)
    for step in range(rounds):
        found = [
            (rank, candidates[step])
            for rank, candidates in enumerate(ranges)
            if step < len(candidates) and rubbish_hash(candidates[step]) == target
        ]
        if found:
            return found[-1]
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Find a preimage of the rubbish hash.")
    parser.add_argument("--target", type=int, default=DEFAULT_TARGET)
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT)
    parser.add_argument(
        "--ranks", type=int, default=None, help="search in lockstep over this many partitions"
    )
    args = parser.parse_args(argv)

    if args.ranks is None:
        x = crack(args.target, args.limit)
        print(f"Found x = {x if x is not None else 0}, hash(x) = {args.target}")
        return 0

    result = crack_partitioned(args.target, args.limit, args.ranks)
    winner, key = result if result is not None else (0, 0)
    print(f"Rank 0 was told that {winner} found x = {key}")
    for rank in range(1, args.ranks):
        print(f"Rank {rank} came to a graceful stop.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())