"""Check a saved result: its claimed cost and that it visits each city once."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from beetsp.instance import AtspInstance, read_atsp

_COST_PREFIX = len("cost = ")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class TourCheck:
    """Outcome of checking one tour against its instance."""

    claimed_cost: int
    actual_cost: int
    duplicate_at: int | None

    @property
    def cost_matches(self) -> bool:
        return self.claimed_cost == self.actual_cost

    @property
    def is_hamiltonian(self) -> bool:
        return self.duplicate_at is None

    def passed(self) -> bool:
        """True when both the cost and the cycle check pass."""
        return self.cost_matches and self.is_hamiltonian


def parse_result(text: str, dimension: int) -> tuple[int, list[int]]:
    """Read the claimed cost line, skip the caption, then ``dimension`` cities."""
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("result file is truncated")
    match = _LEADING_INT.match(lines[0][_COST_PREFIX:])
    if match is None:
        raise ValueError(f"no cost found in {lines[0]!r}")
    tokens = "\n".join(lines[2:]).split()
    if len(tokens) < dimension:
        raise ValueError(f"expected {dimension} cities, found {len(tokens)}")
    return int(match.group(1)), [int(token) for token in tokens[:dimension]]


def check_tour(
    instance: AtspInstance, path: Sequence[int], claimed_cost: int
) -> TourCheck:
    """Recompute the cost of ``path`` and look for a repeated city."""
    actual = instance.tour_cost(path)
    ordered = sorted(path)
    duplicate_at = next(
        (index for index, (a, b) in enumerate(zip(ordered, ordered[1:])) if a == b),
        None,
    )
    return TourCheck(claimed_cost, actual, duplicate_at)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Verify a saved tour.")
    parser.add_argument("result", nargs="?", default="./bee/bee_tsp1.atsp")
    parser.add_argument("instance", nargs="?", default="../TSPLIB/tsp1.atsp")
    args = parser.parse_args(argv)

    instance = read_atsp(args.instance)
    print(f"n = {instance.dimension}")
    claimed, path = parse_result(Path(args.result).read_text(), instance.dimension)
    check = check_tour(instance, path, claimed)

    print("Check 1: tour cost:")
    if check.cost_matches:
        print(f"Check 1 passed with cost = {check.actual_cost}")
    else:
        print(
            f"Check 1 failed, cost in file {check.claimed_cost}, "
            f"computed cost = {check.actual_cost}"
        )
    print("Check 2: tour is a Hamiltonian cycle:")
    if check.is_hamiltonian:
        print("Check 2 passed")
    else:
        print(f"Tour is invalid, repeated city at position {check.duplicate_at}")
    return 0 if check.passed() else 1