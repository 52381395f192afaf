"""Asymmetric TSP instances given as an explicit full weight matrix."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

HEADER_LINES = 7
_DIMENSION_LINE = 4
_DIMENSION_OFFSET = len("DIMENSION: ")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True, order=True)
class Tour:
    """A closed tour: its total cost and the cities in visiting order."""

    cost: int
    path: tuple[int, ...]


@dataclass(frozen=True)
class AtspInstance:
    """An n-city instance; cities are numbered 1..n."""

    dimension: int
    weights: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if self.dimension < 1:
            raise ValueError(f"dimension must be positive, got {self.dimension}")
        if len(self.weights) != self.dimension or any(
            len(row) != self.dimension for row in self.weights
        ):
            raise ValueError("weight matrix does not match the dimension")

    def _check_city(self, city: int) -> None:
        if not 1 <= city <= self.dimension:
            raise ValueError(f"city {city} is outside 1..{self.dimension}")

    def weight(self, a: int, b: int) -> int:
        """Cost of travelling from city ``a`` to city ``b``."""
        self._check_city(a)
        self._check_city(b)
        return self.weights[a - 1][b - 1]

    def tour_cost(self, path: Sequence[int]) -> int:
        """Cost of the closed tour visiting ``path`` and returning to its start."""
        if not path:
            raise ValueError("a tour needs at least one city")
        following = list(path[1:]) + [path[0]]
        return sum(self.weight(a, b) for a, b in zip(path, following))

    def make_tour(self, path: Iterable[int]) -> Tour:
        """Build a :class:`Tour` for ``path`` with its cost computed."""
        cities = tuple(path)
        return Tour(self.tour_cost(cities), cities)


def _dimension_from(line: str) -> int:
    match = _LEADING_INT.match(line[_DIMENSION_OFFSET:])
    if match is None:
        raise ValueError(f"no dimension found in header line {line!r}")
    return int(match.group(1))


def parse_atsp(text: str) -> AtspInstance:
    """Parse an instance: a seven-line header, then the n*n weight matrix."""
    lines = text.splitlines()
    if len(lines) < HEADER_LINES:
        raise ValueError("instance header is truncated")
    dimension = _dimension_from(lines[_DIMENSION_LINE - 1])
    if dimension < 1:
        raise ValueError(f"dimension must be positive, got {dimension}")
    tokens = "\n".join(lines[HEADER_LINES:]).split()
    needed = dimension * dimension
    if len(tokens) < needed:
        raise ValueError(
            f"expected {needed} weights, found only {len(tokens)} values"
        )
    values = [int(token) for token in tokens[:needed]]
    rows = tuple(
        tuple(values[start:start + dimension])
        for start in range(0, needed, dimension)
    )
    return AtspInstance(dimension, rows)


def read_atsp(path: str | Path) -> AtspInstance:
    """Read and parse an instance file."""
    return parse_atsp(Path(path).read_text())