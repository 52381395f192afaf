"""Nearest-neighbour tours started from every city."""

from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import Iterable, Sequence

from beetsp.instance import AtspInstance, Tour, read_atsp

TIME_LABEL = "Thoi gian = "


def nearest_neighbour_tour(instance: AtspInstance, start: int) -> Tour:
    """Always move to the cheapest unvisited city; ties go to the lowest number."""
    unvisited = [city for city in range(1, instance.dimension + 1) if city != start]
    if len(unvisited) == instance.dimension:
        raise ValueError(f"city {start} is outside 1..{instance.dimension}")
    path = [start]
    current = start
    while unvisited:
        nearest = min(unvisited, key=lambda city: instance.weight(current, city))
        unvisited.remove(nearest)
        path.append(nearest)
        current = nearest
    return instance.make_tour(path)


def greedy_tours(instance: AtspInstance) -> list[Tour]:
    """Nearest-neighbour tours from every start city, cheapest first."""
    tours = (
        nearest_neighbour_tour(instance, start)
        for start in range(1, instance.dimension + 1)
    )
    return sorted(tours, key=lambda tour: tour.cost)


def format_tours(tours: Iterable[Tour], seconds: float) -> str:
    """Render tours as cost / path line pairs followed by the elapsed time."""
    lines = []
    for tour in tours:
        lines.append(f"{tour.cost}\n")
        lines.append("".join(f"{city} " for city in tour.path) + "\n")
    lines.append(f"{TIME_LABEL}{seconds:g}\n")
    return "".join(lines)


def parse_tours(text: str, dimension: int, limit: int | None = None) -> list[Tour]:
    """Read up to ``limit`` tours (all of them when ``limit`` is None)."""
    tokens = iter(text.split())
    tours: list[Tour] = []
    while limit is None or len(tours) < limit:
        head = next(tokens, None)
        try:
            cost = int(head) if head is not None else None
        except ValueError:
            cost = None
        if cost is None:
            if limit is None:
                break
            raise ValueError(f"expected {limit} tours, found {len(tours)}")
        try:
            path = tuple(int(next(tokens)) for _ in range(dimension))
        except (StopIteration, RuntimeError, ValueError) as error:
            raise ValueError("tour path is incomplete") from error
        tours.append(Tour(cost, path))
    return tours


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Write nearest-neighbour tours from every start city."
    )
    parser.add_argument("instance", nargs="?", default="INPUTDATA/tsp1.atsp")
    parser.add_argument("-o", "--output", help="output file")
    args = parser.parse_args(argv)

    instance = read_atsp(args.instance)
    print(f"n = {instance.dimension}")
    output = (
        Path(args.output)
        if args.output
        else Path("greedy") / f"greedy_{Path(args.instance).name}"
    )
    started = time.perf_counter()
    tours = greedy_tours(instance)
    elapsed = time.perf_counter() - started
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(format_tours(tours, elapsed))
    return 0