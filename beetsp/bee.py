"""Bees algorithm for the asymmetric TSP, with four local-search moves."""

from __future__ import annotations

import argparse
import math
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Sequence

from beetsp.greedy import TIME_LABEL, greedy_tours, parse_tours
from beetsp.instance import AtspInstance, Tour, read_atsp

PATH_CAPTION = "Duong di"
DEFAULT_TARGET_COST = 736
GREEDY_SHARE = 0.25

Neighbour = Callable[[list, random.Random], list]


def random_tour(instance: AtspInstance, rng: random.Random) -> Tour:
    """A uniformly random permutation of all cities, with its cost."""
    cities = range(1, instance.dimension + 1)
    return instance.make_tour(rng.sample(cities, instance.dimension))


def _local_search(
    instance: AtspInstance,
    tour: Tour,
    limit: int,
    neighbour: Neighbour,
    rng: random.Random,
) -> Tour:
    """Try random neighbours until ``limit`` attempts in a row bring nothing."""
    best = tour
    stalled = 0
    while stalled <= limit:
        stalled += 1
        path = neighbour(list(best.path), rng)
        cost = instance.tour_cost(path)
        if cost < best.cost:
            best = Tour(cost, tuple(path))
            stalled = 1
    return best


def _require_cities(tour: Tour, needed: int, move: str) -> None:
    if len(tour.path) < needed:
        raise ValueError(f"the {move} move needs at least {needed} cities")


def _invert(path: list, rng: random.Random) -> list:
    u, v = sorted(rng.sample(range(len(path)), 2))
    path[u:v + 1] = path[u:v + 1][::-1]
    return path


def _insert(path: list, rng: random.Random) -> list:
    u, v = rng.sample(range(len(path)), 2)
    city = path.pop(v)
    path.insert(u, city)
    return path


def _move_block(path: list, rng: random.Random) -> list:
    u, v, w = rng.sample(range(len(path)), 3)
    if u > v:
        u, v = v, u
    block = path[u:v]
    del path[u:v]
    if w > len(path):
        w = len(path) - 1
    path[w:w] = block
    return path


def _swap(path: list, rng: random.Random) -> list:
    u, v = rng.sample(range(len(path)), 2)
    path[u], path[v] = path[v], path[u]
    return path


def invert_search(
    instance: AtspInstance, tour: Tour, effort: int, rng: random.Random
) -> Tour:
    """Reverse random segments; stop after ``effort // 10`` fruitless tries."""
    _require_cities(tour, 2, "invert")
    return _local_search(instance, tour, effort // 10, _invert, rng)


def insert_search(
    instance: AtspInstance, tour: Tour, effort: int, rng: random.Random
) -> Tour:
    """Move one city to another position; stop after ``effort // 10`` fruitless tries."""
    _require_cities(tour, 2, "insert")
    return _local_search(instance, tour, effort // 10, _insert, rng)


def move_block_search(
    instance: AtspInstance, tour: Tour, effort: int, rng: random.Random
) -> Tour:
    """Relocate a block of cities; stop after ``effort * 20`` fruitless tries."""
    _require_cities(tour, 3, "move-block")
    return _local_search(instance, tour, effort * 20, _move_block, rng)


def swap_search(
    instance: AtspInstance, tour: Tour, effort: int, rng: random.Random
) -> Tour:
    """Exchange two cities; stop after ``effort * 10`` fruitless tries."""
    _require_cities(tour, 2, "swap")
    return _local_search(instance, tour, effort * 10, _swap, rng)


_SEARCHES = (invert_search, insert_search, move_block_search, swap_search)


@dataclass(frozen=True)
class BeeParameters:
    """Tuning of the colony.

    ``elite_count`` is the index of the last elite site (sites 0..elite_count
    are elite); sites up to ``selected_count`` - 1 are the other selected ones.
    """

    population_size: int
    elite_count: int
    selected_count: int
    effort: int
    target_cost: int = 0
    elite_factor: int = 6
    selected_factor: int = 2
    stall_limit: int = 100

    def __post_init__(self) -> None:
        if not 0 <= self.elite_count < self.selected_count < self.population_size:
            raise ValueError(
                "need 0 <= elite_count < selected_count < population_size"
            )
        if self.effort < 0:
            raise ValueError("effort must not be negative")
        if self.elite_factor < 1 or self.selected_factor < 1:
            raise ValueError("search factors must be positive")
        if self.stall_limit < 0:
            raise ValueError("stall_limit must not be negative")

    @classmethod
    def for_instance(
        cls,
        instance: AtspInstance,
        population_size: int = 75,
        target_cost: int = 0,
    ) -> BeeParameters:
        """Standard settings: 80% selected, 15% elite, effort 100 per city."""
        return cls(
            population_size=population_size,
            elite_count=int(0.15 * population_size),
            selected_count=int(0.8 * population_size),
            effort=100 * instance.dimension,
            target_cost=target_cost,
        )


class BeeColony:
    """A colony searching one instance; seeded partly with greedy tours."""

    def __init__(
        self,
        instance: AtspInstance,
        parameters: BeeParameters,
        rng: random.Random | None = None,
        seed_tours: Iterable[Tour] | None = None,
    ) -> None:
        self.instance = instance
        self.parameters = parameters
        self.rng = rng if rng is not None else random.Random()
        self.seed_tours = None if seed_tours is None else list(seed_tours)

    def _seed_count(self) -> int:
        wanted = math.floor(GREEDY_SHARE * self.parameters.population_size + 0.5)
        return min(wanted, self.instance.dimension)

    def initial_population(self) -> list[Tour]:
        """A quarter greedy tours (at most one per city), the rest random."""
        seeds = (
            self.seed_tours
            if self.seed_tours is not None
            else greedy_tours(self.instance)
        )
        population = list(seeds[: self._seed_count()])
        while len(population) < self.parameters.population_size:
            population.append(random_tour(self.instance, self.rng))
        return population

    def _forage(self, population: list[Tour], sites: range, effort: int) -> None:
        for site in sites:
            search = self.rng.choice(_SEARCHES)
            found = search(self.instance, population[site], effort, self.rng)
            if found.cost < population[site].cost:
                population.append(population[site])
                population[site] = found

    def _next_generation(self, population: list[Tour]) -> list[Tour]:
        params = self.parameters
        survivors = population[: params.elite_count + 1]
        pool = range(params.selected_count, len(population))
        wanted = params.selected_count - params.elite_count
        picks = self.rng.sample(pool, min(wanted, len(pool)))
        survivors.extend(population[index] for index in picks)
        while len(survivors) < params.population_size:
            survivors.append(random_tour(self.instance, self.rng))
        rest = survivors[1:]
        self.rng.shuffle(rest)
        return [survivors[0], *rest]

    def run(self) -> Tour:
        """Search until the target is met or too many rounds bring nothing."""
        params = self.parameters
        population = sorted(self.initial_population())
        best_cost = population[0].cost
        stalled = 1
        while stalled <= params.stall_limit and best_cost > params.target_cost:
            stalled += 1
            self._forage(
                population,
                range(0, params.elite_count + 1),
                params.effort * params.elite_factor,
            )
            self._forage(
                population,
                range(params.elite_count + 1, params.selected_count),
                params.effort * params.selected_factor,
            )
            population.sort(key=lambda tour: tour.cost)
            if population[0].cost < best_cost:
                best_cost = population[0].cost
                stalled = 1
            population = self._next_generation(population)
        return population[0]


def format_result(tour: Tour, seconds: float) -> str:
    """Render the cost line, the caption, the path and the elapsed time."""
    path = "".join(f"{city} " for city in tour.path)
    return (
        f"cost = {tour.cost}\n"
        f"{PATH_CAPTION}\n"
        f"{path}\n"
        f"{TIME_LABEL}{seconds:g}\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve an instance with the bees algorithm.")
    parser.add_argument("instance", nargs="?", default="INPUTDATA/tsp1.atsp")
    parser.add_argument("--greedy", help="file of greedy tours used as seeds")
    parser.add_argument("-o", "--output", help="output file")
    parser.add_argument("--population", type=int, default=75)
    parser.add_argument("--target", type=int, default=DEFAULT_TARGET_COST)
    parser.add_argument("--seed", type=int, help="random seed")
    args = parser.parse_args(argv)

    instance = read_atsp(args.instance)
    print(f"n = {instance.dimension}")
    name = Path(args.instance).name
    parameters = BeeParameters.for_instance(instance, args.population, args.target)

    greedy_file = Path(args.greedy) if args.greedy else Path("greedy") / f"greedy_{name}"
    seeds = None
    if greedy_file.is_file():
        seeds = parse_tours(greedy_file.read_text(), instance.dimension)

    colony = BeeColony(instance, parameters, random.Random(args.seed), seeds)
    started = time.perf_counter()
    best = colony.run()
    elapsed = time.perf_counter() - started

    report = format_result(best, elapsed)
    print(report, end="")
    output = Path(args.output) if args.output else Path("bee") / f"bee_{name}"
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(report)
    return 0