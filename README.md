# beetsp

Heuristics for the asymmetric travelling salesman problem (ATSP) on instance
files that give a full integer weight matrix.

The package has three parts:

- **Nearest-neighbour tours** (`beetsp.greedy`). From each start city, the tour
  always moves to the cheapest unvisited city, with ties going to the
  lowest-numbered one. The tours from all start cities are sorted by cost,
  cheapest first.
- **Bees algorithm** (`beetsp.bee`). A population of tours is built from the
  nearest-neighbour tours (a quarter of the population, rounded, and never more
  than one per city) and random tours for the rest. In each round, the elite
  sites and the other selected sites are improved by a randomly chosen local
  search: segment reversal, moving one city, moving a block of cities, or
  swapping two cities. Elite sites get six times the base effort and selected
  sites get twice that. After each round the elite tours are kept, some tours
  from the rest of the population are picked at random, and the population is
  filled up again with new random tours. The search stops once the best cost
  reaches the target cost, or after 100 rounds in a row without improvement.
- **Verification** (`beetsp.verify`). Recomputes the cost of a saved tour and
  checks that no city appears twice.

## Installation

```
pip install .
```

Only the Python standard library is needed (Python 3.10 or newer). The test
suite needs pytest (`pip install .[test]`).

## Commands

### `beetsp-greedy [instance] [-o OUTPUT]`

Reads `instance` (default `INPUTDATA/tsp1.atsp`) and prints `n = <dimension>`.
It then writes every nearest-neighbour tour, cheapest first, as a line with the
cost followed by a line with the path. The last line is `Thoi gian = <seconds>`.
Unless `-o` is given, the output goes to `greedy/greedy_<instance file name>`,
and the directory is created if needed.

### `beetsp-bee [instance] [--greedy FILE] [-o OUTPUT] [--population N] [--target COST] [--seed SEED]`

Runs the bees algorithm on `instance` (default `INPUTDATA/tsp1.atsp`).

- `--greedy`: the file of seed tours. The default is
  `greedy/greedy_<instance file name>`. If that file does not exist, the
  nearest-neighbour tours are computed in memory.
- `--population`: the population size (default 75). 15% of it (truncated) sets
  the index of the last elite site, and 80% sets the number of selected sites.
  The base effort is 100 times the number of cities.
- `--target`: stop as soon as a tour of this cost or lower is found
  (default 736).
- `--seed`: seeds the random number generator, which makes runs repeatable.

The result is printed and also written to `OUTPUT`, or to
`bee/bee_<instance file name>` if `-o` is not given. It has four lines:

```
cost = <cost>
Duong di
<city> <city> ... 
Thoi gian = <seconds>
```

### `beetsp-verify [result] [instance]`

Reads a result file in the format above (default `./bee/bee_tsp1.atsp`) and an
instance (default `../TSPLIB/tsp1.atsp`). It reports whether the stated cost
matches the recomputed one, and whether the tour repeats a city. The exit
status is 0 when both checks pass and 1 otherwise.

A typical session runs `beetsp-greedy`, then `beetsp-bee`, then
`beetsp-verify`.

## Library use

```python
import random

from beetsp.instance import read_atsp
from beetsp.greedy import greedy_tours
from beetsp.bee import BeeColony, BeeParameters
from beetsp.verify import check_tour

instance = read_atsp("tsp1.atsp")

tours = greedy_tours(instance)            # one tour per start city, cheapest first
print(tours[0].cost, tours[0].path)

params = BeeParameters.for_instance(instance, 75, 736)
best = BeeColony(instance, params, random.Random(1), tours).run()

check = check_tour(instance, best.path, best.cost)
assert check.passed()
```

The public names are:

- `beetsp.instance`
  - `AtspInstance(dimension, weights)`, with `weight(a, b)`,
    `tour_cost(path)` and `make_tour(path)`.
  - `Tour(cost, path)`, an ordered, frozen dataclass.
  - `parse_atsp(text)` and `read_atsp(path)`.
- `beetsp.greedy`
  - `nearest_neighbour_tour(instance, start)` and `greedy_tours(instance)`.
  - `format_tours(tours, seconds)` writes the greedy output format.
  - `parse_tours(text, dimension, limit=None)` reads that format back. It
    raises `ValueError` if fewer than `limit` tours are present.
- `beetsp.bee`
  - `BeeParameters` holds `population_size`, `elite_count`, `selected_count`,
    `effort`, `target_cost`, `elite_factor`, `selected_factor` and
    `stall_limit`. `BeeParameters.for_instance(instance, population_size=75,
    target_cost=0)` builds the standard settings.
  - `BeeColony(instance, parameters, rng=None, seed_tours=None)`, with
    `initial_population()` and `run()`.
  - `random_tour(instance, rng)`.
  - The local searches `invert_search`, `insert_search`, `move_block_search`
    and `swap_search`. Each takes `(instance, tour, effort, rng)`.
  - `format_result(tour, seconds)`.
- `beetsp.verify`
  - `parse_result(text, dimension)` returns `(claimed_cost, path)`.
  - `check_tour(instance, path, claimed_cost)` returns a `TourCheck`, which has
    `cost_matches`, `is_hamiltonian`, `duplicate_at` and `passed()`.

Cities are numbered from 1. A tour is closed: its cost includes the edge from
the last city back to the first. Out-of-range cities and malformed input raise
`ValueError`.

## Input format

The first seven lines of the file are a header. The fourth line gives the
dimension in the form `DIMENSION: n`, and the number is read from after those
first eleven characters. The rest of the file must hold at least `n × n`
whitespace-separated integers, read row by row. Any further values are ignored.

## Limitations

Only explicit full-matrix instances with exactly this seven-line header are
read. Other TSPLIB header layouts and other edge-weight formats, such as
coordinates or triangular matrices, are not supported. No check is made that
the header describes an asymmetric instance.