"""A population of chromosomes evolved by selection, crossover and mutation."""

from __future__ import annotations

import random
import re
from pathlib import Path
from typing import Iterator

from .chromosome import AVERAGING_COUNT, Chromosome, random_uniform

DEFAULT_POPULATION_SIZE = 100
DEFAULT_MUTATION_RATE = 0.75
FORCED_MUTATION = 1.1

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _parse_number(cell: str) -> float | None:
    match = _NUMBER.match(cell.lstrip())
    return float(match.group()) if match else None


def _split_cells(line: str) -> list[str]:
    cells = line.split(";")
    if cells and cells[-1] == "":
        cells.pop()
    return cells


class Population:
    """Chromosomes stored in a semicolon separated file between runs.

    Each line of the file holds the genes, the fitness, the check count and
    the fitness record of one chromosome.
    """

    def __init__(
        self,
        chromosome_size: int = 0,
        filename: str | Path = "test.csv",
        average_count: int = AVERAGING_COUNT,
        populate: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        self.chromosome_size = chromosome_size
        self.filename = Path(filename)
        self.average_count = average_count
        self.mutation_rate = DEFAULT_MUTATION_RATE
        self._rng = rng
        self._chromosomes: list[Chromosome] = (
            [self._new_chromosome(chromosome_size) for _ in range(DEFAULT_POPULATION_SIZE)]
            if populate
            else []
        )

    def _new_chromosome(self, size: int) -> Chromosome:
        return Chromosome(size, self.average_count, self._rng)

    def _random(self, low: float, high: float) -> float:
        return random_uniform(low, high, self._rng)

    def __len__(self) -> int:
        return len(self._chromosomes)

    def __getitem__(self, index: int) -> Chromosome:
        return self._chromosomes[index]

    def __setitem__(self, index: int, chromosome: Chromosome) -> None:
        self._chromosomes[index] = chromosome

    def __iter__(self) -> Iterator[Chromosome]:
        return iter(self._chromosomes)

    def run_epoch(self) -> None:
        """Breed a new generation in place.

        The best chromosome and a biased random third of the population are
        kept as parents; their children replace the rest from the back, and
        whatever is left over is mutated unconditionally.
        """
        self.sort()
        size = len(self._chromosomes)
        chosen = {0}
        begin, end = 1, size - 1
        while len(chosen) < size // 3:
            if self._random(-1.0, 1.0) < 0.0:
                chosen.add(begin)
                begin += 1
            else:
                chosen.add(int(self._random(float(begin + 1), float(end))))

        selected = [i for i in range(size) if i in chosen]
        unselected = [i for i in range(size) if i not in chosen]
        if self._rng is not None:
            self._rng.shuffle(selected)
        else:
            random.shuffle(selected)

        for first, second in zip(selected[0::2], selected[1::2]):
            if len(unselected) < 2:
                break
            point = int(self._random(1.0, float(self.chromosome_size - 1)))
            for mother, father in ((first, second), (second, first)):
                child = self._chromosomes[mother].reproduce(
                    self._chromosomes[father], point
                )
                child.mutate(self.mutation_rate)
                self._chromosomes[unselected.pop()] = child

        while unselected:
            self._chromosomes[unselected.pop()].mutate(FORCED_MUTATION)

    def sort(self) -> None:
        """Order the chromosomes by fitness, highest first."""
        self._chromosomes.sort(key=lambda c: c.fitness, reverse=True)

    def next_to_evaluate(self) -> int | None:
        """Index of the first chromosome not yet evaluated, or None."""
        return next(
            (i for i, c in enumerate(self._chromosomes) if not c.is_evaluated), None
        )

    def is_evaluated(self) -> bool:
        """Whether every chromosome has been evaluated."""
        return all(c.is_evaluated for c in self._chromosomes)

    def fittest_value(self) -> float:
        """Highest fitness, or -10005.0 when no chromosome exceeds it."""
        return max((c.fitness for c in self._chromosomes), default=-10005.0)

    def unfittest_value(self) -> float:
        """Lowest fitness below 10000.0, or 10000.0 when there is none."""
        return min(
            (c.fitness for c in self._chromosomes if c.fitness < 10000.0),
            default=10000.0,
        )

    def average_fitness(self) -> float:
        """Mean fitness of the population."""
        return sum(c.fitness for c in self._chromosomes) / len(self._chromosomes)

    def first_difference(self) -> float:
        """Gene difference between the first and second chromosome."""
        return self._chromosomes[0].difference(self._chromosomes[1])

    def second_difference(self) -> float:
        """Gene difference between the second and third chromosome."""
        return self._chromosomes[1].difference(self._chromosomes[2])

    def fittest_chromosome(self) -> Chromosome | None:
        """The first chromosome with the highest fitness above -10005.0."""
        candidates = [c for c in self._chromosomes if c.fitness > -10005.0]
        return max(candidates, key=lambda c: c.fitness, default=None)

    def load(self, population_size: int, chromosome_size: int) -> None:
        """Replace the population with the file's contents.

        Missing lines, or a missing file, are filled with fresh random
        chromosomes; lines beyond ``population_size`` are ignored.
        """
        lines: list[str] = []
        if self.filename.is_file():
            with self.filename.open(encoding="utf-8") as stream:
                lines = [line.rstrip("\n") for line in stream]

        self._chromosomes = [
            self._parse_line(line, chromosome_size)
            for line in lines[:population_size]
        ]
        self._chromosomes.extend(
            self._new_chromosome(chromosome_size)
            for _ in range(population_size - len(self._chromosomes))
        )

    def _parse_line(self, line: str, size: int) -> Chromosome:
        chromosome = self._new_chromosome(size)
        for location, cell in enumerate(_split_cells(line)):
            value = _parse_number(cell)
            if value is not None:
                if location == size:
                    chromosome.set_fitness(value)
                elif location in (size + 1, size + 2):
                    chromosome.check_count = int(value)
                elif location < size:
                    chromosome[location] = value
            if location == size + 2:
                chromosome.record = cell
        return chromosome

    def save(self) -> None:
        """Write every chromosome as one line of the population file."""
        with self.filename.open("w", encoding="utf-8") as stream:
            for chromosome in self._chromosomes:
                genes = "".join(
                    f"{chromosome[j]:g};" for j in range(self.chromosome_size)
                )
                stream.write(
                    f"{genes}{chromosome.fitness:g};{chromosome.check_count};"
                    f"{chromosome.record};\n"
                )