"""Real valued chromosomes with averaged fitness for a genetic algorithm."""

from __future__ import annotations

import random
from typing import Iterator

GAUSSIAN_SPREAD = 1.0
AVERAGING_COUNT = 10
UNCHECKED_FITNESS = -10001.0
MUTATION_STEP = 0.25


def random_uniform(
    low: float, high: float, rng: random.Random | None = None
) -> float:
    """Return a uniformly distributed value between ``low`` and ``high``."""
    sample = rng.random() if rng is not None else random.random()
    return (high - low) * sample + low


class Chromosome:
    """A list of genes with a fitness that may be averaged over several trials.

    A fresh chromosome needs ``average_count`` calls to :meth:`add_fitness`
    before it counts as evaluated.
    """

    def __init__(
        self,
        size: int = 0,
        average_count: int = AVERAGING_COUNT,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng
        self._genes = [self._random_gene() for _ in range(size)]
        self.average_count = average_count
        self.fitness = UNCHECKED_FITNESS
        self.check_count = -average_count
        self.record = ""

    def _random_gene(self, spread: float = GAUSSIAN_SPREAD) -> float:
        return random_uniform(-spread, spread, self._rng)

    @property
    def genes(self) -> tuple[float, ...]:
        """The genes in order."""
        return tuple(self._genes)

    @property
    def is_evaluated(self) -> bool:
        """Whether all required fitness trials have been added."""
        return self.check_count == 0

    def __len__(self) -> int:
        return len(self._genes)

    def __getitem__(self, index: int) -> float:
        return self._genes[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._genes[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._genes)

    def set_fitness(self, value: float, record: str = " ") -> None:
        """Replace the fitness and its record."""
        self.fitness = value
        self.record = record

    def add_fitness(self, value: float, record: str = " ") -> None:
        """Add the result of one trial and count it towards evaluation."""
        if self.fitness < UNCHECKED_FITNESS + 1:
            self.fitness = value
            self.record = record
        else:
            self.fitness += value
            self.record += record
        self.check_count += 1

    def reset(self) -> None:
        """Mark the chromosome as not evaluated."""
        self.fitness = UNCHECKED_FITNESS
        self.check_count = -self.average_count

    def difference(self, other: "Chromosome") -> float:
        """Sum of absolute gene differences over this chromosome's genes."""
        return sum(abs(mine - other[i]) for i, mine in enumerate(self._genes))

    def mutate(self, probability: float) -> None:
        """Shift each gene by a fixed step with the given probability.

        Any change marks the chromosome as not evaluated.
        """
        changed = False
        for i, gene in enumerate(self._genes):
            if random_uniform(0.0, 1.0, self._rng) <= probability:
                step = -MUTATION_STEP if self._random_gene() < 0 else MUTATION_STEP
                self._genes[i] = gene + step
                changed = True
        if changed:
            self.reset()

    def reproduce(self, other: "Chromosome", crossover_point: int) -> "Chromosome":
        """Child with this chromosome's genes before the point, ``other``'s after."""
        child = Chromosome(0, self.average_count, self._rng)
        child._genes = [
            mine if i < crossover_point else other[i]
            for i, mine in enumerate(self._genes)
        ]
        return child

    def randomize(self) -> None:
        """Draw all genes afresh with random spreads, then mutate them all."""
        self._genes = [
            self._random_gene(random_uniform(1.0, 100.0, self._rng))
            for _ in self._genes
        ]
        self.mutate(1.0)
        self.reset()

    def __str__(self) -> str:
        return "".join(f"{gene:g};" for gene in self._genes)

    def __repr__(self) -> str:
        return (
            f"Chromosome(genes={self._genes!r}, fitness={self.fitness!r}, "
            f"check_count={self.check_count!r})"
        )