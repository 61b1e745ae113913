import random

import pytest

from scbotkit.chromosome import (
    AVERAGING_COUNT,
    MUTATION_STEP,
    UNCHECKED_FITNESS,
    Chromosome,
    random_uniform,
)


class _FixedSource:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def _chromosome(genes, average_count=AVERAGING_COUNT, seed=1):
    chromosome = Chromosome(len(genes), average_count, random.Random(seed))
    for i, gene in enumerate(genes):
        chromosome[i] = gene
    return chromosome


def test_random_uniform_bounds_follow_source():
    assert random_uniform(-3.0, 5.0, _FixedSource(0.0)) == -3.0
    assert random_uniform(-3.0, 5.0, _FixedSource(1.0)) == 5.0


def test_random_uniform_stays_in_range():
    rng = random.Random(7)
    values = [random_uniform(2.0, 4.0, rng) for _ in range(200)]
    assert all(2.0 <= v <= 4.0 for v in values)


def test_new_chromosome_is_unchecked():
    chromosome = Chromosome(8, 3, random.Random(2))
    assert len(chromosome) == 8
    assert all(-1.0 <= gene <= 1.0 for gene in chromosome)
    assert chromosome.fitness == UNCHECKED_FITNESS
    assert chromosome.check_count == -3
    assert not chromosome.is_evaluated
    assert chromosome.record == ""


def test_default_average_count():
    chromosome = Chromosome(2)
    assert chromosome.check_count == -AVERAGING_COUNT


def test_add_fitness_accumulates_until_evaluated():
    chromosome = _chromosome([0.0, 0.0], average_count=2)
    chromosome.add_fitness(1.5, "a")
    assert chromosome.fitness == 1.5
    assert chromosome.record == "a"
    assert not chromosome.is_evaluated
    chromosome.add_fitness(2.5, "b")
    assert chromosome.fitness == 4.0
    assert chromosome.record == "ab"
    assert chromosome.is_evaluated


def test_set_fitness_uses_blank_record_by_default():
    chromosome = _chromosome([0.0])
    chromosome.set_fitness(3.0)
    assert chromosome.fitness == 3.0
    assert chromosome.record == " "


def test_reset_marks_unchecked():
    chromosome = _chromosome([0.0], average_count=1)
    chromosome.add_fitness(2.0)
    assert chromosome.is_evaluated
    chromosome.reset()
    assert chromosome.fitness == UNCHECKED_FITNESS
    assert chromosome.check_count == -1


def test_difference_is_zero_with_itself_and_symmetric():
    first = _chromosome([0.1, -0.4, 0.9])
    second = _chromosome([0.3, 0.2, -0.5])
    assert first.difference(first) == 0.0
    assert first.difference(second) == pytest.approx(second.difference(first))


def test_difference_counts_one_step():
    first = _chromosome([0.0, 0.0, 0.0])
    second = _chromosome([0.0, MUTATION_STEP, 0.0])
    assert first.difference(second) == MUTATION_STEP


def test_mutate_with_zero_probability_keeps_everything():
    chromosome = _chromosome([0.5, -0.5, 0.25], average_count=1)
    chromosome.add_fitness(1.0)
    chromosome.mutate(0.0)
    assert chromosome.genes == (0.5, -0.5, 0.25)
    assert chromosome.is_evaluated


def test_forced_mutation_moves_every_gene_by_one_step():
    before = [0.5, -0.5, 0.25, 0.0]
    chromosome = _chromosome(before, average_count=1)
    chromosome.add_fitness(1.0)
    chromosome.mutate(1.1)
    for old, new in zip(before, chromosome):
        assert abs(new - old) == pytest.approx(MUTATION_STEP)
    assert chromosome.fitness == UNCHECKED_FITNESS
    assert not chromosome.is_evaluated


def test_reproduce_splits_at_crossover_point():
    mother = _chromosome([1.0, 2.0, 3.0, 4.0], average_count=4)
    father = _chromosome([-1.0, -2.0, -3.0, -4.0], average_count=4)
    child = mother.reproduce(father, 2)
    assert child.genes == (1.0, 2.0, -3.0, -4.0)
    assert child.check_count == -4
    assert child.fitness == UNCHECKED_FITNESS
    assert mother.genes == (1.0, 2.0, 3.0, 4.0)


def test_randomize_keeps_size_and_resets():
    chromosome = _chromosome([0.0] * 5, average_count=1)
    chromosome.add_fitness(9.0)
    chromosome.randomize()
    assert len(chromosome) == 5
    assert chromosome.fitness == UNCHECKED_FITNESS
    assert all(abs(gene) <= 100.0 + MUTATION_STEP for gene in chromosome)


def test_str_lists_genes_with_separators():
    chromosome = _chromosome([0.5, -1.0, 2.0])
    assert str(chromosome) == "0.5;-1;2;"


def test_index_out_of_range_raises():
    chromosome = _chromosome([0.0, 1.0])
    with pytest.raises(IndexError):
        chromosome[2]
    with pytest.raises(IndexError):
        chromosome[5] = 1.0
    assert chromosome.genes == (0.0, 1.0)
    assert len(chromosome) == 2