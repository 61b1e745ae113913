# scbotkit

Small, dependency-free building blocks for writing game-playing bots:

- **Fuzzy inference** (`scbotkit.membership`, `scbotkit.variable`,
  `scbotkit.operators`, `scbotkit.rules`, `scbotkit.system`): linguistic
  variables with piecewise-linear fuzzy sets, rules built from clauses joined
  by AND/OR, and centroid defuzzification.
- **Genetic algorithm** (`scbotkit.chromosome`, `scbotkit.population`):
  real-valued chromosomes whose fitness is accumulated over several
  evaluations, and a population that is saved to and loaded from a
  `;`-separated file.
- **Table logging** (`scbotkit.tables`): rows of typed values, each stamped
  with the current Unix time, appended to a `;`-separated file and optionally
  echoed to a printer.

## Installation

```
pip install .
```

Install with the `test` extra to run the test suite with pytest.

## Fuzzy inference

```python
from scbotkit.membership import TriangleFunction
from scbotkit.variable import LinguisticVariable
from scbotkit.rules import Clause, RuleStack
from scbotkit.system import FuzzySystem

front = LinguisticVariable("FrontalDistance", 0, 100)
front.add_fuzzy_set("Near", TriangleFunction(-50, 10))
front.add_fuzzy_set("Far", TriangleFunction(50, 150))

angle = LinguisticVariable("Angle", 0, 40)
angle.add_fuzzy_set("Zero", TriangleFunction(-10, 10))
angle.add_fuzzy_set("Positive", TriangleFunction(20, 40))

system = FuzzySystem()
system.add_variable(angle)
system.add_variable(front)

straight = RuleStack()
straight.add(Clause("FrontalDistance", "Far"))
straight.set_then(Clause("Angle", "Zero"))
system.new_rule("Rule 1", straight)

turn = RuleStack()
turn.add(Clause("FrontalDistance", "Near"))
turn.set_then(Clause("Angle", "Positive"))
system.new_rule("Rule 2", turn)

system.set_input("FrontalDistance", 10)
print(system.evaluate("Angle"))
```

- `add_variable` stores a copy of the variable; adding a name that is
  already present keeps the first one. Set inputs through
  `FuzzySystem.set_input`, not on the original variable.
- `new_rule` stores a copy of the rule stack and binds every clause to the
  system's variables; a rule without a THEN clause, an unknown variable or an
  unknown fuzzy set raises `FuzzyError`.
- A rule stack alternates evaluable items (`Clause`, `NotClause`, nested
  `RuleStack`) with `AndOperator()` (minimum) or `OrOperator()` (maximum),
  read left to right. An empty stack fires with strength 0.
- `evaluate` samples the output variable's range in
  `defuzzification_interval` steps (1000 by default), clips each fired
  consequent at its rule's strength and returns the centroid. If every
  membership is zero it raises `FuzzyError`. Per-rule sums are logged at
  debug level on the `scbotkit.system` logger.

Membership functions: `PiecewiseLinearFunction(points)`,
`TriangleFunction(left, right)`, `TrapezoidalFunction(m1, m2, m3, m4)` and,
for open-ended shoulders, `TrapezoidalFunction.shoulder(m1, m2, EdgeType.LEFT)`
(rising) or `EdgeType.RIGHT` (falling). Points must have Y in [0, 1] and be
sorted on X, otherwise `FuzzyError` is raised.

## Genetic algorithm

```python
from scbotkit.population import Population

population = Population(9, "weights.csv", average_count=2)
population.load(20, 9)
if population.is_evaluated():
    population.run_epoch()
index = population.next_to_evaluate()
if index is not None:
    population[index].add_fitness(0.25)
population.save()
```

- A chromosome counts as evaluated once `add_fitness` has been called
  `average_count` times since its last `reset`; the fitness is the sum of
  the values added.
- `load` reads up to `population_size` lines from the file and fills any
  missing ones (or a missing file) with random chromosomes. Each line holds
  the genes, the fitness, the check count and a record, separated by `;`.
- `run_epoch` sorts by fitness (highest first), keeps the best chromosome
  and a biased random third as parents, replaces the others with mutated
  children, and mutates whatever is left.
- `fittest_value`, `unfittest_value`, `average_fitness`,
  `fittest_chromosome`, `first_difference` and `second_difference` report on
  the current population.

Pass a `random.Random` as `rng` to `Population` or `Chromosome` for
reproducible runs.

## Table logging

```python
from scbotkit.tables import TableWriter, StdPrinter

with TableWriter("results.csv") as table:
    table.printer = StdPrinter()
    table.set_column_headers("sif", "Name", "Count", "Score")
    table.add_row("first", 3, 0.5)
```

Column types are `i` (integer), `f` (float, six decimals) and `s` (quoted
string). The header line is written only when the file is new or opened with
`append=False`. `add_row` returns the line it wrote and echoes it to the
printer unless `echo=False`. `LogWriter` is a one-column text variant with
`add_line(message)`.

A small demonstration that writes `testFile.csv` and `testFile.log` to the
current directory (or to a directory given as an argument):

```
scbotkit-tables-demo
scbotkit-tables-demo some/directory
```

## What this package does not do

- It does not connect to a running game or drive a bot; it only provides
  the decision and logging pieces a bot would use.
- It does not compute fitness. The caller evaluates each chromosome (for
  example by running a network or a match with its genes as weights) and
  reports the result with `add_fitness`.
- Fuzzy rules are built in code from `Clause`, `NotClause`, `RuleStack` and
  the operators; there is no parser for textual "IF ... THEN ..." rules.