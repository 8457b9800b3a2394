"""
Sudoku solving by evolution.

Each unit holds a candidate answer grid; the blanks of the puzzle are filled
with random digits. Breeding takes every blank cell from either parent and
then mutates one blank at random. Fitness starts at 1.0 and shrinks by 10%
for every digit missing from a row, column or 3x3 square, so a solved grid
scores exactly 1.0 and stops the run early.
"""

from __future__ import annotations

import argparse

import numpy as np

from genepool import Population, configure_genepool_logging

# fmt: off
PUZZLE = np.array([
    7, 2, 6,   0, 9, 3,   8, 1, 5,
    3, 0, 5,   7, 2, 8,   9, 0, 6,
    4, 8, 0,   6, 0, 1,   2, 3, 7,

    8, 5, 2,   1, 4, 0,   6, 9, 3,
    0, 7, 3,   9, 8, 5,   1, 2, 4,
    9, 4, 1,   0, 6, 2,   0, 5, 8,

    1, 9, 0,   8, 3, 0,   5, 7, 2,
    5, 6, 7,   2, 1, 4,   3, 8, 0,
    2, 0, 8,   5, 0, 9,   4, 6, 1,
])
# fmt: on

_MUTATION = np.random.default_rng(3)


def _square_indices(i: int) -> np.ndarray:
    return np.array([(i % 3) * 3 + ((i // 3) % 3) * 27 + 9 * (j // 3) + j % 3 for j in range(9)])


class SudokuUnit:
    def __init__(self, puzzle: np.ndarray, answer: np.ndarray) -> None:
        self.puzzle = puzzle
        self.answer = answer

    @property
    def blanks(self) -> np.ndarray:
        return np.flatnonzero(self.puzzle == 0)

    def fitness(self) -> float:
        grid = self.answer.reshape(9, 9)
        missing = 0
        for i in range(9):
            for group in (grid[i, :], grid[:, i], self.answer[_square_indices(i)]):
                missing += 9 - np.unique(group).size
        return 0.9**missing

    def breed_with(self, other: "SudokuUnit") -> "SudokuUnit":
        answer = self.answer.copy()
        blanks = self.blanks
        from_other = blanks[_MUTATION.random(blanks.size) < 0.5]
        answer[from_other] = other.answer[from_other]
        answer[_MUTATION.choice(blanks)] = _MUTATION.integers(1, 10)
        return SudokuUnit(self.puzzle, answer)


def random_units(n: int, seed: int = 0) -> list[SudokuUnit]:
    rng = np.random.default_rng(seed)
    units = []
    for _ in range(n):
        answer = PUZZLE.copy()
        blanks = answer == 0
        answer[blanks] = rng.integers(1, 10, size=int(blanks.sum()))
        units.append(SudokuUnit(PUZZLE, answer))
    return units


def main():
    parser = argparse.ArgumentParser(description="Solve a sudoku with genepool.")
    parser.add_argument("--size", type=int, default=300)
    parser.add_argument("--epochs", type=int, default=2000)
    parser.add_argument("--workers", type=int, default=0, help="Evaluate on N threads (0: sequential).")
    args = parser.parse_args()

    configure_genepool_logging()
    population = (
        Population(random_units(args.size))
        .set_size(args.size)
        .set_breed_factor(0.3)
        .set_survival_factor(1.0)
    )
    if args.workers > 0:
        population.epochs_parallel(args.epochs, args.workers)
    else:
        population.epochs(args.epochs)

    best = population.finish()[0]
    print(f"fitness = {best.fitness():.4f}")
    print(best.answer.reshape(9, 9))


if __name__ == "__main__":
    main()
