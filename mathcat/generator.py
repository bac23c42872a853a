# mathcat/generator.py
"""
Randomized multiplication problems.

Every draw goes through a ``random.Random`` instance owned by a
``ProblemGenerator``, so callers (and tests) can pass a seeded one:

    gen = ProblemGenerator(random.Random(42))
    problem = gen.multiplication("hard")

The module-level functions build a throwaway generator around the ``rng`` they
are given (or a fresh, unseeded one).
"""

from __future__ import annotations

import logging
import random
import time
import uuid
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from schemas.problems import DifficultyBatch, GeneratorConfig, Problem

logger = logging.getLogger(__name__)

# (min digits, max digits) for multiplicand and multiplier
DIFFICULTY_DIGITS: Dict[str, Dict[str, Tuple[int, int]]] = {
    "easy": {"multiplicand": (2, 2), "multiplier": (1, 1)},  # 12 × 3
    "medium": {"multiplicand": (2, 2), "multiplier": (2, 2)},  # 12 × 34
    "hard": {"multiplicand": (3, 3), "multiplier": (2, 2)},  # 123 × 45
    "bonkers": {"multiplicand": (3, 4), "multiplier": (3, 3)},  # 1234 × 567
}

IMPLEMENTED_OPERATIONS = ("multiplication",)
PENDING_OPERATIONS = ("division", "fraction-decimal", "decimal-fraction")

# Per operand. A zero-free value exists in every digit range of the table, so
# this only trips on degenerate custom ranges such as [100, 100].
MAX_ROLL_ATTEMPTS = 1000

BatchLike = Union[DifficultyBatch, Mapping[str, object]]


class GeneratorExhaustedError(RuntimeError):
    pass


def _has_zero_digit(n: int) -> bool:
    return "0" in str(n)


def _new_problem_id() -> str:
    return f"gen-{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"


class ProblemGenerator:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    # ------------------------------------------------------------------ #
    # Number drawing
    # ------------------------------------------------------------------ #

    def _roll(self, low: int, high: int, allow_zeros: bool) -> int:
        for _ in range(MAX_ROLL_ATTEMPTS):
            n = self.rng.randint(low, high)
            if allow_zeros or not _has_zero_digit(n):
                return n
        logger.warning(
            "no zero-free operand in [%s, %s] after %s attempts", low, high, MAX_ROLL_ATTEMPTS
        )
        raise GeneratorExhaustedError(
            f"Could not draw an operand without zeros from [{low}, {high}] "
            f"after {MAX_ROLL_ATTEMPTS} attempts"
        )

    def number_with_digits(self, min_digits: int, max_digits: int, allow_zeros: bool = True) -> int:
        num_digits = self.rng.randint(min_digits, max_digits)
        return self._roll(10 ** (num_digits - 1), 10**num_digits - 1, allow_zeros)

    # ------------------------------------------------------------------ #
    # Problems
    # ------------------------------------------------------------------ #

    def multiplication(self, difficulty: str, config: Optional[GeneratorConfig] = None) -> Problem:
        config = config or GeneratorConfig()
        if difficulty not in DIFFICULTY_DIGITS:
            raise ValueError(f"Unknown difficulty: {difficulty}")

        if config.custom_range is not None:
            low, high = config.custom_range.min, config.custom_range.max
            multiplicand = self._roll(low, high, config.allow_zeros)
            multiplier = self._roll(low, high, config.allow_zeros)
        else:
            digits = DIFFICULTY_DIGITS[difficulty]
            multiplicand = self.number_with_digits(*digits["multiplicand"], config.allow_zeros)
            multiplier = self.number_with_digits(*digits["multiplier"], config.allow_zeros)

        return Problem(
            id=_new_problem_id(),
            operation="multiplication",
            operands=(multiplicand, multiplier),
            difficulty=difficulty,
            correct_answer=multiplicand * multiplier,
        )

    def many(
        self, count: int, difficulty: str, config: Optional[GeneratorConfig] = None
    ) -> List[Problem]:
        return [self.multiplication(difficulty, config) for _ in range(count)]

    def problem(
        self, operation: str, difficulty: str, config: Optional[GeneratorConfig] = None
    ) -> Problem:
        if operation == "multiplication":
            return self.multiplication(difficulty, config)
        if operation in PENDING_OPERATIONS:
            raise NotImplementedError(f"Problem generation for {operation} not yet implemented")
        raise ValueError(f"Unknown operation: {operation}")

    def mixed(
        self,
        operation: str,
        batches: Iterable[BatchLike],
        config: Optional[GeneratorConfig] = None,
    ) -> List[Problem]:
        problems: List[Problem] = []
        for batch in batches:
            if not isinstance(batch, DifficultyBatch):
                batch = DifficultyBatch.model_validate(batch)
            for _ in range(batch.count):
                problems.append(self.problem(operation, batch.difficulty, config))
        return problems


# Public API


def generate_multiplication_problem(
    difficulty: str,
    config: Optional[GeneratorConfig] = None,
    rng: Optional[random.Random] = None,
) -> Problem:
    return ProblemGenerator(rng).multiplication(difficulty, config)


def generate_multiplication_problems(
    count: int,
    difficulty: str,
    config: Optional[GeneratorConfig] = None,
    rng: Optional[random.Random] = None,
) -> List[Problem]:
    return ProblemGenerator(rng).many(count, difficulty, config)


def generate_problem(
    operation: str,
    difficulty: str,
    config: Optional[GeneratorConfig] = None,
    rng: Optional[random.Random] = None,
) -> Problem:
    return ProblemGenerator(rng).problem(operation, difficulty, config)


def generate_mixed_problems(
    operation: str,
    batches: Iterable[BatchLike],
    config: Optional[GeneratorConfig] = None,
    rng: Optional[random.Random] = None,
) -> List[Problem]:
    return ProblemGenerator(rng).mixed(operation, batches, config)
