# mathcat/worksheets.py
"""
Assembling worksheets: from a teacher's CSV, or from generated problems grouped
into one section per difficulty.

CSV format (header optional, difficulty optional and defaulting to medium):

    section,operand1,operand2,difficulty
    Two-Digit by One-Digit,12,3,easy
    Two-Digit by Two-Digit,23,15,medium
"""

from __future__ import annotations

import csv
import io
import logging
import random
import time
from datetime import UTC, datetime
from typing import Dict, Iterable, List, Optional

from mathcat.generator import BatchLike, ProblemGenerator
from schemas.problems import DIFFICULTIES, GeneratorConfig, Problem
from schemas.worksheets import SectionSettings, Worksheet, WorksheetSection, WorksheetSettings

logger = logging.getLogger(__name__)

DEFAULT_SECTION_TITLE = "Problems"
DEFAULT_DIFFICULTY = "medium"
_HEADER_WORDS = ("section", "operand", "difficulty")

EXAMPLE_CSV = """section,operand1,operand2,difficulty
Two-Digit by One-Digit,12,3,easy
Two-Digit by One-Digit,45,7,medium
Two-Digit by One-Digit,78,9,hard
Two-Digit by Two-Digit,23,15,medium
Two-Digit by Two-Digit,34,28,hard
Two-Digit by Two-Digit,67,89,hard
Three-Digit by Two-Digit,234,56,hard
Three-Digit by Two-Digit,456,78,hard"""

DIFFICULTY_LABELS = {
    "easy": "Easy (2×1 digit)",
    "medium": "Medium (2×2 digit)",
    "hard": "Hard (3×2 digit)",
    "bonkers": "Bonkers (3×3+ digit)",
}

# bigger problems get the full grid and fixed placeholder zeros by default
DEFAULT_SECTION_SETTINGS: Dict[str, SectionSettings] = {
    "easy": SectionSettings(show_all_cells=False, show_placeholder_zeros=False),
    "medium": SectionSettings(show_all_cells=False, show_placeholder_zeros=False),
    "hard": SectionSettings(show_all_cells=True, show_placeholder_zeros=True),
    "bonkers": SectionSettings(show_all_cells=True, show_placeholder_zeros=True),
}


def _timestamp_ms() -> int:
    return int(time.time() * 1000)


def _parse_operand(raw: str) -> Optional[int]:
    try:
        n = int(raw)
    except ValueError:
        return None
    return n if n > 0 else None


def _looks_like_header(row: List[str]) -> bool:
    first = ",".join(row).lower()
    return any(word in first for word in _HEADER_WORDS)


def generate_example_csv() -> str:
    return EXAMPLE_CSV


def parse_csv_to_worksheet(
    csv_text: str, title: str, description: Optional[str] = None
) -> Optional[Worksheet]:
    rows = [r for r in csv.reader(io.StringIO(csv_text.strip())) if any(c.strip() for c in r)]
    if not rows:
        return None

    if _looks_like_header(rows[0]):
        rows = rows[1:]

    # section title -> [(a, b, difficulty)], in first-seen order
    grouped: Dict[str, List[tuple]] = {}
    for line_no, row in enumerate(rows, 1):
        parts = [p.strip() for p in row]
        if len(parts) < 3:
            logger.debug("csv row %s skipped: expected at least 3 columns", line_no)
            continue

        a, b = _parse_operand(parts[1]), _parse_operand(parts[2])
        if a is None or b is None:
            logger.debug("csv row %s skipped: operands %r, %r", line_no, parts[1], parts[2])
            continue

        difficulty = parts[3].lower() if len(parts) > 3 and parts[3] else DEFAULT_DIFFICULTY
        if difficulty not in DIFFICULTIES:
            difficulty = DEFAULT_DIFFICULTY

        grouped.setdefault(parts[0] or DEFAULT_SECTION_TITLE, []).append((a, b, difficulty))

    if not grouped:
        return None

    worksheet_id = f"worksheet-{_timestamp_ms()}"
    sections: List[WorksheetSection] = []
    counter = 0
    for section_title, section_rows in grouped.items():
        problems = []
        for a, b, difficulty in section_rows:
            counter += 1
            problems.append(
                Problem(
                    id=f"problem-{worksheet_id}-{counter}",
                    operation="multiplication",
                    operands=(a, b),
                    difficulty=difficulty,
                    correct_answer=a * b,
                )
            )
        sections.append(
            WorksheetSection(
                id=f"section-{worksheet_id}-{len(sections) + 1}",
                title=section_title,
                problems=problems,
            )
        )

    return Worksheet(
        id=worksheet_id,
        title=title,
        description=description,
        sections=sections,
        problems=[p for s in sections for p in s.problems],
        created_at=datetime.now(UTC),
        settings=WorksheetSettings(allowed_methods=["partial-products", "area-model"]),
    )


def build_generated_worksheet(
    batches: Iterable[BatchLike],
    allow_zeros: bool = True,
    settings: Optional[WorksheetSettings] = None,
    section_settings: Optional[Dict[str, SectionSettings]] = None,
    rng: Optional[random.Random] = None,
) -> Worksheet:
    generator = ProblemGenerator(rng)
    problems = generator.mixed("multiplication", batches, GeneratorConfig(allow_zeros=allow_zeros))
    if not problems:
        raise ValueError("Select at least one difficulty level with at least 1 problem")

    overrides = {**DEFAULT_SECTION_SETTINGS, **(section_settings or {})}
    sections = []
    for difficulty in DIFFICULTIES:
        section_problems = [p for p in problems if p.difficulty == difficulty]
        if section_problems:
            sections.append(
                WorksheetSection(
                    id=f"section-{difficulty}",
                    title=DIFFICULTY_LABELS[difficulty],
                    problems=section_problems,
                    settings=overrides.get(difficulty),
                )
            )

    return Worksheet(
        id=f"generated-{_timestamp_ms()}",
        title="Generated Multiplication Worksheet",
        description=(
            f"{len(problems)} multiplication problems across {len(sections)} difficulty levels"
        ),
        sections=sections,
        problems=problems,
        created_at=datetime.now(UTC),
        settings=settings
        or WorksheetSettings(
            allowed_methods=["partial-products", "area-model", "classic-algorithm"]
        ),
    )
