import random

import pytest

from mathcat.worksheet_uri import (
    decode_worksheet_from_uri,
    encode_worksheet_to_uri,
    generate_shareable_url,
)
from mathcat.worksheets import (
    build_generated_worksheet,
    generate_example_csv,
    parse_csv_to_worksheet,
)
from schemas.worksheets import SectionSettings

# ---------- CSV import ----------


def test_csv_with_header():
    csv = "section,operand1,operand2,difficulty\nTwo-Digit,12,3,easy\nTwo-Digit,45,7,medium"
    ws = parse_csv_to_worksheet(csv, "Test Worksheet", "Description")
    assert ws.title == "Test Worksheet"
    assert ws.description == "Description"
    assert len(ws.problems) == 2
    assert len(ws.sections) == 1
    assert ws.sections[0].title == "Two-Digit"
    assert len(ws.sections[0].problems) == 2


def test_csv_without_header():
    ws = parse_csv_to_worksheet("Two-Digit,12,3,easy\nTwo-Digit,45,7,medium", "T")
    assert len(ws.problems) == 2


def test_csv_sections_in_first_seen_order():
    csv = "section,operand1,operand2,difficulty\nEasy,12,3,easy\nHard,234,56,hard\nEasy,15,4,easy"
    ws = parse_csv_to_worksheet(csv, "T")
    assert [s.title for s in ws.sections] == ["Easy", "Hard"]
    assert [len(s.problems) for s in ws.sections] == [2, 1]
    # flat list follows section order
    assert [p.operands for p in ws.problems] == [(12, 3), (15, 4), (234, 56)]
    assert len({p.id for p in ws.problems}) == 3


def test_csv_answers_and_default_difficulty():
    ws = parse_csv_to_worksheet("section,operand1,operand2\nTest,12,3", "T")
    assert ws.problems[0].correct_answer == 36
    assert ws.problems[0].difficulty == "medium"


def test_csv_unknown_difficulty_falls_back_to_medium():
    ws = parse_csv_to_worksheet("Test,12,3,impossible", "T")
    assert ws.problems[0].difficulty == "medium"


def test_csv_skips_invalid_rows():
    csv = "section,operand1,operand2,difficulty\nTest,12,3,easy\nTest,invalid,7,medium\nTest,4\nTest,-2,5\nTest,0,9\n\nTest,45,8,hard"
    ws = parse_csv_to_worksheet(csv, "T")
    assert [p.operands for p in ws.problems] == [(12, 3), (45, 8)]


def test_csv_blank_section_gets_default_title():
    ws = parse_csv_to_worksheet(",12,3", "T")
    assert ws.sections[0].title == "Problems"


@pytest.mark.parametrize("csv", ["", "   \n  ", "section,operand1,operand2", "a,b,c\nx,y,z"])
def test_csv_without_problems_is_none(csv):
    assert parse_csv_to_worksheet(csv, "T") is None


def test_example_csv_parses():
    ws = parse_csv_to_worksheet(generate_example_csv(), "Example")
    assert len(ws.problems) == 8
    assert len(ws.sections) == 3


# ---------- Generated worksheets ----------


def test_generated_worksheet_sections_by_difficulty():
    ws = build_generated_worksheet(
        [{"difficulty": "hard", "count": 2}, {"difficulty": "easy", "count": 3}],
        rng=random.Random(8),
    )
    assert [s.id for s in ws.sections] == ["section-easy", "section-hard"]
    assert [s.title for s in ws.sections] == ["Easy (2×1 digit)", "Hard (3×2 digit)"]
    assert len(ws.problems) == 5
    assert ws.sections[1].settings.show_all_cells is True
    assert ws.sections[0].settings.show_placeholder_zeros is False
    assert ws.description == "5 multiplication problems across 2 difficulty levels"
    assert "classic-algorithm" in ws.settings.allowed_methods


def test_generated_worksheet_custom_section_settings():
    ws = build_generated_worksheet(
        [{"difficulty": "easy", "count": 1}],
        section_settings={"easy": SectionSettings(show_all_cells=True)},
    )
    assert ws.sections[0].settings.show_all_cells is True


def test_generated_worksheet_without_zeros():
    ws = build_generated_worksheet(
        [{"difficulty": "bonkers", "count": 20}], allow_zeros=False, rng=random.Random(2)
    )
    assert all("0" not in str(n) for p in ws.problems for n in p.operands)


def test_generated_worksheet_needs_problems():
    with pytest.raises(ValueError):
        build_generated_worksheet([{"difficulty": "easy", "count": 0}])


# ---------- Share links ----------


def test_share_code_is_url_safe_and_decodes():
    ws = parse_csv_to_worksheet(generate_example_csv(), "Example ✓", "with ünïcode")
    encoded = encode_worksheet_to_uri(ws)
    assert "=" not in encoded and "+" not in encoded and "/" not in encoded
    assert decode_worksheet_from_uri(encoded) == ws


@pytest.mark.parametrize("encoded", ["", "not-base64!!", "eyJmb28iOiAxfQ"])
def test_bad_share_codes_decode_to_none(encoded):
    # the last one is valid base64 for {"foo": 1}
    assert decode_worksheet_from_uri(encoded) is None


def test_shareable_url(monkeypatch):
    ws = parse_csv_to_worksheet("T,12,3", "T")
    url = generate_shareable_url(ws, "https://mathcat.example/")
    assert url.startswith("https://mathcat.example/worksheet/shared/")

    monkeypatch.setenv("MATHCAT_PUBLIC_URL", "http://localhost:3000")
    assert generate_shareable_url(ws).startswith("http://localhost:3000/worksheet/shared/")
