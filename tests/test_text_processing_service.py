"""Tests for noise filtering of extracted contract text."""
import pytest

from app.services.common.text_processing_service import clean_text, \
  detect_repeated_lines, is_noise_line, normalize_digits

BODY = [
  "The Supplier shall deliver the Services with reasonable skill and care.",
  "The Client shall provide access to its premises during business hours.",
  "Either party may terminate on ninety days written notice to the other.",
]


class TestNoiseLines:
  @pytest.mark.parametrize("line", [
    "---",
    "  —————  ",
    "Page 3",
    "PAGE 3 OF 40",
    "page 12 of 12",
    "-- 2 of 5 --",
    "© 2024 Acme Ltd. All rights reserved.",
    "\f",
  ])
  def test_fixed_noise_patterns(self, line: str) -> None:
    assert is_noise_line(line)

  @pytest.mark.parametrize("line", [
    "--",
    "Page three of the schedule sets out the fees.",
    "The fee is © protected",
    "1. DEFINITIONS",
  ])
  def test_content_is_not_noise(self, line: str) -> None:
    assert not is_noise_line(line)


class TestRepeatedLines:
  def test_digit_runs_collapse_to_one_key(self) -> None:
    assert normalize_digits("Page 3 of 40") == normalize_digits("Page 17 of 40")

  def test_three_occurrences_are_repeated(self) -> None:
    lines = ["Acme Ltd - Confidential"] * 3 + BODY
    assert detect_repeated_lines(lines) == {"acme ltd - confidential"}

  def test_two_occurrences_are_not_repeated(self) -> None:
    lines = ["Acme Ltd - Confidential"] * 2 + BODY
    assert detect_repeated_lines(lines) == set()

  def test_short_lines_are_ignored(self) -> None:
    assert detect_repeated_lines(["Signed:"] * 5) == set()


class TestCleanText:
  def test_page_markers_removed_body_intact(self) -> None:
    words = ["alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf",
             "hotel", "india", "juliet", "kilo", "lima"]
    body = [f"The {word} obligations apply to the Supplier." for word in words]
    parts = []
    for page, line in enumerate(body, start=1):
      parts.append(line)
      parts.append(f"Page {page} of 12")
    cleaned = clean_text("\n".join(parts))

    assert "Page" not in cleaned
    assert [line for line in cleaned.split("\n") if line] == body

  def test_repeated_header_with_varying_digits_removed(self) -> None:
    raw = "\n".join(
        f"MSA Ref 2024/{page:03d} - Acme Ltd\n{line}"
        for page, line in enumerate(BODY, start=1)
    )
    cleaned = clean_text(raw)

    assert "MSA Ref" not in cleaned
    assert [line for line in cleaned.split("\n") if line] == BODY

  def test_repeated_header_removed_case_insensitively(self) -> None:
    raw = "\n".join(["CONFIDENTIAL DRAFT v1"] * 3 + BODY + ["Confidential Draft v2"])
    cleaned = clean_text(raw)

    assert "confidential" not in cleaned.lower()
    assert [line for line in cleaned.split("\n") if line] == BODY

  def test_whitespace_normalised(self) -> None:
    raw = "  The   Client\tshall pay.   \n\n\n\n\nThe Supplier  shall   deliver.  "
    assert clean_text(raw) == "The Client shall pay.\n\nThe Supplier shall deliver."

  def test_blank_lines_left_by_noise_collapse(self) -> None:
    raw = "First paragraph.\n\n---\n\nPage 2\n\nSecond paragraph."
    assert clean_text(raw) == "First paragraph.\n\nSecond paragraph."

  def test_form_feed_lines_removed(self) -> None:
    assert clean_text("Clause text.\n\f\nMore text.") == "Clause text.\n\nMore text."

  def test_empty_input(self) -> None:
    assert clean_text("") == ""
    assert clean_text("Page 1 of 2\n---\n") == ""

  def test_no_line_has_surrounding_whitespace(self) -> None:
    cleaned = clean_text("  a line  \n\t\tanother line\t\n")
    assert all(line == line.strip() for line in cleaned.split("\n"))
    assert "\n\n\n" not in cleaned

  @pytest.mark.parametrize("raw", [
    "",
    "\n".join(["Header line  text 1", "Header line text 2",
               "Header  line text 3"] + BODY),
    "\n".join(["Acme Ltd - Confidential"] * 2 + ["Acme  Ltd - Confidential"] + BODY),
    "Title\n\n\n\n   \n\nBody   text\f here\r\n© notice\n-- 1 of 2 --\nEnd.",
    "\n".join(f"Page {n} of 3\n{BODY[n - 1]}" for n in range(1, 4)),
  ])
  def test_idempotent(self, raw: str) -> None:
    once = clean_text(raw)
    assert clean_text(once) == once
