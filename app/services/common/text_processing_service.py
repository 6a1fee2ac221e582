import re
from collections import Counter
from typing import List, Set

from app.common.constants import REPEATED_LINE_MIN_LENGTH, \
  REPEATED_LINE_THRESHOLD, DIGIT_PLACEHOLDER

# Lines injected by PDF rendering, matched against the raw line
NOISE_PATTERNS = [
  re.compile(r'^\s*[-–—]{3,}\s*$'),
  re.compile(r'^\s*page\s+\d+\s*(?:of\s+\d+)?\s*$', re.IGNORECASE),
  re.compile(r'^\s*--\s*\d+\s+of\s+\d+\s*--\s*$'),
  re.compile(r'^\s*©.*$'),
  re.compile(r'^\s*\f\s*$'),
]

HORIZONTAL_WHITESPACE = re.compile(r'[^\S\n]+')
DIGIT_RUN = re.compile(r'\d+')


def is_noise_line(line: str) -> bool:
  return any(pattern.match(line) for pattern in NOISE_PATTERNS)


def normalize_whitespace(line: str) -> str:
  return HORIZONTAL_WHITESPACE.sub(" ", line).strip()


def normalize_digits(line: str) -> str:
  return DIGIT_RUN.sub(DIGIT_PLACEHOLDER, line)


def detect_repeated_lines(lines: List[str]) -> Set[str]:
  """Return lower-cased digit-normalised keys of lines repeated across pages.

  A line of more than REPEATED_LINE_MIN_LENGTH characters that occurs
  REPEATED_LINE_THRESHOLD or more times (digits ignored, so "Page 3 of 40"
  and "Page 4 of 40" share a key) is treated as a header or footer.
  """
  frequency = Counter(
      normalize_digits(line) for line in lines
      if len(line) > REPEATED_LINE_MIN_LENGTH
  )
  return {key.lower() for key, count in frequency.items()
          if count >= REPEATED_LINE_THRESHOLD}


def clean_text(raw_text: str) -> str:
  """Strip PDF noise and normalise whitespace.

  Applying it twice gives the same result as applying it once.
  """
  raw_lines = raw_text.split("\n")
  lines = [normalize_whitespace(line) for line in raw_lines]
  repeated = detect_repeated_lines(lines)

  cleaned_lines: List[str] = []
  for raw_line, line in zip(raw_lines, lines):
    if is_noise_line(raw_line) or normalize_digits(line).lower() in repeated:
      line = ""

    # one blank line at most between paragraphs
    if not line and (not cleaned_lines or not cleaned_lines[-1]):
      continue
    cleaned_lines.append(line)

  return "\n".join(cleaned_lines).strip()
