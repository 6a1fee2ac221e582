import logging
import re
from typing import List, Optional, Set

from app.common.constants import MIN_CLAUSE_TEXT_LENGTH, PREAMBLE_TITLE, \
  FULL_DOCUMENT_TITLE
from app.common.decorators import measure_time
from app.common.exception.custom_exception import CommonException
from app.common.exception.error_code import ErrorCode
from app.schemas.chunk_schema import RawSection, ClauseChunk, ChunkingOutput
from app.services.contract.chunk_regex import HEADING_REGEX, \
  HEADING_NUMBER_PREFIX, ANNEX_HEADING, HEADING_KEYWORD_PREFIX, \
  DASH_SEPARATOR, CLAUSE_NUMBER, TITLE_NUMBER_PREFIX, TITLE_DASH_PREFIX

HEADING_RULES = [
  (re.compile(rule["regex"], re.IGNORECASE if rule["ignore_case"] else 0),
   rule)
  for rule in HEADING_REGEX
]
ANNEX_PATTERN = re.compile(ANNEX_HEADING, re.IGNORECASE)
KEYWORD_PREFIX_PATTERN = re.compile(HEADING_KEYWORD_PREFIX, re.IGNORECASE)
BLANK_RUN = re.compile(r'\n{3,}')
WHITESPACE_RUN = re.compile(r'\s+')


def match_heading_rule(line: str) -> Optional[str]:
  for pattern, rule in HEADING_RULES:
    if not pattern.match(line):
      continue

    if "min_length" in rule:
      after_number = re.sub(HEADING_NUMBER_PREFIX, "", line)
      if not rule["min_length"] <= len(after_number) <= rule["max_length"]:
        continue

    return rule["name"]
  return None


def is_heading(line: str) -> bool:
  return match_heading_rule(line) is not None


def is_annex_heading(line: str) -> bool:
  return ANNEX_PATTERN.match(line) is not None


def extract_annex_designator(title: str) -> Optional[str]:
  match = ANNEX_PATTERN.search(title)
  return match.group(1) if match else None


def massage_heading(line: str) -> str:
  title = KEYWORD_PREFIX_PATTERN.sub("", line, count=1)
  return re.sub(DASH_SEPARATOR, " — ", title, count=1)


def detect_sections(cleaned_text: str) -> List[RawSection]:
  """Split cleaned text into sections at heading lines.

  Text before the first heading becomes a PREAMBLE AND PARTIES section when it
  has any content. A document without headings comes back as one FULL
  DOCUMENT section.
  """
  sections: List[RawSection] = []
  current: Optional[RawSection] = None
  preamble_lines: List[str] = []

  for line in cleaned_text.split("\n"):
    trimmed = line.strip()
    if not trimmed:
      if current:
        current.lines.append("")
      else:
        preamble_lines.append("")
      continue

    annex = is_annex_heading(trimmed)
    if is_heading(trimmed) or annex:
      if current:
        sections.append(current)
      elif any(preamble_lines):
        sections.append(RawSection(title=PREAMBLE_TITLE,
                                   lines=preamble_lines))

      current = RawSection(title=massage_heading(trimmed), is_annex=annex)
      continue

    if current:
      current.lines.append(trimmed)
    else:
      preamble_lines.append(trimmed)

  if current:
    sections.append(current)
  if not sections and any(preamble_lines):
    sections.append(RawSection(title=FULL_DOCUMENT_TITLE,
                               lines=preamble_lines))

  return sections


def clean_title(raw_title: str) -> str:
  title = re.sub(TITLE_NUMBER_PREFIX, "", raw_title)
  title = re.sub(TITLE_DASH_PREFIX, "", title)
  return WHITESPACE_RUN.sub(" ", title).strip()


def build_clause_id(index: int, section: RawSection) -> str:
  number_match = re.match(CLAUSE_NUMBER, section.title)
  if number_match:
    return f"clause-{number_match.group(1).lower()}"

  if section.is_annex:
    designator = extract_annex_designator(section.title) or str(index)
    return f"annex-{designator.lower()}"

  return f"section-{index + 1}"


def join_section_text(section: RawSection) -> str:
  return BLANK_RUN.sub("\n\n", "\n".join(section.lines)).strip()


def build_clauses(sections: List[RawSection]) -> List[ClauseChunk]:
  clauses: List[ClauseChunk] = []
  used_ids: Set[str] = set()

  for idx, section in enumerate(sections):
    text = join_section_text(section)
    if len(text) < MIN_CLAUSE_TEXT_LENGTH:
      logging.info(f"[build_clauses]: dropped short section '{section.title}'")
      continue

    clause_id = build_clause_id(idx, section)
    if clause_id in used_ids:
      clause_id = f"{clause_id}-{idx}"
    used_ids.add(clause_id)

    clauses.append(ClauseChunk(
        clause_id=clause_id,
        clause_title=clean_title(section.title) or section.title,
        clause_text=text
    ))

  return clauses


@measure_time
def chunk_contract(cleaned_text: str) -> ChunkingOutput:
  sections = detect_sections(cleaned_text)
  clauses = build_clauses(sections)

  if not clauses:
    raise CommonException(ErrorCode.CHUNKING_FAIL)

  logging.info(
      f"[chunk_contract]: {len(sections)} sections -> {len(clauses)} clauses")
  return ChunkingOutput(clauses=clauses)
