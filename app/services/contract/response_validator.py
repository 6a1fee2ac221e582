"""Field validation for untrusted model output.

Every field the model returns goes through exactly one function here, which
either accepts the value or substitutes a fixed fallback.
"""
from typing import Any, Dict, List

from app.schemas.analysis_response import ClauseCategory, SeverityLevel, \
  AnalysedClause

DEFAULT_CATEGORY = ClauseCategory.OTHER
DEFAULT_SEVERITY = SeverityLevel.MEDIUM
DEFAULT_REASONING = "Unable to determine risk reasoning."
DEFAULT_RECOMMENDATION = "No specific recommendation generated."
DEFAULT_EXECUTIVE_SUMMARY = "Summary generation failed."


def validate_category(value: Any) -> ClauseCategory:
  if not isinstance(value, str):
    return DEFAULT_CATEGORY
  normalized = value.strip().lower()
  for category in ClauseCategory:
    if category.value.lower() == normalized:
      return category
  return DEFAULT_CATEGORY


def validate_severity(value: Any) -> SeverityLevel:
  if not isinstance(value, str):
    return DEFAULT_SEVERITY
  normalized = value.strip().capitalize()
  try:
    return SeverityLevel(normalized)
  except ValueError:
    return DEFAULT_SEVERITY


def validate_text(value: Any, fallback: str) -> str:
  if isinstance(value, str) and value.strip():
    return value.strip()
  return fallback


def validate_reasoning(value: Any) -> str:
  return validate_text(value, DEFAULT_REASONING)


def validate_recommendation(value: Any) -> str:
  return validate_text(value, DEFAULT_RECOMMENDATION)


def validate_executive_summary(value: Any) -> str:
  return validate_text(value, DEFAULT_EXECUTIVE_SUMMARY)


def validate_count(value: Any, fallback: int) -> int:
  # bool is an int subclass
  if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
    return value
  return fallback


def validate_string_list(value: Any) -> List[str]:
  if not isinstance(value, list):
    return []
  return [str(item) for item in value if item is not None]


def count_severities(clauses: List[AnalysedClause]) -> Dict[SeverityLevel, int]:
  counts = {severity: 0 for severity in SeverityLevel}
  for clause in clauses:
    counts[clause.severity] += 1
  return counts
