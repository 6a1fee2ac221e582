"""Clause enrichment chain and the final analysis result.

Each stage is its own immutable record and is migrated explicitly from the
previous one, copying the clause identity fields verbatim:

  ClauseChunk -> ClassifiedClause -> ScoredClause -> AnalysedClause
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from app.schemas.chunk_schema import ClauseChunk


class ClauseCategory(str, Enum):
  LIABILITY = "liability"
  IP = "IP"
  TERMINATION = "termination"
  PAYMENT = "payment"
  CHANGE_CONTROL = "change_control"
  CONFIDENTIALITY = "confidentiality"
  DATA_PROTECTION = "data_protection"
  INDEMNITY = "indemnity"
  WARRANTIES = "warranties"
  GOVERNING_LAW = "governing_law"
  INSURANCE = "insurance"
  OTHER = "other"


class SeverityLevel(str, Enum):
  HIGH = "High"
  MEDIUM = "Medium"
  LOW = "Low"


@dataclass(frozen=True)
class ClassifiedClause:
  clause_id: str
  clause_title: str
  clause_text: str
  category: ClauseCategory

  @classmethod
  def from_chunk(cls, chunk: ClauseChunk,
      category: ClauseCategory) -> "ClassifiedClause":
    return cls(clause_id=chunk.clause_id,
               clause_title=chunk.clause_title,
               clause_text=chunk.clause_text,
               category=category)


@dataclass(frozen=True)
class ScoredClause:
  clause_id: str
  clause_title: str
  clause_text: str
  category: ClauseCategory
  severity: SeverityLevel
  reasoning: str

  @classmethod
  def from_classified(cls, clause: ClassifiedClause, severity: SeverityLevel,
      reasoning: str) -> "ScoredClause":
    return cls(clause_id=clause.clause_id,
               clause_title=clause.clause_title,
               clause_text=clause.clause_text,
               category=clause.category,
               severity=severity,
               reasoning=reasoning)


@dataclass(frozen=True)
class AnalysedClause:
  clause_id: str
  clause_title: str
  clause_text: str
  category: ClauseCategory
  severity: SeverityLevel
  reasoning: str
  recommendation: str

  @classmethod
  def from_scored(cls, clause: ScoredClause,
      recommendation: str) -> "AnalysedClause":
    return cls(clause_id=clause.clause_id,
               clause_title=clause.clause_title,
               clause_text=clause.clause_text,
               category=clause.category,
               severity=clause.severity,
               reasoning=clause.reasoning,
               recommendation=recommendation)


@dataclass
class ExecutiveSummary:
  total_high: int = 0
  total_medium: int = 0
  total_low: int = 0
  key_red_flags: List[str] = field(default_factory=list)
  negotiation_priority: List[str] = field(default_factory=list)
  executive_summary: str = ""


@dataclass
class AnalysisResult:
  clauses: List[AnalysedClause] = field(default_factory=list)
  summary: ExecutiveSummary = field(default_factory=ExecutiveSummary)
