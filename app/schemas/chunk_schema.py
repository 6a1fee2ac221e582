from dataclasses import dataclass, field
from typing import List


@dataclass
class RawSection:
  title: str
  lines: List[str] = field(default_factory=list)
  is_annex: bool = False


@dataclass(frozen=True)
class ClauseChunk:
  clause_id: str
  clause_title: str
  clause_text: str


@dataclass
class ChunkingOutput:
  clauses: List[ClauseChunk]
