from dataclasses import dataclass
from enum import Enum


class SourceType(str, Enum):
  PDF = "pdf"
  TEXT = "text"


@dataclass
class PageDocument:
  page_content: str
  page: int


@dataclass
class DocumentMetadata:
  page_count: int
  source_type: SourceType


@dataclass
class IngestionOutput:
  cleaned_text: str
  metadata: DocumentMetadata
