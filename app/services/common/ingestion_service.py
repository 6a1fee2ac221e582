import logging
import math

from app.common.constants import CHARS_PER_PAGE
from app.common.decorators import measure_time
from app.common.exception.custom_exception import CommonException
from app.common.exception.error_code import ErrorCode
from app.schemas.document import IngestionOutput, DocumentMetadata, SourceType
from app.services.common.pdf_service import load_pdf
from app.services.common.text_processing_service import clean_text


@measure_time
def ingest_pdf(pdf_bytes: bytes) -> IngestionOutput:
  documents, page_count = load_pdf(pdf_bytes)
  full_text = "\n".join(doc.page_content for doc in documents)

  cleaned = clean_text(full_text)
  if not cleaned:
    raise CommonException(ErrorCode.NO_TEXTS_EXTRACTED)

  logging.info(
      f"[ingest_pdf]: {page_count} pages, {len(cleaned)} characters after cleaning")
  return IngestionOutput(
      cleaned_text=cleaned,
      metadata=DocumentMetadata(page_count=max(page_count, 1),
                                source_type=SourceType.PDF)
  )


@measure_time
def ingest_text(raw_text: str) -> IngestionOutput:
  if not raw_text or not raw_text.strip():
    raise CommonException(ErrorCode.EMPTY_TEXT_INPUT)

  cleaned = clean_text(raw_text)
  if not cleaned:
    raise CommonException(ErrorCode.NO_TEXTS_EXTRACTED)

  # pasted text has no pages; estimate from length
  approximate_pages = max(1, math.ceil(len(cleaned) / CHARS_PER_PAGE))

  logging.info(f"[ingest_text]: {len(cleaned)} characters after cleaning")
  return IngestionOutput(
      cleaned_text=cleaned,
      metadata=DocumentMetadata(page_count=approximate_pages,
                                source_type=SourceType.TEXT)
  )
