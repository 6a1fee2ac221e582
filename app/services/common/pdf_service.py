from typing import List, Tuple

import fitz

from app.common.exception.custom_exception import CommonException
from app.common.exception.error_code import ErrorCode
from app.schemas.document import PageDocument


def extract_fitz_document_from_pdf_bytes(pdf_bytes: bytes) -> fitz.Document:
  try:
    return fitz.open(stream=pdf_bytes, filetype="pdf")
  except Exception as e:
    raise CommonException(ErrorCode.PDF_LOAD_FAILED, str(e)) from e


def parse_pdf_to_documents(doc: fitz.Document) -> List[PageDocument]:
  documents: List[PageDocument] = []

  for page in doc:
    text = page.get_text("text").strip()

    if text:
      documents.append(PageDocument(
          page_content=text,
          page=page.number + 1
      ))

  return documents


def load_pdf(pdf_bytes: bytes) -> Tuple[List[PageDocument], int]:
  fitz_document = extract_fitz_document_from_pdf_bytes(pdf_bytes)
  try:
    documents = parse_pdf_to_documents(fitz_document)
    page_count = fitz_document.page_count
  except Exception as e:
    raise CommonException(ErrorCode.PDF_LOAD_FAILED, str(e)) from e
  finally:
    fitz_document.close()

  return documents, page_count
