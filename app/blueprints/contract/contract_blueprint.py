import os
from http import HTTPStatus

from flask import Blueprint, request

from app.blueprints.contract.contract_exception import ContractException
from app.common.decorators import parse_request
from app.common.exception.error_code import ErrorCode
from app.common.file_type import FileType
from app.schemas.analysis_response import AnalysisResult
from app.schemas.document_request import ContractTextRequest
from app.schemas.success_code import SuccessCode
from app.schemas.success_response import SuccessResponse
from app.services.common.ingestion_pipeline import analyze_pdf_contract, \
  analyze_text_contract
from config.app_config import AppConfig

contracts = Blueprint('contracts', __name__, url_prefix="/flask/contracts")


@contracts.route('/analysis', methods=['POST'])
def process_uploaded_contract():
  upload = request.files.get("file")
  payload = upload.read() if upload else b""
  text = request.form.get("text", "")

  if payload:
    if len(payload) > AppConfig.MAX_UPLOAD_BYTES:
      raise ContractException(ErrorCode.FILE_TOO_LARGE)

    file_type = extract_file_type(upload.filename)
    if file_type == FileType.PDF:
      result: AnalysisResult = analyze_pdf_contract(payload)
    else:
      result: AnalysisResult = analyze_text_contract(decode_text_file(payload))
  elif text.strip():
    result: AnalysisResult = analyze_text_contract(text)
  else:
    raise ContractException(ErrorCode.NO_INPUT_PROVIDED)

  return SuccessResponse(SuccessCode.ANALYSIS_COMPLETE, result).of(), HTTPStatus.OK


@contracts.route('/analysis/text', methods=['POST'])
@parse_request(ContractTextRequest)
def process_contract_text(text_request: ContractTextRequest):
  if not text_request.text.strip():
    raise ContractException(ErrorCode.EMPTY_TEXT_INPUT)

  result: AnalysisResult = analyze_text_contract(text_request.text)
  return SuccessResponse(SuccessCode.ANALYSIS_COMPLETE, result).of(), HTTPStatus.OK


def extract_file_type(filename: str) -> FileType:
  ext = os.path.splitext(filename or "")[1].lstrip(".").strip().upper()
  try:
    return FileType(ext)
  except ValueError:
    raise ContractException(ErrorCode.UNSUPPORTED_FILE_TYPE, ext or None)


def decode_text_file(payload: bytes) -> str:
  try:
    return payload.decode("utf-8-sig")
  except UnicodeDecodeError as e:
    raise ContractException(ErrorCode.FILE_FORMAT_INVALID, str(e)) from e
