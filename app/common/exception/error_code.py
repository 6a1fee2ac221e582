from enum import Enum
from http import HTTPStatus


class ErrorCode(Enum):
  # global errors
  REQUEST_UNMATCH = (HTTPStatus.BAD_REQUEST, "G001", "Request body does not match the expected schema")
  URL_NOT_FOUND = (HTTPStatus.NOT_FOUND, "G002", "Requested url does not exist")
  INTERNAL_SERVER_ERROR = (HTTPStatus.INTERNAL_SERVER_ERROR, "G003", "Internal server error")

  # common errors
  FILE_FORMAT_INVALID = (HTTPStatus.BAD_REQUEST, "C006", "File is corrupted or cannot be decoded")
  INVALID_JSON_FORMAT = (HTTPStatus.BAD_REQUEST, "C008", "Request body is not valid JSON")
  FIELD_MISSING = (HTTPStatus.BAD_REQUEST, "C009", "Required JSON field is missing")
  NO_TEXTS_EXTRACTED = (HTTPStatus.BAD_REQUEST, "C016", "No text could be extracted from the document")
  PDF_LOAD_FAILED = (HTTPStatus.INTERNAL_SERVER_ERROR, "C017", "PDF ingestion failed")
  LLM_RESPONSE_TIMEOUT = (HTTPStatus.INTERNAL_SERVER_ERROR, "C018", "AI model did not respond in time")
  LLM_RATE_LIMITED = (HTTPStatus.TOO_MANY_REQUESTS, "C019", "AI API rate limit reached. Please wait 1-2 minutes and try again")
  LLM_REQUEST_FAILED = (HTTPStatus.INTERNAL_SERVER_ERROR, "C020", "AI model request failed")
  LLM_EMPTY_RESPONSE = (HTTPStatus.INTERNAL_SERVER_ERROR, "C021", "Empty response from AI model")
  LLM_RESPONSE_PARSE_FAILED = (HTTPStatus.INTERNAL_SERVER_ERROR, "C022", "Failed to parse AI model response as JSON")
  LLM_SETTING_LOAD_FAIL = (HTTPStatus.INTERNAL_SERVER_ERROR, "C023", "LLM_API_KEY environment variable is not set")
  PIPELINE_TIMEOUT = (HTTPStatus.GATEWAY_TIMEOUT, "C024", "Contract analysis did not finish within the time limit")

  # contract errors
  CHUNKING_FAIL = (HTTPStatus.UNPROCESSABLE_ENTITY, "A001", "No meaningful clauses could be extracted from the document")
  NO_INPUT_PROVIDED = (HTTPStatus.BAD_REQUEST, "A002", "Please provide a PDF file or paste contract text")
  EMPTY_TEXT_INPUT = (HTTPStatus.BAD_REQUEST, "A003", "Empty text input provided")
  FILE_TOO_LARGE = (HTTPStatus.BAD_REQUEST, "A004", "File size exceeds the upload limit")
  UNSUPPORTED_FILE_TYPE = (HTTPStatus.BAD_REQUEST, "A008", "Unsupported file type")

  def __init__(self, status: HTTPStatus, code: str, message: str):
    self.status = status
    self.code = code
    self.message = message
