from dataclasses import dataclass
from http import HTTPStatus

from flask import jsonify

from app.common.exception.custom_exception import BaseCustomException
from app.common.exception.error_code import ErrorCode


@dataclass
class ErrorResponse:
  code: str
  message: str
  status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

  @classmethod
  def from_error_code(cls, error_code: ErrorCode) -> "ErrorResponse":
    return cls(error_code.code, error_code.message, error_code.status)

  @classmethod
  def from_exception(cls, e: BaseCustomException) -> "ErrorResponse":
    return cls(e.code, str(e), e.status)

  def of(self):
    return jsonify({
      "code": self.code,
      "message": self.message
    }), self.status
