from enum import Enum
from http import HTTPStatus


class SuccessCode(Enum):
  ANALYSIS_COMPLETE = (HTTPStatus.OK, "S001", "Contract analysis complete")

  def __init__(self, status: HTTPStatus, code: str, message: str):
    self.status = status
    self.code = code
    self.message = message
