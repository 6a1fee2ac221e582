from typing import Optional

from app.common.exception.error_code import ErrorCode


class BaseCustomException(Exception):

  def __init__(self, error_code: ErrorCode, detail: Optional[str] = None):
    message = f"{error_code.message}: {detail}" if detail else error_code.message
    super().__init__(message)
    self.error_code = error_code
    self.status = error_code.status
    self.code = error_code.code


class CommonException(BaseCustomException):
  pass
