from app.common.exception.custom_exception import BaseCustomException


class ContractException(BaseCustomException):
  pass
