import logging
import traceback

from pydantic import ValidationError
from werkzeug.exceptions import NotFound, RequestEntityTooLarge

from app.blueprints.contract.contract_exception import ContractException
from app.common.exception.custom_exception import CommonException
from app.common.exception.error_code import ErrorCode
from app.schemas.error_response import ErrorResponse

logger = logging.getLogger(__name__)


def register_error_handlers(app):

  @app.errorhandler(NotFound)
  def handle_not_found_error(e: NotFound):
    logger.error(f"[NotFound]: {str(e)}")
    return ErrorResponse.from_error_code(ErrorCode.URL_NOT_FOUND).of()

  @app.errorhandler(RequestEntityTooLarge)
  def handle_request_too_large(e: RequestEntityTooLarge):
    logger.error(f"[RequestEntityTooLarge]: {str(e)}")
    return ErrorResponse.from_error_code(ErrorCode.FILE_TOO_LARGE).of()

  @app.errorhandler(ValidationError)
  def handle_validation_error(e: ValidationError):
    logger.error(f"[ValidationError]: {str(e)}\n{traceback.format_exc()}")
    return ErrorResponse.from_error_code(ErrorCode.REQUEST_UNMATCH).of()

  @app.errorhandler(ContractException)
  def handle_contract_exception(e: ContractException):
    logger.error(f"[ContractException]: {str(e)}\n{traceback.format_exc()}")
    return ErrorResponse.from_exception(e).of()

  @app.errorhandler(CommonException)
  def handle_common_exception(e: CommonException):
    logger.error(f"[CommonException]: {str(e)}\n{traceback.format_exc()}")
    return ErrorResponse.from_exception(e).of()

  @app.errorhandler(Exception)
  def handle_unexpected_exception(e: Exception):
    logger.error(f"[Exception]: {str(e)}\n{traceback.format_exc()}")
    return ErrorResponse.from_error_code(ErrorCode.INTERNAL_SERVER_ERROR).of()
