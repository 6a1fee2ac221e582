import asyncio
import logging
from typing import Callable, Coroutine, Any, Optional

from app.common.constants import MAX_RETRIES, LLM_TIMEOUT, RETRY_BASE_DELAY, \
  RETRY_MAX_DELAY, RETRYABLE_STATUS_CODES, RATE_LIMIT_KEYWORDS, \
  SERVER_ERROR_KEYWORDS
from app.common.exception.custom_exception import CommonException, \
  BaseCustomException
from app.common.exception.error_code import ErrorCode


def extract_status_code(error: Exception) -> Optional[int]:
  status = getattr(error, "status_code", None)
  if status is None:
    status = getattr(error, "status", None)
  return status if isinstance(status, int) else None


def is_rate_limit_error(error: Exception) -> bool:
  if extract_status_code(error) == 429:
    return True
  message = str(error).lower()
  return any(keyword in message for keyword in RATE_LIMIT_KEYWORDS)


def is_retryable_error(error: Exception) -> bool:
  if isinstance(error, BaseCustomException):
    return False
  if extract_status_code(error) in RETRYABLE_STATUS_CODES:
    return True
  message = str(error).lower()
  return is_rate_limit_error(error) or any(
      keyword in message for keyword in SERVER_ERROR_KEYWORDS)


def backoff_delay(attempt: int) -> float:
  return min(RETRY_BASE_DELAY * (2 ** attempt), RETRY_MAX_DELAY)


async def retry_llm_call(
    func: Callable[..., Coroutine[Any, Any, Any]], *args) -> Any:
  """Await func(*args), retrying transient failures with exponential backoff.

  Rate-limit and server errors (429/500/503) and per-attempt timeouts are
  retried up to MAX_RETRIES times. Anything else, including malformed model
  output raised as a BaseCustomException, fails on the first attempt.
  """
  for attempt in range(MAX_RETRIES + 1):
    try:
      return await asyncio.wait_for(func(*args), timeout=LLM_TIMEOUT)

    except asyncio.TimeoutError:
      logging.warning(
          f"[retry_llm_call]: Timeout {attempt + 1}/{MAX_RETRIES + 1}")
      if attempt == MAX_RETRIES:
        raise CommonException(ErrorCode.LLM_RESPONSE_TIMEOUT)

    except BaseCustomException:
      raise

    except Exception as e:
      if not is_retryable_error(e):
        raise CommonException(ErrorCode.LLM_REQUEST_FAILED, str(e)) from e
      if attempt == MAX_RETRIES:
        if is_rate_limit_error(e):
          raise CommonException(ErrorCode.LLM_RATE_LIMITED) from e
        raise CommonException(ErrorCode.LLM_REQUEST_FAILED, str(e)) from e
      logging.warning(
          f"[retry_llm_call]: retrying {attempt + 1}/{MAX_RETRIES} after {backoff_delay(attempt)}s: {e}")

    await asyncio.sleep(backoff_delay(attempt))
