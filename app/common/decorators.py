import inspect
import logging
import time
from functools import wraps

from flask import request
from pydantic import ValidationError

from app.common.exception.custom_exception import CommonException
from app.common.exception.error_code import ErrorCode


def parse_request(model_cls):
  """Validate the JSON body against model_cls and pass the model in."""
  def decorator(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
      json_data = request.get_json(silent=True)
      if not isinstance(json_data, dict):
        raise CommonException(ErrorCode.INVALID_JSON_FORMAT)

      try:
        model_instance = model_cls(**json_data)
      except ValidationError as e:
        field_path = ".".join(str(part) for part in e.errors()[0]["loc"])
        raise CommonException(ErrorCode.FIELD_MISSING, field_path) from e
      return func(model_instance, *args, **kwargs)

    return wrapper

  return decorator


def log_elapsed(name: str, start_time: float):
  logging.info(f"[{name}] elapsed: {time.time() - start_time:.4f}s")


def measure_time(func):
  """Log wall time of a pipeline stage, sync or async."""
  if inspect.iscoroutinefunction(func):
    @wraps(func)
    async def async_wrapper(*args, **kwargs):
      start_time = time.time()
      try:
        return await func(*args, **kwargs)
      finally:
        log_elapsed(func.__name__, start_time)

    return async_wrapper

  @wraps(func)
  def wrapper(*args, **kwargs):
    start_time = time.time()
    try:
      return func(*args, **kwargs)
    finally:
      log_elapsed(func.__name__, start_time)

  return wrapper
