from dataclasses import asdict, is_dataclass, dataclass
from enum import Enum
from typing import Optional, Any

from flask import jsonify

from app.schemas.success_code import SuccessCode


@dataclass
class SuccessResponse:
  success: SuccessCode
  data: Optional[Any] = None

  def of(self):
    response_data = self._convert_data(self.data)

    return jsonify({
      "code": self.success.code,
      "message": self.success.message,
      "data": response_data if self.data else None
    })

  def _convert_data(self, data: Any) -> Any:
    if is_dataclass(data):
      return self._convert_data(asdict(data))
    elif isinstance(data, list):
      return [self._convert_data(item) for item in data]
    elif isinstance(data, dict):
      return {k: self._convert_data(v) for k, v in data.items()}
    elif isinstance(data, Enum):
      return data.value
    else:
      return data
