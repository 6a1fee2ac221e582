from pydantic import BaseModel


class ContractTextRequest(BaseModel):
  text: str
