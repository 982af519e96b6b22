from typing import Literal, Union
from pydantic import BaseModel

from models.summary import SummarizeResponse

class IdleState(BaseModel):
    kind: Literal["idle"] = "idle"

class LoadingState(BaseModel):
    kind: Literal["loading"] = "loading"

class ErrorState(BaseModel):
    kind: Literal["error"] = "error"
    message: str

class ResultState(BaseModel):
    kind: Literal["result"] = "result"
    result: SummarizeResponse

# Exactly one of these is active at a time
ViewState = Union[IdleState, LoadingState, ErrorState, ResultState]
