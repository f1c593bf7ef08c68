from typing import Literal

from pydantic import BaseModel, Field

from standings.utils.misc import get_utc_iso_now


class APIResponse[T](BaseModel):
    status: Literal["success", "error"] = "success"
    data: T | None = None
    message: str | None = None
    timestamp: str = Field(default_factory=get_utc_iso_now)
