"""
Response payloads shared by the page-style endpoints.

Page endpoints do not render templates; they return a ViewModel naming the
view and carrying the data it would be rendered with. Handlers return
ViewModel or Redirect and the routers turn them into HTTP responses with
``to_response``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse, Response
from pydantic import BaseModel, Field


class ToastrMessage(BaseModel):
    """One-line notification shown to the user after a form submission."""
    type: str = Field(..., description="success, info, warning or error")
    message: str

    @classmethod
    def success(cls, message: str) -> "ToastrMessage":
        return cls(type="success", message=message)

    @classmethod
    def error(cls, message: str) -> "ToastrMessage":
        return cls(type="error", message=message)


class ViewModel(BaseModel):
    view: str
    model: Dict[str, Any] = Field(default_factory=dict)
    toastr: Optional[ToastrMessage] = None
    status_code: int = Field(default=status.HTTP_200_OK, exclude=True)


class GenericResponse(BaseModel):
    """Success flag plus optional message, used by AJAX-style endpoints."""
    success: bool
    message: Optional[str] = None
    data: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class Redirect:
    url: str


HandlerResult = Union[ViewModel, Redirect]


def to_response(result: HandlerResult) -> Response:
    """Map a handler result to a 303 redirect or a JSON view model."""
    if isinstance(result, Redirect):
        return RedirectResponse(url=result.url, status_code=status.HTTP_303_SEE_OTHER)
    return JSONResponse(
        content=jsonable_encoder(result.model_dump()),
        status_code=result.status_code,
    )
