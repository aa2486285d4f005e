"""Pydantic models for API payloads."""

from typing import Any

from pydantic import BaseModel


class SubmitReadingRequest(BaseModel):
    """Reading submission payload.

    Fields are left untyped so that missing or mistyped values reach the
    submission service and are rejected with the tracker's own error body.
    """

    name: Any = None
    para: Any = None
