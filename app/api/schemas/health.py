"""Schemas para el endpoint de health."""
from typing import Literal
from pydantic import BaseModel


class HealthOut(BaseModel):
    status: Literal["ok"] = "ok"
    timestamp: str
