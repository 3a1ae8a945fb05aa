"""Pydantic v2 schemas for the actionable-points endpoint.

Wire names are camelCase (`dueDate`, `actionablePoints`); attributes are
snake_case. Dump with `by_alias=True` to get the exact wire shape back.
Only structure and the two enumerations are checked here.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Priority = Literal['low', 'medium', 'high', 'urgent']
Status = Literal['pending', 'in-progress', 'completed', 'cancelled']


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ResponseModel(WireModel):
    # unknown server fields are kept so a dump reproduces the decoded body
    model_config = ConfigDict(extra="allow")


class ActionablePoint(ResponseModel):
    id: str
    title: str
    description: str
    priority: Priority
    category: str
    due_date: str = Field(..., alias='dueDate')
    assignee: str
    status: Status


class ActionablePointsResponse(ResponseModel):
    ok: bool
    actionable_points: List[ActionablePoint] = Field(..., alias='actionablePoints')


class ActionablePointsRequest(WireModel):
    transcription: str
    # None means "not supplied": the key is left out of the body entirely
    context: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


__all__ = [
    'Priority', 'Status',
    'ActionablePoint', 'ActionablePointsResponse', 'ActionablePointsRequest',
]
