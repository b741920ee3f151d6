"""
Wire validation schemas using Pydantic for responses of the command service.

Raw JSON is validated here first, then handed to the domain ``from_dict``
constructors, so a malformed payload never reaches the Plan Store.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Optional


class CourseInput(BaseModel):
    """Schema for one course of a plan."""
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    workloadHours: float = Field(default=0, ge=0)
    priority: Optional[str] = None
    examDate: Optional[str] = None

    @field_validator('id')
    @classmethod
    def strip_id(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip()

    @field_validator('examDate', mode='before')
    @classmethod
    def normalize_exam_date(cls, v):
        """Accept ISO strings or [year, month, day] arrays."""
        if isinstance(v, (list, tuple)) and len(v) >= 3:
            y, m, d = v[:3]
            return f"{int(y):04d}-{int(m):02d}-{int(d):02d}"
        return v


class PlanInput(BaseModel):
    """Schema for the plan snapshot returned by GET /plan."""
    model_config = ConfigDict(extra="ignore")

    courses: List[CourseInput] = Field(default_factory=list)

    @field_validator('courses', mode='before')
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v


class UpdatedPlanInput(BaseModel):
    """Schema for the optional ``updatedPlan`` of a command result.

    Unlike PlanInput, a missing or null ``courses`` stays None so that
    "no courses sent" can be told apart from an empty list.
    """
    model_config = ConfigDict(extra="ignore")

    courses: Optional[List[CourseInput]] = None


class HistoryEntryInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    command: str = ""
    formattedTimestamp: str = ""


class CommandResultInput(BaseModel):
    """Schema for the POST /command response."""
    model_config = ConfigDict(extra="ignore")

    success: bool
    message: str = ""
    commandHistory: Optional[List[HistoryEntryInput]] = None
    schedule: Optional[Any] = None
    updatedPlan: Optional[UpdatedPlanInput] = None

    @field_validator('message', mode='before')
    @classmethod
    def none_message(cls, v):
        return "" if v is None else v


class SavedScheduleInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    path: str
    filename: str = ""
    timestamp: int = 0
    formattedDate: str = ""


class LoadResultInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool
    message: str = ""
    schedule: Optional[Any] = None

    @field_validator('message', mode='before')
    @classmethod
    def none_message(cls, v):
        return "" if v is None else v


class CommandRequest(BaseModel):
    """Body of POST /command (also used by the stub service)."""
    command: str


class LoadScheduleRequest(BaseModel):
    """Body of POST /schedules/load."""
    filepath: str
