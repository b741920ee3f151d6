"""Course domain entity: subject id, workload hours, priority, optional exam date."""
from enum import Enum
from typing import Optional, Union


class Priority(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @staticmethod
    def parse(value) -> Union["Priority", str]:
        '''Map a wire value to a Priority; unknown values are kept as raw text.'''
        text = str(value or "").strip().upper()
        try:
            return Priority(text)
        except ValueError:
            return text


class Course:
    def __init__(self, id: str, workload_hours: float = 0, priority: Union[Priority, str] = Priority.MEDIUM,
                 exam_date: Optional[str] = None):
        self.id = id
        self.workload_hours = workload_hours
        self.priority = priority
        self.exam_date = exam_date

    @property
    def priority_name(self) -> str:
        return self.priority.value if isinstance(self.priority, Priority) else str(self.priority)

    def __str__(self) -> str:
        parts = [f"{self.id} - {self.workload_hours}h - {self.priority_name}"]
        if self.exam_date:
            parts.append(f"Exam: {self.exam_date}")
        return " - ".join(parts)

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(self.id)

    @staticmethod
    def from_dict(data):
        '''Creates a Course from its wire dictionary (camelCase keys). Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Course(
            id=str(d.get("id") or ""),
            workload_hours=d.get("workloadHours") or 0,
            priority=Priority.parse(d.get("priority")),
            exam_date=d.get("examDate") or None,
        )

    def to_dict(self):
        '''Converts the Course back to its wire dictionary.'''
        data = {
            "id": self.id,
            "workloadHours": self.workload_hours,
            "priority": self.priority_name,
        }
        if self.exam_date:
            data["examDate"] = self.exam_date
        return data
