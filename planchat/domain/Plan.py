"""Plan domain entity: immutable snapshot of the server's current subjects."""
from typing import Iterable, Optional
from planchat.domain.Course import Course


class Plan:
    def __init__(self, courses: Optional[Iterable[Course]] = None):
        # Snapshot is never edited in place; the store swaps whole plans
        self._courses = tuple(courses) if courses else ()

    @property
    def courses(self) -> tuple:
        return self._courses

    def is_empty(self) -> bool:
        return not self.courses

    def __len__(self) -> int:
        return len(self.courses)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Plan):
            return NotImplemented
        return self.courses == other.courses

    def __str__(self) -> str:
        courses_str = ",\n\t".join(str(c) for c in self.courses)
        return f"Plan ({len(self.courses)} subjects):\n\t{courses_str}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        return Plan(Course.from_dict(c) for c in (d.get("courses") or []))

    def to_dict(self):
        return {"courses": [c.to_dict() for c in self.courses]}
