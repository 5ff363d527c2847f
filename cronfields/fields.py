"""Field kinds of a standard cron expression and their numeric domains."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class FieldDomain:
    min_value: int
    max_value: int
    position: int
    name: str

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def values(self) -> list[int]:
        return list(range(self.min_value, self.max_value + 1))


class FieldKind(Enum):
    MINUTE = (0, 59, 0, "minute")
    HOUR = (0, 23, 1, "hour")
    DAY_OF_MONTH = (1, 31, 2, "day of month")
    MONTH = (1, 12, 3, "month")
    DAY_OF_WEEK = (0, 6, 4, "day of week")
    COMMAND = (None, None, 5, "command")

    def __init__(self, min_value: int | None, max_value: int | None, position: int, display_name: str):
        self.min_value = min_value
        self.max_value = max_value
        self.position = position
        self.display_name = display_name

    @property
    def is_time_field(self) -> bool:
        return self.min_value is not None

    @property
    def domain(self) -> FieldDomain | None:
        if not self.is_time_field:
            return None
        return FieldDomain(self.min_value, self.max_value, self.position, self.display_name)

    @classmethod
    def time_fields(cls) -> list["FieldKind"]:
        return [kind for kind in cls if kind.is_time_field]
