from __future__ import annotations

from enum import Enum


class ShiftType(str, Enum):
    """Loại ca làm việc. Giá trị được lưu nguyên văn."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    NIGHT = "night"
    DAY_OFF = "dayOff"


class LeaveType(str, Enum):
    """Loại nghỉ phép."""

    VACATION = "vacation"
    SICK = "sick"
    PERSONAL = "personal"
    UNPAID = "unpaid"


class LeaveStatus(str, Enum):
    """Trạng thái luồng duyệt nghỉ phép. PENDING là trạng thái khởi tạo."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not LeaveStatus.PENDING
