"""
モデル層

当番ローテーションの値オブジェクトと例外を提供します。
"""

from .duty_models import (
    CalendarDate,
    ShiftSlot,
    MiddayVariant,
    DayBlock,
    ShiftTime,
    RotationCycle,
    DayRecord,
    create_default_shift_times
)
from .errors import InvalidDateFormat, UnknownShiftSlot

__all__ = [
    "CalendarDate",
    "ShiftSlot",
    "MiddayVariant",
    "DayBlock",
    "ShiftTime",
    "RotationCycle",
    "DayRecord",
    "create_default_shift_times",
    "InvalidDateFormat",
    "UnknownShiftSlot"
]
