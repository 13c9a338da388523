"""
アルゴリズム層

カレンダー変換と当番ローテーションの計算を提供します。
"""

from .calendar_adapter import (
    ISRAEL_TIME_ZONE,
    today,
    parse_date,
    format_date,
    weekday_of,
    add_days,
    days_between,
    week_start_of,
    weekday_label,
    localized_label,
    short_display
)
from .rotation_engine import (
    RotationEngine,
    CYCLE_ANCHOR,
    DEFAULT_CYCLE,
    unit_on_duty,
    units_for_day,
    week_phase,
    normalize_offset,
    midday_variant,
    day_block,
    block_offset,
    shift_time_for
)

__all__ = [
    "ISRAEL_TIME_ZONE",
    "today",
    "parse_date",
    "format_date",
    "weekday_of",
    "add_days",
    "days_between",
    "week_start_of",
    "weekday_label",
    "localized_label",
    "short_display",
    "RotationEngine",
    "CYCLE_ANCHOR",
    "DEFAULT_CYCLE",
    "unit_on_duty",
    "units_for_day",
    "week_phase",
    "normalize_offset",
    "midday_variant",
    "day_block",
    "block_offset",
    "shift_time_for"
]
