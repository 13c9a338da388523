"""
当番ローテーションエンジン

日付とシフトから当番ユニット (1, 2, 3) を決定します。

ローテーションは基準日 (2026-02-22, 日曜日) を起点とする21日周期で、
7日ごとの3つの週フェーズに分かれます。各日のオフセットは
曜日グループ（日月土 / 火水 / 木金）と週フェーズの組で決まり、
シフト位置（昼=0, 朝=1, 夜=2）を加えた値の mod 3 がユニットになります。
"""

import logging
from typing import Dict, Optional

from models.duty_models import (
    CalendarDate, ShiftSlot, MiddayVariant, DayBlock,
    ShiftTime, RotationCycle, create_default_shift_times
)
from .calendar_adapter import DateLike, parse_date, weekday_of, days_between

logger = logging.getLogger(__name__)

CYCLE_ANCHOR = CalendarDate(2026, 2, 22)
DEFAULT_CYCLE = RotationCycle(anchor=CYCLE_ANCHOR)

# 日曜・火曜・木曜は昼シフトが遅い時間帯
LATE_MIDDAY_WEEKDAYS = {0, 2, 4}

# 0=日 ... 6=土。土曜日は日月と同じグループ
WEEKDAY_BLOCKS = {
    0: DayBlock.A,
    1: DayBlock.A,
    2: DayBlock.B,
    3: DayBlock.B,
    4: DayBlock.C,
    5: DayBlock.C,
    6: DayBlock.A,
}

# (曜日グループ, 週フェーズ) -> オフセット
#   A: (2W) mod 3,  B: (2 - W) mod 3,  C: (1 - W) mod 3
ROTATION_TABLE = {
    (DayBlock.A, 0): 0, (DayBlock.A, 1): 2, (DayBlock.A, 2): 1,
    (DayBlock.B, 0): 2, (DayBlock.B, 1): 1, (DayBlock.B, 2): 0,
    (DayBlock.C, 0): 1, (DayBlock.C, 1): 0, (DayBlock.C, 2): 2,
}

SHIFT_POSITIONS = {
    ShiftSlot.MIDDAY: 0,
    ShiftSlot.MORNING: 1,
    ShiftSlot.NIGHT: 2,
}

UNIT_COUNT = 3


class RotationEngine:
    """当番ローテーションの計算クラス"""

    def __init__(self, cycle: RotationCycle = DEFAULT_CYCLE,
                 shift_times: Optional[Dict[str, ShiftTime]] = None):
        self.cycle = cycle
        self.shift_times = shift_times or create_default_shift_times()

    def normalize_offset(self, raw_offset: int) -> int:
        """基準日からの日数を [0, 周期長) に正規化"""
        return raw_offset % self.cycle.cycle_length

    def week_phase(self, value: DateLike) -> int:
        """週フェーズ (0, 1, 2) を取得"""
        raw_offset = days_between(self.cycle.anchor, value)
        normalized = self.normalize_offset(raw_offset)
        return (normalized // self.cycle.week_length) % self.cycle.phase_count

    def unit_on_duty(self, value: DateLike, shift) -> int:
        """
        指定日・指定シフトの当番ユニットを取得

        Args:
            value: 日付 (CalendarDate / datetime.date / YYYY-MM-DD)
            shift: シフト (ShiftSlot または識別子文字列)

        Returns:
            ユニット番号 (1〜3)
        """
        cal_date = parse_date(value)
        slot = ShiftSlot.from_value(shift)

        phase = self.week_phase(cal_date)
        block = day_block(cal_date)
        offset = block_offset(block, phase)
        unit = ((offset + SHIFT_POSITIONS[slot]) % UNIT_COUNT) + 1

        logger.debug(
            f"{cal_date} {slot.value}: フェーズ={phase} グループ={block.value} "
            f"オフセット={offset} -> ユニット{unit}"
        )
        return unit

    def units_for_day(self, value: DateLike) -> Dict[ShiftSlot, int]:
        """1日の全シフトの当番ユニットを取得"""
        cal_date = parse_date(value)
        return {slot: self.unit_on_duty(cal_date, slot) for slot in ShiftSlot}

    def shift_time_for(self, value: DateLike, shift) -> ShiftTime:
        """指定日のシフトの表示用時刻情報を取得"""
        slot = ShiftSlot.from_value(shift)
        if slot is ShiftSlot.MIDDAY:
            return self.shift_times[f"midday_{midday_variant(value).value}"]
        return self.shift_times[slot.value]


def midday_variant(value: DateLike) -> MiddayVariant:
    """昼シフトの時間帯バリエーションを取得（日・火・木は遅番）"""
    if weekday_of(value) in LATE_MIDDAY_WEEKDAYS:
        return MiddayVariant.LATE
    return MiddayVariant.EARLY


def day_block(value: DateLike) -> DayBlock:
    """曜日グループを取得"""
    return WEEKDAY_BLOCKS[weekday_of(value)]


def block_offset(block: DayBlock, phase: int) -> int:
    """曜日グループと週フェーズからオフセットを取得"""
    return ROTATION_TABLE[(block, phase)]


_default_engine = RotationEngine()


def unit_on_duty(value: DateLike, shift, cycle: Optional[RotationCycle] = None) -> int:
    """当番ユニットを取得（デフォルト周期）"""
    engine = _default_engine if cycle is None else RotationEngine(cycle)
    return engine.unit_on_duty(value, shift)


def week_phase(value: DateLike, cycle: Optional[RotationCycle] = None) -> int:
    """週フェーズを取得（デフォルト周期）"""
    engine = _default_engine if cycle is None else RotationEngine(cycle)
    return engine.week_phase(value)


def normalize_offset(raw_offset: int) -> int:
    return _default_engine.normalize_offset(raw_offset)


def units_for_day(value: DateLike) -> Dict[ShiftSlot, int]:
    return _default_engine.units_for_day(value)


def shift_time_for(value: DateLike, shift) -> ShiftTime:
    return _default_engine.shift_time_for(value, shift)
