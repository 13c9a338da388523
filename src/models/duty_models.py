"""
当番ローテーション用のデータ構造とクラス定義

このモジュールは、3つの当番ユニット（יח"ס）が21日周期で
朝・昼・夜のシフトを交代する当番表の基盤となる値オブジェクトを提供します。
"""

from typing import ClassVar, Dict, Union
from dataclasses import dataclass
from datetime import date, time
from enum import Enum

from .errors import UnknownShiftSlot


@dataclass(frozen=True, order=True)
class CalendarDate:
    """時刻を持たない日付 (年, 月, 日)"""
    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, value: date) -> 'CalendarDate':
        """datetime.date から作成"""
        return cls(value.year, value.month, value.day)

    def to_date(self) -> date:
        """datetime.date に変換"""
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        """正規形 YYYY-MM-DD を返す"""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


class ShiftSlot(Enum):
    """シフトの定義"""
    MORNING = "morning"  # 朝シフト (07:00-)
    MIDDAY = "midday"    # 昼シフト (14:00- / 15:00-)
    NIGHT = "night"      # 夜シフト (21:00-)

    @classmethod
    def from_value(cls, value: Union['ShiftSlot', str]) -> 'ShiftSlot':
        """識別子文字列またはShiftSlotからShiftSlotを取得"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            # 旧画面の識別子
            if key == "noon":
                return cls.MIDDAY
            for slot in cls:
                if slot.value == key:
                    return slot
        raise UnknownShiftSlot(value)


class MiddayVariant(Enum):
    """昼シフトの時間帯バリエーション"""
    EARLY = "early"  # 説明 13:30 / 開始 14:00
    LATE = "late"    # 説明 14:30 / 開始 15:00


class DayBlock(Enum):
    """曜日グループ（オフセット算出式の選択に使用）"""
    A = "A"  # 日・月・土
    B = "B"  # 火・水
    C = "C"  # 木・金


@dataclass(frozen=True)
class ShiftTime:
    """シフトの表示用時刻情報"""
    name: str
    briefing: time
    start: time
    icon: str = ""

    @property
    def label(self) -> str:
        """ブリーフィング時刻と開始時刻のラベル"""
        return f"תדריך {self.briefing:%H:%M} | תחילת משמרת {self.start:%H:%M}"


@dataclass(frozen=True)
class RotationCycle:
    """ローテーション周期の定義（7日 x 3フェーズ = 21日固定、基準日のみ指定可能）"""
    anchor: CalendarDate

    # 曜日グループとオフセット表はこの形にのみ対応する
    week_length: ClassVar[int] = 7
    phase_count: ClassVar[int] = 3

    @property
    def cycle_length(self) -> int:
        """1周期の日数"""
        return self.week_length * self.phase_count


@dataclass(frozen=True)
class DayRecord:
    """1日分の当番情報"""
    weekday_label: str
    date: CalendarDate
    display_date: str
    morning: int
    midday: int
    night: int
    midday_time: str
    midday_variant: MiddayVariant

    def unit_for(self, shift: Union[ShiftSlot, str]) -> int:
        """指定シフトの当番ユニットを取得"""
        return getattr(self, ShiftSlot.from_value(shift).value)


def create_default_shift_times() -> Dict[str, ShiftTime]:
    """デフォルトのシフト時刻設定を作成"""
    shift_times = {
        "morning": ShiftTime("משמרת בוקר", time(6, 30), time(7, 0), "🌅"),
        "midday_early": ShiftTime("משמרת צהריים", time(13, 30), time(14, 0), "☀️"),
        "midday_late": ShiftTime("משמרת צהריים", time(14, 30), time(15, 0), "☀️"),
        "night": ShiftTime("משמרת לילה", time(20, 30), time(21, 0), "🌙"),
    }
    return shift_times
