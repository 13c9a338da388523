"""
スケジュール構築モジュール

当番ローテーションエンジンの結果を1日分・1週間分のレコードにまとめます。
"""

import logging
from typing import List

from algorithms.calendar_adapter import (
    DateLike, parse_date, add_days, week_start_of, weekday_label, short_display
)
from algorithms.rotation_engine import RotationEngine, midday_variant
from models.duty_models import DayRecord, ShiftSlot

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7


def day_record(value: DateLike, engine: RotationEngine = None) -> DayRecord:
    """
    1日分の当番レコードを作成

    Args:
        value: 対象日
        engine: ローテーションエンジン（Noneの場合はデフォルト周期）

    Returns:
        曜日・日付・各シフトのユニット・昼シフト時刻を含むレコード
    """
    engine = engine or RotationEngine()
    cal_date = parse_date(value)
    units = engine.units_for_day(cal_date)

    return DayRecord(
        weekday_label=weekday_label(cal_date),
        date=cal_date,
        display_date=short_display(cal_date),
        morning=units[ShiftSlot.MORNING],
        midday=units[ShiftSlot.MIDDAY],
        night=units[ShiftSlot.NIGHT],
        midday_time=engine.shift_time_for(cal_date, ShiftSlot.MIDDAY).label,
        midday_variant=midday_variant(cal_date)
    )


def week_records(week_start: DateLike, engine: RotationEngine = None) -> List[DayRecord]:
    """
    week_start から7日分の当番レコードを作成

    週の開始が日曜日であることは検証しません。
    """
    engine = engine or RotationEngine()
    start = parse_date(week_start)
    records = [day_record(add_days(start, i), engine) for i in range(DAYS_PER_WEEK)]
    logger.debug(f"週間当番表を作成しました: {start} から {DAYS_PER_WEEK}日間")
    return records


def week_records_for(value: DateLike, engine: RotationEngine = None) -> List[DayRecord]:
    """指定日を含む週（日曜始まり）の当番レコードを作成"""
    return week_records(week_start_of(value), engine)
