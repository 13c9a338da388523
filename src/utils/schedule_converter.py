"""
スケジュール変換モジュール

週間当番レコードを表示用・CSV出力用のDataFrameに変換する機能を提供します。
"""

import pandas as pd
from io import StringIO
from typing import List

from models.duty_models import DayRecord
from .constants import SHIFT_ORDER, SHIFT_ROW_LABELS, UNIT_LABEL, WEEK_CSV_COLUMNS


def day_column_label(record: DayRecord) -> str:
    """週表の列見出し（曜日 + 短い日付）"""
    return f"{record.weekday_label} {record.display_date}"


def convert_week_to_dataframe(records: List[DayRecord]) -> pd.DataFrame:
    """
    週間レコードをシフト別の表に変換

    Args:
        records: 1日分のレコードのリスト

    Returns:
        シフトを行、日を列、ユニット番号を値とするDataFrame
    """
    columns = [day_column_label(record) for record in records]
    week_table = pd.DataFrame(
        index=pd.Index([SHIFT_ROW_LABELS[shift] for shift in SHIFT_ORDER], name="shift"),
        columns=pd.Index(columns, name="day")
    )

    for shift in SHIFT_ORDER:
        row_label = SHIFT_ROW_LABELS[shift]
        for column, record in zip(columns, records):
            week_table.loc[row_label, column] = record.unit_for(shift)

    return week_table.astype(int)


def convert_week_to_display_dataframe(records: List[DayRecord]) -> pd.DataFrame:
    """
    週間レコードを表示用の表に変換

    convert_week_to_dataframe と同じ形で、セルは「יח"ס N」の文字列。
    昼シフトのセルにはその日の昼シフト時刻を併記します。
    """
    week_table = convert_week_to_dataframe(records)
    display_table = week_table.map(lambda unit: f"{UNIT_LABEL} {unit}")

    midday_row = SHIFT_ROW_LABELS["midday"]
    for column, record in zip(display_table.columns, records):
        display_table.loc[midday_row, column] += f" · {record.midday_time}"

    return display_table


def convert_week_to_records_dataframe(records: List[DayRecord]) -> pd.DataFrame:
    """
    週間レコードを1日1行の表に変換

    Returns:
        date, weekday, morning, midday, night, midday_time 列のDataFrame
    """
    rows = []
    for record in records:
        rows.append({
            "date": record.date.isoformat(),
            "weekday": record.weekday_label,
            "morning": record.morning,
            "midday": record.midday,
            "night": record.night,
            "midday_time": record.midday_time
        })

    return pd.DataFrame(rows, columns=WEEK_CSV_COLUMNS)


def week_to_csv(records: List[DayRecord]) -> str:
    """週間レコードをCSV文字列に変換"""
    csv_data = StringIO()
    convert_week_to_records_dataframe(records).to_csv(csv_data, index=False)
    return csv_data.getvalue()
