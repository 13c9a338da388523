#!/usr/bin/env python3
"""
スケジュール構築と変換のユニットテスト

1日分・1週間分のレコード作成と、DataFrame / CSV への変換をテストします。
"""

import sys
import os
import unittest
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

# プロジェクトルートをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from algorithms.calendar_adapter import HEBREW_DAYS, add_days
from models.duty_models import CalendarDate, MiddayVariant, DayRecord
from utils.schedule_builder import day_record, week_records, week_records_for
from utils.schedule_converter import (
    convert_week_to_dataframe, convert_week_to_display_dataframe,
    convert_week_to_records_dataframe, week_to_csv
)
from utils.constants import SHIFT_ROW_LABELS, WEEK_CSV_COLUMNS
from utils.ui_components import generate_filename


class TestDayRecord(unittest.TestCase):
    """day_record のテスト"""

    def test_anchor_record(self):
        """基準日のレコード"""
        record = day_record("2026-02-22")
        self.assertEqual(record.weekday_label, "ראשון")
        self.assertEqual(record.date, CalendarDate(2026, 2, 22))
        self.assertEqual(record.display_date, "22.2")
        self.assertEqual(record.morning, 2)
        self.assertEqual(record.midday, 1)
        self.assertEqual(record.night, 3)
        self.assertEqual(record.midday_variant, MiddayVariant.LATE)
        self.assertEqual(record.midday_time, "תדריך 14:30 | תחילת משמרת 15:00")

    def test_early_midday_record(self):
        record = day_record("2026-02-23")
        self.assertEqual(record.weekday_label, "שני")
        self.assertEqual(record.midday_variant, MiddayVariant.EARLY)
        self.assertEqual(record.midday_time, "תדריך 13:30 | תחילת משמרת 14:00")

    def test_unit_for(self):
        record = day_record("2026-02-24")
        self.assertEqual(record.unit_for("midday"), 3)
        self.assertEqual(record.unit_for("noon"), 3)
        self.assertEqual(record.unit_for("morning"), 1)
        self.assertEqual(record.unit_for("night"), 2)

    def test_record_is_immutable(self):
        record = day_record("2026-02-22")
        with self.assertRaises(AttributeError):
            record.morning = 3


class TestWeekRecords(unittest.TestCase):
    """week_records のテスト"""

    def test_seven_aligned_days(self):
        """日曜始まりの7日分"""
        records = week_records("2026-02-22")
        self.assertEqual(len(records), 7)
        self.assertEqual([r.weekday_label for r in records], HEBREW_DAYS)
        for i, record in enumerate(records):
            self.assertEqual(record.date, add_days("2026-02-22", i))
            self.assertIsInstance(record, DayRecord)

    def test_month_boundary(self):
        """月をまたぐ週"""
        records = week_records("2026-03-29")
        self.assertEqual(
            [r.date.isoformat() for r in records],
            ["2026-03-29", "2026-03-30", "2026-03-31",
             "2026-04-01", "2026-04-02", "2026-04-03", "2026-04-04"]
        )

    def test_unaligned_start_not_enforced(self):
        """日曜日以外の開始日もそのまま使う"""
        records = week_records("2026-02-26")
        self.assertEqual(records[0].weekday_label, "חמישי")
        self.assertEqual(records[0].date, CalendarDate(2026, 2, 26))

    def test_week_records_for(self):
        """指定日を含む週"""
        records = week_records_for("2026-02-25")
        self.assertEqual(records[0].date, CalendarDate(2026, 2, 22))
        self.assertEqual(records[-1].date, CalendarDate(2026, 2, 28))

    def test_records_match_day_record(self):
        records = week_records("2026-03-01")
        for record in records:
            self.assertEqual(record, day_record(record.date))


class TestScheduleConverter(unittest.TestCase):
    """週表の変換テスト"""

    def setUp(self):
        """テストデータの準備"""
        self.records = week_records("2026-02-22")

    def test_week_dataframe_shape(self):
        week_df = convert_week_to_dataframe(self.records)
        self.assertEqual(week_df.shape, (3, 7))
        self.assertEqual(list(week_df.index), list(SHIFT_ROW_LABELS.values()))
        self.assertEqual(week_df.columns[0], "ראשון 22.2")
        self.assertEqual(week_df.columns[-1], "שבת 28.2")

    def test_week_dataframe_values(self):
        week_df = convert_week_to_dataframe(self.records)
        self.assertEqual(week_df.loc[SHIFT_ROW_LABELS["midday"], "ראשון 22.2"], 1)
        self.assertEqual(week_df.loc[SHIFT_ROW_LABELS["morning"], "ראשון 22.2"], 2)
        self.assertEqual(week_df.loc[SHIFT_ROW_LABELS["night"], "ראשון 22.2"], 3)
        self.assertEqual(week_df.loc[SHIFT_ROW_LABELS["midday"], "שלישי 24.2"], 3)

    def test_each_day_column_has_all_units(self):
        week_df = convert_week_to_dataframe(self.records)
        for column in week_df.columns:
            self.assertEqual(sorted(week_df[column].tolist()), [1, 2, 3])

    def test_records_dataframe(self):
        records_df = convert_week_to_records_dataframe(self.records)
        self.assertEqual(list(records_df.columns), WEEK_CSV_COLUMNS)
        self.assertEqual(len(records_df), 7)
        self.assertEqual(records_df.iloc[0]["date"], "2026-02-22")
        self.assertEqual(records_df.iloc[0]["midday"], 1)

    def test_week_to_csv(self):
        lines = week_to_csv(self.records).splitlines()
        self.assertEqual(lines[0], ",".join(WEEK_CSV_COLUMNS))
        self.assertEqual(len(lines), 8)
        self.assertTrue(lines[1].startswith("2026-02-22,ראשון,2,1,3,"))

    def test_display_dataframe_midday_cells(self):
        """昼シフトのセルにその日の昼シフト時刻が入る"""
        display_df = convert_week_to_display_dataframe(self.records)
        self.assertEqual(display_df.shape, (3, 7))
        midday_row = SHIFT_ROW_LABELS["midday"]
        self.assertEqual(
            display_df.loc[midday_row, "ראשון 22.2"],
            'יח"ס 1 · תדריך 14:30 | תחילת משמרת 15:00'
        )
        self.assertEqual(
            display_df.loc[midday_row, "שני 23.2"],
            'יח"ס 1 · תדריך 13:30 | תחילת משמרת 14:00'
        )
        for column, record in zip(display_df.columns, self.records):
            self.assertIn(record.midday_time, display_df.loc[midday_row, column])

    def test_display_dataframe_other_cells(self):
        """朝・夜シフトのセルはユニットのみ"""
        display_df = convert_week_to_display_dataframe(self.records)
        self.assertEqual(display_df.loc[SHIFT_ROW_LABELS["morning"], "ראשון 22.2"], 'יח"ס 2')
        self.assertEqual(display_df.loc[SHIFT_ROW_LABELS["night"], "ראשון 22.2"], 'יח"ס 3')

    def test_generate_filename(self):
        filename = generate_filename("duty_week", CalendarDate(2026, 2, 22), datetime(2026, 2, 20, 9, 5))
        self.assertEqual(filename, "duty_week_20260222_20260220_0905.csv")

    def test_generate_filename_uses_israel_time(self):
        """タイムスタンプは Asia/Jerusalem の時刻"""
        now = datetime(2026, 3, 1, 23, 30, tzinfo=timezone.utc)  # IST 2026-03-02 01:30
        filename = generate_filename("duty_week", CalendarDate(2026, 3, 1), now)
        self.assertEqual(filename, "duty_week_20260301_20260302_0130.csv")

    def test_generate_filename_default_now(self):
        """引数なしでは Asia/Jerusalem の現在時刻を使う"""
        before = datetime.now(ZoneInfo("Asia/Jerusalem")).strftime("%Y%m%d")
        filename = generate_filename("duty_week", CalendarDate(2026, 3, 1))
        after = datetime.now(ZoneInfo("Asia/Jerusalem")).strftime("%Y%m%d")
        self.assertIn(filename.split("_")[3], {before, after})


if __name__ == "__main__":
    unittest.main()
