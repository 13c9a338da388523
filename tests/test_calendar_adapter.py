#!/usr/bin/env python3
"""
カレンダーアダプターのユニットテスト

日付文字列の変換、曜日計算、日付加算、固定タイムゾーンでの今日の判定をテストします。
"""

import sys
import os
from datetime import date, datetime, timezone, timedelta
import pytest

# プロジェクトルートをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from algorithms.calendar_adapter import (
    today, parse_date, format_date, weekday_of, add_days, days_between,
    week_start_of, weekday_label, localized_label, short_display, HEBREW_DAYS
)
from models.duty_models import CalendarDate
from models.errors import InvalidDateFormat


class TestParseAndFormat:
    """parse_date / format_date のテスト"""

    def test_parse_canonical_text(self):
        """正規形の文字列を解析"""
        assert parse_date("2026-02-22") == CalendarDate(2026, 2, 22)

    def test_format_zero_pads(self):
        """ゼロ埋めされた正規形を出力"""
        assert format_date(CalendarDate(26, 3, 5)) == "0026-03-05"

    @pytest.mark.parametrize("text", ["2026-02-22", "2024-02-29", "0001-01-01", "9999-12-31"])
    def test_text_round_trip(self, text):
        """format(parse(text)) == text"""
        assert format_date(parse_date(text)) == text

    def test_value_round_trip(self):
        """parse(format(D)) == D"""
        cal_date = CalendarDate(2026, 12, 31)
        assert parse_date(format_date(cal_date)) == cal_date

    def test_accepts_date_objects(self):
        """datetime.date と CalendarDate をそのまま受け付ける"""
        assert parse_date(date(2026, 2, 22)) == CalendarDate(2026, 2, 22)
        cal_date = CalendarDate(2026, 2, 22)
        assert parse_date(cal_date) is cal_date

    @pytest.mark.parametrize("text", [
        "",
        "2026/02/22",
        "2026-02",
        "2026-02-22-01",
        "abcd-02-22",
        " 2026-02-22",
        "2026-13-01",
        "2026-02-30",
        "0000-01-01",
    ])
    def test_malformed_text(self, text):
        """不正な文字列は InvalidDateFormat"""
        with pytest.raises(InvalidDateFormat):
            parse_date(text)

    @pytest.mark.parametrize("value", [None, 20260222])
    def test_non_string_input(self, value):
        """文字列以外は InvalidDateFormat"""
        with pytest.raises(InvalidDateFormat):
            parse_date(value)

    def test_invalid_date_format_is_value_error(self):
        """InvalidDateFormat は ValueError として捕捉できる"""
        with pytest.raises(ValueError):
            parse_date("not-a-date")


class TestWeekday:
    """weekday_of のテスト"""

    @pytest.mark.parametrize("text,expected", [
        ("2026-02-22", 0),  # 日曜日
        ("2026-02-23", 1),
        ("2026-02-24", 2),
        ("2026-02-25", 3),
        ("2026-02-26", 4),
        ("2026-02-27", 5),
        ("2026-02-28", 6),  # 土曜日
        ("2026-10-18", 0),
        ("2000-01-01", 6),
    ])
    def test_weekday(self, text, expected):
        assert weekday_of(text) == expected

    def test_dst_transition_days(self):
        """夏時間切り替え日の前後でも曜日は連続する"""
        # イスラエルの夏時間開始 (2026-03-27) と終了 (2026-10-25)
        for start in ("2026-03-25", "2026-10-23"):
            weekdays = [weekday_of(add_days(start, i)) for i in range(5)]
            first = weekdays[0]
            assert weekdays == [(first + i) % 7 for i in range(5)]

    def test_weekday_label(self):
        """ヘブライ語の曜日名"""
        assert weekday_label("2026-02-22") == "ראשון"
        assert weekday_label("2026-02-28") == "שבת"
        assert len(HEBREW_DAYS) == 7


class TestAddDays:
    """add_days / days_between のテスト"""

    @pytest.mark.parametrize("start,days,expected", [
        ("2024-02-28", 1, "2024-02-29"),
        ("2024-02-28", 2, "2024-03-01"),
        ("2025-12-31", 1, "2026-01-01"),
        ("2026-01-01", -1, "2025-12-31"),
        ("2026-03-01", -1, "2026-02-28"),
        ("2026-02-22", 21, "2026-03-15"),
        ("2026-02-22", 0, "2026-02-22"),
    ])
    def test_add_days(self, start, days, expected):
        assert format_date(add_days(start, days)) == expected

    def test_days_between(self):
        assert days_between("2026-02-22", "2026-03-15") == 21
        assert days_between("2026-02-22", "2026-02-21") == -1
        assert days_between("2026-02-22", "2026-02-22") == 0

    def test_week_start_of(self):
        """週の開始（日曜日）"""
        assert week_start_of("2026-02-25") == CalendarDate(2026, 2, 22)
        assert week_start_of("2026-02-22") == CalendarDate(2026, 2, 22)
        assert week_start_of("2026-02-28") == CalendarDate(2026, 2, 22)
        assert week_start_of("2026-03-01") == CalendarDate(2026, 3, 1)


class TestToday:
    """today のテスト"""

    def test_winter_time_crosses_midnight(self):
        """冬時間 (UTC+2): UTC 23:30 はイスラエルの翌日"""
        now = datetime(2026, 3, 1, 23, 30, tzinfo=timezone.utc)
        assert today(now) == CalendarDate(2026, 3, 2)

    def test_summer_time_crosses_midnight(self):
        """夏時間 (UTC+3): UTC 21:30 はイスラエルの翌日"""
        now = datetime(2026, 7, 1, 21, 30, tzinfo=timezone.utc)
        assert today(now) == CalendarDate(2026, 7, 2)

    def test_summer_time_same_day(self):
        now = datetime(2026, 7, 1, 20, 30, tzinfo=timezone.utc)
        assert today(now) == CalendarDate(2026, 7, 1)

    def test_other_timezone_input(self):
        """他のタイムゾーンの時刻も固定タイムゾーンに変換される"""
        new_york = timezone(timedelta(hours=-5))
        now = datetime(2026, 1, 10, 19, 0, tzinfo=new_york)  # UTC 00:00 -> 02:00 IST
        assert today(now) == CalendarDate(2026, 1, 11)

    def test_naive_datetime_rejected(self):
        with pytest.raises(ValueError):
            today(datetime(2026, 3, 1, 12, 0))

    def test_current_date(self):
        """引数なしでも CalendarDate を返す"""
        assert isinstance(today(), CalendarDate)


class TestDisplayLabels:
    """表示用ラベルのテスト"""

    def test_localized_label(self):
        assert localized_label("2026-02-22") == "יום ראשון, 22 בפברואר 2026"

    def test_short_display(self):
        assert short_display("2026-02-22") == "22.2"
        assert short_display("2026-12-01") == "1.12"
