"""
カレンダーアダプター

日付文字列 (YYYY-MM-DD) と固定タイムゾーン (Asia/Jerusalem) 上の
暦情報（年・月・日・曜日）との相互変換を提供します。

曜日計算と日付加算は時刻を持たない datetime.date 上で行うため、
実行マシンのタイムゾーンや夏時間の切り替えに影響されません。
タイムゾーンが関係するのは「今日」の判定 (today) のみです。
"""

import logging
from datetime import date, datetime, timedelta
from typing import Optional, Union
from zoneinfo import ZoneInfo

from models.duty_models import CalendarDate
from models.errors import InvalidDateFormat

logger = logging.getLogger(__name__)

ISRAEL_TIME_ZONE = "Asia/Jerusalem"

# 0 = 日曜日
HEBREW_DAYS = ["ראשון", "שני", "שלישי", "רביעי", "חמישי", "שישי", "שבת"]
HEBREW_MONTHS = [
    "ינואר", "פברואר", "מרץ", "אפריל", "מאי", "יוני",
    "יולי", "אוגוסט", "ספטמבר", "אוקטובר", "נובמבר", "דצמבר"
]

DateLike = Union[CalendarDate, date, str]


def today(now: Optional[datetime] = None) -> CalendarDate:
    """
    固定タイムゾーンにおける今日の日付を取得

    Args:
        now: 基準時刻（タイムゾーン付き）。Noneの場合は現在時刻

    Returns:
        Asia/Jerusalem における今日の日付
    """
    tz = ZoneInfo(ISRAEL_TIME_ZONE)
    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is None:
        raise ValueError("タイムゾーン情報のない時刻は使用できません")

    local_now = now.astimezone(tz)
    current = CalendarDate(local_now.year, local_now.month, local_now.day)
    logger.debug(f"今日の日付 ({ISRAEL_TIME_ZONE}): {current}")
    return current


def parse_date(text: DateLike) -> CalendarDate:
    """
    YYYY-MM-DD 文字列をCalendarDateに変換

    CalendarDate と datetime.date はそのまま変換して返します。
    フィールド数・数値・暦上の妥当性のいずれかが不正な場合は
    InvalidDateFormat を送出します（補正は行いません）。
    """
    if isinstance(text, CalendarDate):
        return text
    if isinstance(text, date):
        return CalendarDate.from_date(text)
    if not isinstance(text, str):
        raise InvalidDateFormat(text, "文字列ではありません")

    parts = text.split("-")
    if len(parts) != 3:
        raise InvalidDateFormat(text, "フィールド数が3ではありません")
    if not all(part.isascii() and part.isdigit() for part in parts):
        raise InvalidDateFormat(text, "数値以外のフィールドがあります")

    year, month, day = (int(part) for part in parts)
    try:
        date(year, month, day)
    except ValueError as e:
        raise InvalidDateFormat(text, str(e)) from e

    return CalendarDate(year, month, day)


def format_date(value: DateLike) -> str:
    """正規形 YYYY-MM-DD の文字列に変換"""
    return parse_date(value).isoformat()


def weekday_of(value: DateLike) -> int:
    """曜日を取得 (0 = 日曜日 ... 6 = 土曜日)"""
    # isoweekday: 月曜=1 ... 日曜=7
    return parse_date(value).to_date().isoweekday() % 7


def add_days(value: DateLike, days: int) -> CalendarDate:
    """日数を加算（負の値で減算）"""
    shifted = parse_date(value).to_date() + timedelta(days=days)
    return CalendarDate.from_date(shifted)


def days_between(start: DateLike, end: DateLike) -> int:
    """start から end までの日数（end が前なら負）"""
    return (parse_date(end).to_date() - parse_date(start).to_date()).days


def week_start_of(value: DateLike) -> CalendarDate:
    """指定日を含む週の日曜日を取得"""
    return add_days(value, -weekday_of(value))


def weekday_label(value: DateLike) -> str:
    """ヘブライ語の曜日名"""
    return HEBREW_DAYS[weekday_of(value)]


def localized_label(value: DateLike) -> str:
    """ヘブライ語の長い日付表記（例: יום ראשון, 22 בפברואר 2026）"""
    cal_date = parse_date(value)
    month_name = HEBREW_MONTHS[cal_date.month - 1]
    return f"יום {weekday_label(cal_date)}, {cal_date.day} ב{month_name} {cal_date.year}"


def short_display(value: DateLike) -> str:
    """週表の見出し用の短い日付表記（例: 22.2）"""
    cal_date = parse_date(value)
    return f"{cal_date.day}.{cal_date.month}"
