"""
UIコンポーネントモジュール

Streamlitアプリケーションで使用する共通UIコンポーネントを提供します。
画面の状態（選択日・選択シフト・表示モード）はすべて戻り値として
呼び出し元に返し、計算関数には引数として渡します。
"""

import streamlit as st
from datetime import date, datetime
from typing import List, Optional
from zoneinfo import ZoneInfo

from algorithms.calendar_adapter import ISRAEL_TIME_ZONE
from models.duty_models import CalendarDate, DayRecord, ShiftTime
from .constants import (
    VIEW_MODE_LABELS, SHIFT_ORDER, SHIFT_ROW_BRIEFINGS,
    UNIT_LABEL, UNIT_COLORS
)
from .schedule_converter import convert_week_to_dataframe, convert_week_to_display_dataframe


def select_view_mode(default: str = "daily") -> str:
    """
    表示モード切り替えを作成

    Returns:
        "daily" または "weekly"
    """
    modes = list(VIEW_MODE_LABELS.keys())
    return st.radio(
        "view",
        modes,
        index=modes.index(default) if default in modes else 0,
        format_func=lambda mode: VIEW_MODE_LABELS[mode],
        horizontal=True,
        label_visibility="collapsed",
        key="view_mode"
    )


def select_date(label: str, default: CalendarDate) -> date:
    """日付入力を作成"""
    return st.date_input(f"📅 {label}", value=default.to_date(), key="selected_date")


def select_shift(shift_times: dict, default: str = "morning") -> str:
    """
    シフト選択ボタンを作成

    Args:
        shift_times: シフトID -> 表示用時刻情報（昼シフトは当日のバリエーション）
        default: 初期選択シフト

    Returns:
        選択されたシフトID
    """
    if "selected_shift" not in st.session_state:
        st.session_state["selected_shift"] = default

    columns = st.columns(len(SHIFT_ORDER))
    for column, shift in zip(columns, SHIFT_ORDER):
        shift_time: ShiftTime = shift_times[shift]
        selected = st.session_state["selected_shift"] == shift
        with column:
            if st.button(
                f"{shift_time.icon} {shift_time.name}",
                key=f"shift_{shift}",
                type="primary" if selected else "secondary",
                use_container_width=True
            ):
                st.session_state["selected_shift"] = shift
                st.rerun()
            st.caption(shift_time.label)

    return st.session_state["selected_shift"]


def display_unit_card(unit: int, shift_time: ShiftTime, weekday: str) -> None:
    """当番ユニットの結果カードを表示"""
    color = UNIT_COLORS[unit]
    st.markdown(
        f"""
        <div style="background:{color};border-radius:16px;padding:32px;text-align:center;direction:rtl">
          <div style="color:white;font-size:1.1rem">{UNIT_LABEL} במשמרת</div>
          <div style="color:white;font-size:3.5rem;font-weight:700">{UNIT_LABEL} {unit}</div>
          <div style="color:#e0e7ff;font-size:0.9rem">{shift_time.name} • יום {weekday}</div>
        </div>
        """,
        unsafe_allow_html=True
    )


def _unit_cell_style(value) -> str:
    color = UNIT_COLORS.get(value)
    if color is None:
        return ""
    return f"background-color: {color}; color: white; font-weight: bold; text-align: center"


def display_week_table(records: List[DayRecord]) -> None:
    """
    週間当番表を表示

    Args:
        records: 1日分のレコードのリスト（7件）
    """
    unit_df = convert_week_to_dataframe(records)
    display_df = convert_week_to_display_dataframe(records)

    row_labels = [
        f"{row_label} ({SHIFT_ROW_BRIEFINGS[shift]})"
        for row_label, shift in zip(unit_df.index, SHIFT_ORDER)
    ]
    unit_df.index = row_labels
    display_df.index = row_labels

    # 色はユニット番号で決まる
    cell_styles = unit_df.map(_unit_cell_style)
    st.dataframe(
        display_df.style.apply(lambda _: cell_styles, axis=None),
        use_container_width=True
    )


def display_legend() -> None:
    """ユニット色の凡例を表示"""
    columns = st.columns(len(UNIT_COLORS))
    for column, (unit, color) in zip(columns, UNIT_COLORS.items()):
        column.markdown(
            f'<span style="color:{color};font-size:1.2rem">●</span> {UNIT_LABEL} {unit}',
            unsafe_allow_html=True
        )


def create_download_button(data: str, button_text: str, filename: str) -> None:
    """
    CSVダウンロードボタンを作成

    Args:
        data: CSV文字列
        button_text: ボタンのテキスト
        filename: ファイル名
    """
    st.download_button(
        button_text,
        data,
        file_name=filename,
        mime="text/csv"
    )


def generate_filename(prefix: str, week_start: CalendarDate, now: Optional[datetime] = None) -> str:
    """
    ファイル名を生成

    Args:
        prefix: ファイル名のプレフィックス
        week_start: 週の開始日
        now: タイムスタンプ用の時刻（Noneの場合は現在時刻）。
            タイムゾーン付きの場合は Asia/Jerusalem に変換する

    Returns:
        生成されたファイル名
    """
    tz = ZoneInfo(ISRAEL_TIME_ZONE)
    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is not None:
        now = now.astimezone(tz)
    timestamp = now.strftime("%Y%m%d_%H%M")
    return f"{prefix}_{week_start.isoformat().replace('-', '')}_{timestamp}.csv"
