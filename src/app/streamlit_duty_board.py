import streamlit as st
import sys
import os

# プロジェクトルートをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from algorithms.calendar_adapter import (
    today, parse_date, week_start_of, weekday_label, localized_label
)
from algorithms.rotation_engine import unit_on_duty, shift_time_for
from models.errors import InvalidDateFormat, UnknownShiftSlot
from utils.config import get_config
from utils.logger import setup_logging, get_logger
from utils.constants import APP_TITLE, APP_SUBTITLE, SHIFT_ORDER
from utils.schedule_builder import week_records
from utils.schedule_converter import week_to_csv
from utils.ui_components import (
    select_view_mode, select_date, select_shift, display_unit_card,
    display_week_table, display_legend, create_download_button, generate_filename
)

config = get_config()
setup_logging()
logger = get_logger(__name__)

st.set_page_config(page_title=config.app_name, page_icon="📅", layout="centered")

st.markdown("<style>.main .block-container{direction:rtl;text-align:right}</style>",
            unsafe_allow_html=True)
st.title(APP_TITLE)
st.caption(APP_SUBTITLE)

# ---------- 表示モード ----------
view_mode = select_view_mode(config.default_view_mode)

try:
    if view_mode == "daily":
        # ---------- 日次表示 ----------
        picked = select_date("בחר תאריך", today())
        selected_date = parse_date(picked)
        st.caption(f"{localized_label(selected_date)} • יום {weekday_label(selected_date)}")

        st.subheader("🕒 בחר משמרת")
        shift_times = {shift: shift_time_for(selected_date, shift) for shift in SHIFT_ORDER}
        selected_shift = select_shift(shift_times, config.default_shift)

        unit = unit_on_duty(selected_date, selected_shift)
        logger.info(f"当番照会: {selected_date} {selected_shift} -> ユニット{unit}")
        display_unit_card(unit, shift_times[selected_shift], weekday_label(selected_date))

    else:
        # ---------- 週次表示 ----------
        picked = select_date("בחר שבוע", today())
        week_start = week_start_of(parse_date(picked))
        st.caption(f"שבוע המתחיל ב-{localized_label(week_start)}")

        records = week_records(week_start)
        logger.info(f"週間当番表を表示: {week_start}")
        display_week_table(records)
        display_legend()

        create_download_button(
            week_to_csv(records),
            "📥 הורדת CSV",
            generate_filename("duty_week", week_start)
        )

except (InvalidDateFormat, UnknownShiftSlot) as e:
    logger.error(f"入力エラー: {e}")
    st.error(str(e))
