"""
ユーティリティパッケージ

このパッケージは、アプリケーション全体で使用される共通機能を提供します。
設定管理、ログ機能、当番表の構築と変換、UIコンポーネントが含まれています。
"""

# 設定管理とログ機能
from .config import get_config, reload_config, AppConfig
from .logger import setup_logging, get_logger, log_extra_fields

from .schedule_builder import day_record, week_records, week_records_for
from .schedule_converter import (
    convert_week_to_dataframe,
    convert_week_to_display_dataframe,
    convert_week_to_records_dataframe,
    week_to_csv
)
from .constants import (
    APP_TITLE,
    APP_SUBTITLE,
    VIEW_MODE_LABELS,
    SHIFT_ORDER,
    SHIFT_ROW_LABELS,
    UNIT_LABEL,
    UNIT_COLORS
)
from .ui_components import (
    select_view_mode,
    select_date,
    select_shift,
    display_unit_card,
    display_week_table,
    display_legend,
    create_download_button,
    generate_filename
)

__all__ = [
    # 設定管理とログ機能
    'get_config',
    'reload_config',
    'AppConfig',
    'setup_logging',
    'get_logger',
    'log_extra_fields',

    # 当番表の構築
    'day_record',
    'week_records',
    'week_records_for',

    # スケジュール変換機能
    'convert_week_to_dataframe',
    'convert_week_to_display_dataframe',
    'convert_week_to_records_dataframe',
    'week_to_csv',

    # 定数
    'APP_TITLE',
    'APP_SUBTITLE',
    'VIEW_MODE_LABELS',
    'SHIFT_ORDER',
    'SHIFT_ROW_LABELS',
    'UNIT_LABEL',
    'UNIT_COLORS',

    # UIコンポーネント
    'select_view_mode',
    'select_date',
    'select_shift',
    'display_unit_card',
    'display_week_table',
    'display_legend',
    'create_download_button',
    'generate_filename'
]
