"""
定数定義モジュール

当番表画面で使用する表示用の定数を定義します。
"""

# 画面タイトル
APP_TITLE = 'לוח משמרות יח"ס'
APP_SUBTITLE = 'בחר תאריך ומשמרת כדי לראות איזו יח"ס במשמרת'

# 表示モード
VIEW_MODE_LABELS = {
    "daily": "תצוגה יומית",
    "weekly": "תצוגה שבועית",
}

# シフト表示順（週表の行順）
SHIFT_ORDER = ["morning", "midday", "night"]

# 週表の行見出し
SHIFT_ROW_LABELS = {
    "morning": "🌅 בוקר",
    "midday": "☀️ צהריים",
    "night": "🌙 לילה",
}

# 週表の行見出し下のブリーフィング時刻
SHIFT_ROW_BRIEFINGS = {
    "morning": "תדריך 06:30",
    "midday": "תדריך 13:30/14:30",
    "night": "תדריך 20:30",
}

UNIT_LABEL = 'יח"ס'

# ユニット別の表示色
UNIT_COLORS = {
    1: "#3b82f6",  # 青
    2: "#22c55e",  # 緑
    3: "#a855f7",  # 紫
}

# CSV出力の列名
WEEK_CSV_COLUMNS = ["date", "weekday", "morning", "midday", "night", "midday_time"]
