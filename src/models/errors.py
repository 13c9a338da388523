"""
当番表エンジンの例外定義

入力が不正な場合に呼び出し元へそのまま伝播させる例外を定義します。
"""


class InvalidDateFormat(ValueError):
    """YYYY-MM-DD として解釈できない日付文字列"""

    def __init__(self, text, reason: str = ""):
        self.text = text
        message = f"日付形式が不正です: {text!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class UnknownShiftSlot(ValueError):
    """未知のシフト識別子"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"未知のシフトです: {value!r} (morning / midday / night のいずれか)")
