"""
ログ管理モジュール

ルートロガーに標準出力とローテーションするログファイルの2つのハンドラーを設定します。
ローテーション計算の詳細ログ (DEBUG) はデバッグモードでのみ出力されます。
"""

import copy
import logging
import logging.handlers
import sys
from typing import Optional
from .config import AppConfig, get_config, parse_size

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """レベル名をANSIカラーで表示するフォーマッター"""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        # 同じレコードはファイルハンドラーにも渡るため、複製に色を付ける
        colored = copy.copy(record)
        color = self.COLORS.get(record.levelname, self.RESET)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


class StructuredFormatter(logging.Formatter):
    """1行1辞書形式のフォーマッター（ログファイル用）"""

    def format(self, record):
        log_entry = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage()
        }
        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)
        return str(log_entry)


class LoggerManager:
    """ルートロガーの初期化を一度だけ行うクラス"""

    def __init__(self):
        self._initialized = False

    def setup_logging(self, log_level: Optional[str] = None) -> None:
        """ログ設定を初期化"""
        if self._initialized:
            return

        config = get_config()
        level = getattr(logging, (log_level or config.log_level).upper(), logging.INFO)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        root_logger.addHandler(build_console_handler(level, config.debug))
        root_logger.addHandler(build_file_handler(level, config))

        if not config.debug:
            logging.getLogger('algorithms').setLevel(logging.INFO)

        self._initialized = True
        logging.info("ログシステムを初期化しました")


def build_console_handler(level: int, debug: bool) -> logging.Handler:
    """標準出力ハンドラーを作成（デバッグモードではカラー表示）"""
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    formatter_class = ColoredFormatter if debug else logging.Formatter
    handler.setFormatter(formatter_class(CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT))
    return handler


def build_file_handler(level: int, config: AppConfig) -> logging.Handler:
    """ローテーションするファイルハンドラーを作成"""
    config.log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        filename=config.log_file,
        maxBytes=parse_size(config.log_max_size),
        backupCount=config.log_backup_count,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(StructuredFormatter())
    return handler


logger_manager = LoggerManager()


def setup_logging(log_level: Optional[str] = None) -> None:
    """ログ設定を初期化"""
    logger_manager.setup_logging(log_level)


def get_logger(name: str) -> logging.Logger:
    """指定された名前のロガーを取得"""
    return logging.getLogger(name)


def log_extra_fields(logger: logging.Logger, level: int, message: str, **kwargs) -> None:
    """追加フィールド付きでログを出力"""
    logger.log(level, f"{message} | {kwargs}")
