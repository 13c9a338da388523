"""
設定管理モジュール

このモジュールは、アプリケーション全体で使用される設定値を管理します。
環境変数から値を読み込み、適切なデフォルト値を提供します。
direnvとの連携を考慮し、開発環境での設定管理を簡素化します。

ローテーションの基準日・周期・タイムゾーンは固定値であり、
設定からは変更できません。

主な機能:
- 環境変数からの設定値読み込み
- デフォルト値の提供
- 設定値の型変換
- 設定値の検証
"""

import os
import logging
from typing import Optional
from dataclasses import dataclass
from pathlib import Path

VIEW_MODES = ("daily", "weekly")
SHIFT_IDS = ("morning", "midday", "night")


@dataclass
class AppConfig:
    """アプリケーション設定クラス"""

    # アプリケーション基本設定
    app_name: str
    app_version: str
    debug: bool
    log_level: str

    # Streamlit設定
    streamlit_server_port: int
    streamlit_server_address: str

    # 画面設定
    default_view_mode: str
    default_shift: str

    # ログ設定
    log_file: Path
    log_max_size: str
    log_backup_count: int


class ConfigManager:
    """設定管理クラス"""

    def __init__(self):
        """設定マネージャーを初期化"""
        self._config: Optional[AppConfig] = None
        self._logger = logging.getLogger(__name__)

    def load_config(self) -> AppConfig:
        """環境変数から設定を読み込み、AppConfigオブジェクトを返す"""
        if self._config is None:
            self._config = self._create_config()
        return self._config

    def _create_config(self) -> AppConfig:
        """環境変数から設定オブジェクトを作成"""
        errors = []

        # アプリケーション基本設定
        app_name = os.getenv('APP_NAME', 'Duty Rotation Board')
        app_version = os.getenv('APP_VERSION', '0.1.0')
        debug = self._parse_bool(os.getenv('DEBUG', 'false'))
        log_level = os.getenv('LOG_LEVEL', 'INFO')

        # Streamlit設定
        streamlit_server_port = self._parse_int('STREAMLIT_SERVER_PORT', '8501', errors)
        streamlit_server_address = os.getenv('STREAMLIT_SERVER_ADDRESS', '0.0.0.0')

        # 画面設定
        default_view_mode = os.getenv('DEFAULT_VIEW_MODE', 'daily').strip().lower()
        default_shift = os.getenv('DEFAULT_SHIFT', 'morning').strip().lower()

        # ログ設定
        log_file = Path(os.getenv('LOG_FILE', './logs/app.log'))
        log_max_size = os.getenv('LOG_MAX_SIZE', '10MB')
        log_backup_count = self._parse_int('LOG_BACKUP_COUNT', '5', errors)

        if errors:
            self._raise_errors(errors)

        # 設定オブジェクトを作成
        config = AppConfig(
            app_name=app_name,
            app_version=app_version,
            debug=debug,
            log_level=log_level,
            streamlit_server_port=streamlit_server_port,
            streamlit_server_address=streamlit_server_address,
            default_view_mode=default_view_mode,
            default_shift=default_shift,
            log_file=log_file,
            log_max_size=log_max_size,
            log_backup_count=log_backup_count
        )

        # 設定の検証
        self._validate_config(config)

        # ログ出力
        self._log_config_summary(config)

        return config

    def _parse_bool(self, value: str) -> bool:
        """文字列をブール値に変換"""
        return value.lower() in ('true', '1', 'yes', 'on')

    def _parse_int(self, name: str, default: str, errors: list) -> int:
        """環境変数を整数に変換（失敗時はエラーリストに追加）"""
        raw = os.getenv(name, default)
        try:
            return int(raw)
        except ValueError:
            errors.append(f"{name}は整数である必要があります: {raw!r}")
            return 0

    def _validate_config(self, config: AppConfig) -> None:
        """設定値の検証"""
        errors = []

        if not isinstance(getattr(logging, config.log_level.upper(), None), int):
            errors.append(f"LOG_LEVELが不正です: {config.log_level}")

        if not (0 < config.streamlit_server_port < 65536):
            errors.append("STREAMLIT_SERVER_PORTは1〜65535の値である必要があります")

        if config.default_view_mode not in VIEW_MODES:
            errors.append(f"DEFAULT_VIEW_MODEは {'/'.join(VIEW_MODES)} のいずれかである必要があります")

        if config.default_shift not in SHIFT_IDS:
            errors.append(f"DEFAULT_SHIFTは {'/'.join(SHIFT_IDS)} のいずれかである必要があります")

        if config.log_backup_count < 0:
            errors.append("LOG_BACKUP_COUNTは0以上の値である必要があります")

        if parse_size(config.log_max_size) is None:
            errors.append(f"LOG_MAX_SIZEが不正です: {config.log_max_size}")

        # エラーがあれば例外を発生
        if errors:
            self._raise_errors(errors)

    def _raise_errors(self, errors: list) -> None:
        error_msg = "設定エラー:\n" + "\n".join(f"- {error}" for error in errors)
        raise ValueError(error_msg)

    def _log_config_summary(self, config: AppConfig) -> None:
        """設定の要約をログに出力"""
        self._logger.info(f"アプリケーション設定を読み込みました:")
        self._logger.info(f"  アプリ名: {config.app_name} v{config.app_version}")
        self._logger.info(f"  デバッグモード: {config.debug}")
        self._logger.info(f"  ログレベル: {config.log_level}")
        self._logger.info(f"  Streamlit: {config.streamlit_server_address}:{config.streamlit_server_port}")
        self._logger.info(f"  初期表示: {config.default_view_mode} / {config.default_shift}")
        self._logger.info(f"  ログファイル: {config.log_file}")


def parse_size(size_str: str) -> Optional[int]:
    """サイズ文字列 (例: 10MB) をバイト数に変換。不正な場合はNone"""
    size_str = size_str.strip().upper()
    units = {'KB': 1024, 'MB': 1024 * 1024, 'GB': 1024 * 1024 * 1024}
    multiplier = 1
    for suffix, factor in units.items():
        if size_str.endswith(suffix):
            size_str = size_str[:-2]
            multiplier = factor
            break
    if not size_str.isdigit():
        return None
    return int(size_str) * multiplier


# グローバル設定インスタンス
config_manager = ConfigManager()


def get_config() -> AppConfig:
    """設定オブジェクトを取得"""
    return config_manager.load_config()


def reload_config() -> AppConfig:
    """設定を再読み込み"""
    config_manager._config = None
    return config_manager.load_config()
