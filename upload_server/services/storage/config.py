"""ストレージ設定クラス

環境変数からの設定読み込みを一元管理。
"""

from dataclasses import dataclass
import os

_TRUTHY = {'1', 'true', 'yes', 'on'}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class StorageConfig:
    """ローカルストレージ設定

    Attributes:
        location: アップロードファイルの保存先ディレクトリ（相対パス可）
        reset_on_startup: 起動時に保存先を空にするかどうか
    """
    location: str = "upload-dir"
    reset_on_startup: bool = True

    @classmethod
    def from_env(cls) -> 'StorageConfig':
        """環境変数から設定を読み込み"""
        return cls(
            location=os.getenv('STORAGE_LOCATION', 'upload-dir'),
            reset_on_startup=_env_flag('STORAGE_RESET_ON_STARTUP', True)
        )
