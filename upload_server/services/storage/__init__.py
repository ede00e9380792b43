"""Storage Module - アップロードファイル保存サービス

設定されたルートディレクトリ直下にアップロードファイルを保存する。
HTTP層からは UploadedFile / FileResource を介してのみやり取りする。
"""

from .config import StorageConfig
from .exceptions import (
    StorageError,
    StorageInitError,
    StorageFileNotFoundError,
    InvalidUploadError
)
from .resource import FileResource
from .service import StorageService
from .upload import UploadedFile

__all__ = [
    'StorageConfig',
    'StorageError',
    'StorageInitError',
    'StorageFileNotFoundError',
    'InvalidUploadError',
    'FileResource',
    'StorageService',
    'UploadedFile'
]
