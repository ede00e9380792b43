"""アップロードファイル保存サービス

1つのルートディレクトリ直下にアップロードファイルを保存・列挙・読み出しする。
ルートディレクトリは設定から受け取り、以後変更しない。
"""

import logging
import os
import shutil
from pathlib import Path
from typing import Iterator

from .config import StorageConfig
from .exceptions import (
    StorageError,
    StorageInitError,
    StorageFileNotFoundError,
    InvalidUploadError
)
from .resource import FileResource
from .upload import UploadedFile

logger = logging.getLogger(__name__)


class StorageService:
    """
    ローカルファイルシステム上のアップロードストレージ

    保存されるファイルは必ずルートディレクトリの直下に置かれる
    （サブディレクトリやルート外への書き込みは拒否）。
    """

    def __init__(self, config: StorageConfig):
        self._config = config
        self._root_location = Path(config.location)

    @property
    def config(self) -> StorageConfig:
        """設定を取得"""
        return self._config

    @property
    def root_location(self) -> Path:
        """保存先ルートディレクトリ"""
        return self._root_location

    def initialize(self) -> None:
        """
        ルートディレクトリを作成する（存在する場合は何もしない）

        Raises:
            StorageInitError: ディレクトリを作成できない場合
        """
        try:
            self._root_location.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Storage init failed: {self._root_location} - {e}")
            raise StorageInitError("Could not initialize storage") from e
        logger.info(f"Storage initialized: path={self._root_location}")

    def store(self, file: UploadedFile) -> Path:
        """
        アップロードファイルをルートディレクトリ直下に保存する

        同名ファイルが存在する場合は上書きする。

        Args:
            file: アップロードファイル

        Returns:
            Path: 保存先の絶対パス

        Raises:
            InvalidUploadError: 空ファイル、または保存先がルート直下でない場合
            StorageError: 書き込みに失敗した場合
        """
        filename = file.name
        if file.is_empty():
            raise InvalidUploadError(f"Failed to store empty file {filename}")

        destination = Path(os.path.abspath(self._root_location / (filename or '')))
        if destination.parent != Path(os.path.abspath(self._root_location)):
            raise InvalidUploadError("Cannot store file outside current directory")

        try:
            with file.open_stream() as stream, open(destination, 'wb') as out:
                shutil.copyfileobj(stream, out)
        except OSError as e:
            logger.error(f"Store failed: {filename} - {e}")
            raise StorageError(f"Failed to store file {filename}") from e

        logger.debug(f"Stored file: {destination}")
        return destination

    def load_all(self) -> Iterator[Path]:
        """
        ルートディレクトリ直下のエントリを列挙する

        順序はファイルシステムの列挙順で、保証しない。
        返り値のイテレータは一度しか走査できない。

        Returns:
            Iterator[Path]: ルートからの相対パス

        Raises:
            StorageError: ディレクトリを読めない場合
        """
        try:
            entries = os.scandir(self._root_location)
        except OSError as e:
            logger.error(f"List failed: {self._root_location} - {e}")
            raise StorageError("Failed to read stored files") from e
        return self._iter_relative(entries)

    @staticmethod
    def _iter_relative(entries) -> Iterator[Path]:
        with entries:
            try:
                for entry in entries:
                    yield Path(entry.name)
            except OSError as e:
                raise StorageError("Failed to read stored files") from e

    def load(self, filename: str) -> Path:
        """ルートディレクトリとファイル名を結合したパスを返す（検証なし）"""
        return self._root_location / filename

    def load_as_resource(self, filename: str) -> FileResource:
        """
        ファイル名から読み出し可能なリソースを取得する

        Raises:
            StorageFileNotFoundError: ファイルが存在しない、またはパスが不正な場合
        """
        try:
            resource = FileResource(self.load(filename))
            if resource.exists() or resource.is_readable():
                return resource
        except ValueError as e:
            raise StorageFileNotFoundError(f"Could not read file: {filename}") from e
        raise StorageFileNotFoundError(f"Could not read file: {filename}")

    def delete_all(self) -> bool:
        """
        ルートディレクトリを中身ごと削除する

        Returns:
            bool: 削除した場合True、もともと存在しなかった場合False

        Raises:
            StorageError: 削除に失敗した場合（途中まで削除されている可能性あり）
        """
        if not os.path.lexists(self._root_location):
            return False
        try:
            if self._root_location.is_dir() and not self._root_location.is_symlink():
                shutil.rmtree(self._root_location)
            else:
                self._root_location.unlink()
        except OSError as e:
            logger.error(f"Delete all failed: {self._root_location} - {e}")
            raise StorageError(f"Failed to delete storage {self._root_location}") from e
        logger.info(f"Storage deleted: path={self._root_location}")
        return True
