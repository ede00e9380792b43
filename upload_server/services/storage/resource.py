"""ファイルリソース

保存済みファイルを読み出すためのハンドル。
"""

import os
from pathlib import Path
from typing import BinaryIO, Union


class FileResource:
    """ファイルシステム上のパスを指すリソース"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).absolute()
        # NULバイトを含むパスはURIにも変換できないためここで弾く
        if '\x00' in str(self.path):
            raise ValueError(f"Invalid path: {path!r}")
        self.uri = self.path.as_uri()

    @property
    def filename(self) -> str:
        return self.path.name

    def exists(self) -> bool:
        return self.path.exists()

    def is_readable(self) -> bool:
        """通常ファイルとして存在し、読み込み権限がある場合True"""
        return self.path.is_file() and os.access(self.path, os.R_OK)

    def open(self) -> BinaryIO:
        return open(self.path, 'rb')

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()

    def __repr__(self) -> str:
        return f"FileResource({self.uri!r})"
