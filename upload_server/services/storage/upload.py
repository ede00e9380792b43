"""アップロードファイルのインターフェース

ストレージサービスが必要とする最小限の機能だけを定義する。
HTTPフレームワーク側の型には依存しない。
"""

from typing import BinaryIO, Optional, Protocol


class UploadedFile(Protocol):
    """アップロードされたファイル"""

    @property
    def name(self) -> Optional[str]:
        """クライアントが送ってきた元のファイル名"""
        ...

    def is_empty(self) -> bool:
        """内容が0バイトならTrue"""
        ...

    def open_stream(self) -> BinaryIO:
        """内容を読み出すバイナリストリームを返す（呼び出し側でclose）"""
        ...
