"""カスタム例外

ストレージ関連のエラーを表す例外クラス。
"""


class StorageError(Exception):
    """ストレージ操作の基底例外"""
    pass


class StorageInitError(StorageError):
    """ストレージディレクトリの初期化に失敗"""
    pass


class StorageFileNotFoundError(StorageError):
    """ファイルが見つからない、または読み込めない"""
    pass


class InvalidUploadError(StorageError):
    """アップロード内容が不正（空ファイル、保存先がルート外）"""
    pass
