from pydantic import BaseModel, Field
from typing import List


class StoredFileResponse(BaseModel):
    """保存済みファイル"""
    name: str
    url: str = Field(..., description="ダウンロードURL")


class FileListResponse(BaseModel):
    """ファイル一覧レスポンス"""
    files: List[StoredFileResponse]


class UploadResponse(BaseModel):
    """アップロード結果レスポンス"""
    message: str
    filename: str
