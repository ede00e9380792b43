"""ファイルアップロードAPI

ローカルストレージへのファイル操作を行うAPIエンドポイント:
- GET /api/files: 保存済みファイル一覧
- GET /api/files/{filename}: ファイルダウンロード
- POST /api/files: ファイルアップロード
"""

import logging
import os
import urllib.parse
from typing import BinaryIO, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from fastapi.responses import FileResponse

from upload_server.api.response_model import (
    FileListResponse,
    StoredFileResponse,
    UploadResponse
)
from upload_server.services.storage import (
    StorageService,
    StorageError,
    StorageFileNotFoundError,
    InvalidUploadError
)

logger = logging.getLogger(__name__)

router = APIRouter()


class UploadFileAdapter:
    """fastapi.UploadFile を UploadedFile として扱うためのアダプタ"""

    def __init__(self, upload: UploadFile):
        self._upload = upload

    @property
    def name(self) -> Optional[str]:
        return self._upload.filename

    def is_empty(self) -> bool:
        if self._upload.size is not None:
            return self._upload.size == 0
        f = self._upload.file
        position = f.tell()
        f.seek(0, os.SEEK_END)
        size = f.tell()
        f.seek(position)
        return size == 0

    def open_stream(self) -> BinaryIO:
        self._upload.file.seek(0)
        return self._upload.file


def get_storage(request: Request) -> StorageService:
    """アプリケーションに紐づくStorageServiceを取得"""
    return request.app.state.storage


@router.get("/files", tags=["files"], response_model=FileListResponse)
def list_files(request: Request, storage: StorageService = Depends(get_storage)):
    """
    保存済みファイルの一覧を取得する

    Returns:
        FileListResponse: ファイル名とダウンロードURLの一覧
    """
    try:
        files = [
            StoredFileResponse(
                name=str(path),
                url=str(request.url_for(
                    "serve_file", filename=urllib.parse.quote(str(path), safe="")
                ))
            )
            for path in storage.load_all()
        ]
    except StorageError as e:
        logger.error(f"Failed to list files: {e}")
        raise HTTPException(status_code=500, detail="Failed to read stored files")
    return FileListResponse(files=files)


@router.get("/files/{filename}", tags=["files"], name="serve_file")
def serve_file(filename: str, storage: StorageService = Depends(get_storage)):
    """
    ファイルを添付ファイルとしてダウンロードする

    Args:
        filename: ファイル名
    """
    try:
        resource = storage.load_as_resource(filename)
    except StorageFileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    # ディレクトリなど本文を返せないものは見つからない扱い
    if not resource.is_readable():
        raise HTTPException(status_code=404, detail=f"Could not read file: {filename}")

    return FileResponse(resource.path, filename=resource.filename)


@router.post("/files", tags=["files"], response_model=UploadResponse)
def upload_file(file: UploadFile = File(...), storage: StorageService = Depends(get_storage)):
    """
    ファイルをアップロードして保存する

    同名ファイルは上書きされる。

    Returns:
        UploadResponse: 完了メッセージと保存したファイル名
    """
    try:
        storage.store(UploadFileAdapter(file))
    except InvalidUploadError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        logger.error(f"Unexpected error in upload_file: {e}")
        raise HTTPException(status_code=500, detail="Failed to store file")

    return UploadResponse(
        message=f"You successfully uploaded {file.filename}!",
        filename=file.filename
    )
