"""UploadFileAdapterのテスト"""

import io

from fastapi import UploadFile

from upload_server.api.route.files import UploadFileAdapter


class TestUploadFileAdapter:
    """fastapi.UploadFile のアダプタ"""

    def test_name(self):
        adapter = UploadFileAdapter(UploadFile(io.BytesIO(b"data"), filename="a.txt"))

        assert adapter.name == "a.txt"

    def test_empty_with_size(self):
        """正常系: sizeが分かっている場合"""
        upload = UploadFile(io.BytesIO(b""), size=0, filename="e.txt")

        assert UploadFileAdapter(upload).is_empty() is True

    def test_empty_without_size(self):
        """正常系: sizeなしでも空と判定できる"""
        upload = UploadFile(io.BytesIO(b""), filename="e.txt")
        assert upload.size is None

        assert UploadFileAdapter(upload).is_empty() is True

    def test_not_empty_without_size_keeps_position(self):
        """正常系: sizeなしの判定で読み込み位置を変えない"""
        stream = io.BytesIO(b"hello")
        stream.seek(2)
        upload = UploadFile(stream, filename="h.txt")

        assert UploadFileAdapter(upload).is_empty() is False
        assert stream.tell() == 2

    def test_open_stream_rewinds(self):
        """正常系: 先頭から読み出せる"""
        stream = io.BytesIO(b"hello")
        stream.seek(3)
        adapter = UploadFileAdapter(UploadFile(stream, filename="h.txt"))

        assert adapter.open_stream().read() == b"hello"
