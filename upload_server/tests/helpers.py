"""テスト用ヘルパー"""

import io


class FakeUpload:
    """テスト用のアップロードファイル"""

    def __init__(self, name, content: bytes):
        self.name = name
        self.content = content
        self.stream = None

    def is_empty(self) -> bool:
        return len(self.content) == 0

    def open_stream(self):
        self.stream = io.BytesIO(self.content)
        return self.stream
