"""StorageConfigのテスト"""

import pytest

from upload_server.services.storage import StorageConfig


def test_defaults(monkeypatch):
    """環境変数未設定時のデフォルト値"""
    monkeypatch.delenv('STORAGE_LOCATION', raising=False)
    monkeypatch.delenv('STORAGE_RESET_ON_STARTUP', raising=False)

    config = StorageConfig.from_env()

    assert config.location == "upload-dir"
    assert config.reset_on_startup is True


@pytest.mark.parametrize("value, expected", [
    ("true", True),
    ("ON", True),
    ("1", True),
    ("false", False),
    ("0", False),
    ("", False),
])
def test_reset_flag(monkeypatch, value, expected):
    """STORAGE_RESET_ON_STARTUPの解釈"""
    monkeypatch.setenv('STORAGE_RESET_ON_STARTUP', value)

    assert StorageConfig.from_env().reset_on_startup is expected


def test_location_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv('STORAGE_LOCATION', str(tmp_path / "files"))

    assert StorageConfig.from_env().location == str(tmp_path / "files")


def test_immutable():
    config = StorageConfig()

    with pytest.raises(AttributeError):
        config.location = "elsewhere"
