"""テスト共通フィクスチャ"""

import pytest
from fastapi.testclient import TestClient

from upload_server.main import create_app
from upload_server.services.storage import StorageConfig, StorageService


@pytest.fixture
def storage_config(tmp_path):
    return StorageConfig(location=str(tmp_path / "upload-dir"), reset_on_startup=True)


@pytest.fixture
def storage(storage_config):
    service = StorageService(storage_config)
    service.initialize()
    return service


@pytest.fixture
def client(storage_config):
    app = create_app(storage_config)
    with TestClient(app) as test_client:
        yield test_client
