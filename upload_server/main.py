import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from upload_server.api.route import files
from upload_server.services.storage import StorageConfig, StorageService

logger = logging.getLogger(__name__)


def _cors_origins() -> list:
    raw = os.getenv('CORS_ALLOW_ORIGINS', 'http://localhost:5173')
    return [origin.strip() for origin in raw.split(',') if origin.strip()]


def create_app(config: Optional[StorageConfig] = None) -> FastAPI:
    """FastAPIアプリケーションを生成する"""
    storage = StorageService(config or StorageConfig.from_env())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # 起動時に保存先を作り直す
        if storage.config.reset_on_startup:
            storage.delete_all()
        storage.initialize()
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.storage = storage

    # CORSミドルウェアの設定
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],  # 全てのHTTPメソッドを許可
        allow_headers=["*"],  # 全てのヘッダーを許可
    )

    app.include_router(files.router, prefix="/api")
    return app


app = create_app()


def run():
    """コマンドラインからサーバーを起動する"""
    log_level = os.getenv('LOG_LEVEL', 'INFO').upper()
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    host = os.getenv('UPLOAD_SERVER_HOST', '0.0.0.0')
    port = int(os.getenv('UPLOAD_SERVER_PORT', '8000'))
    logger.info(f"Starting upload server on {host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())


if __name__ == "__main__":
    run()
