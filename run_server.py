#!/usr/bin/env python
"""
剣・盾・兵 開発サーバ起動スクリプト
"""

import logging
import sys
import os

# プロジェクトルートをパスに追加
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from src import config
from src.api.main import app
import uvicorn

if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    print("=" * 60)
    print("剣・盾・兵 開発サーバを起動します")
    print("=" * 60)
    print(f"APIサーバ: http://localhost:{config.PORT}")
    print(f"API ドキュメント: http://localhost:{config.PORT}/docs")
    print("=" * 60)
    print()

    uvicorn.run(
        app,
        host=config.HOST,
        port=config.PORT,
        reload=False,
        log_level=config.LOG_LEVEL
    )
