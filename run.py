#!/usr/bin/env python3
"""
Локальный запуск Event Logistics API на SQLite
"""

import sys
from pathlib import Path

import uvicorn

ROOT = Path(__file__).parent
sys.path.insert(0, str(ROOT))

DEFAULT_ENV = """DATABASE_URL=sqlite:///./event_logistics.db
SECRET_KEY=change-me
ACCESS_TOKEN_EXPIRE_MINUTES=60
BACKEND_CORS_ORIGINS=["http://localhost:3000", "http://127.0.0.1:3000"]
LOG_LEVEL=INFO
LOG_FILE=event_logistics.log
MAX_UPLOAD_SIZE=10000000
"""


def ensure_env_file():
    env_file = ROOT / ".env"
    if env_file.exists():
        return
    print(f"Writing default settings to {env_file}")
    env_file.write_text(DEFAULT_ENV, encoding="utf-8")


if __name__ == "__main__":
    ensure_env_file()
    print("Docs: http://localhost:8000/docs")
    uvicorn.run("app.main:app", host="127.0.0.1", port=8000, reload=True)
