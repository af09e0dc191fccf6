from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    static_dir = tmp_path / "static"
    static_dir.mkdir()
    (static_dir / "app.js").write_text("console.log('todo')", encoding="utf-8")
    index_file = tmp_path / "index.html"
    index_file.write_text("<html><body>todo</body></html>", encoding="utf-8")
    return Settings(STATIC_DIR=str(static_dir), INDEX_FILE=str(index_file))


@pytest.fixture
def client(settings: Settings):
    with TestClient(create_app(settings)) as c:
        yield c
