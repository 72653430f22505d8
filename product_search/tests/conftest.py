import sys
from pathlib import Path

# 프로젝트 루트 경로를 sys.path에 추가 (…/<project-root>)
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
from fastapi.testclient import TestClient
from product_search.app.main import app
from product_search.app.domain.models import QueryParams

@pytest.fixture(scope="session")
def client():
    return TestClient(app)

@pytest.fixture
def empty_params():
    """검색어/필터가 모두 비어 있는 기본 파라미터"""
    return QueryParams()
