# product_search/tests/unit/adapters/searchers/test_opensearch_searcher.py

from unittest.mock import MagicMock
import pytest
from opensearchpy.exceptions import NotFoundError, ConnectionError

from product_search.app.adapters.searchers.opensearch_searcher import OpenSearchSearcher
from product_search.app.platform.exceptions import ResourceNotFound


@pytest.fixture
def mock_client():
    c = MagicMock()
    return c


def test_search_calls_client_with_index_and_body(mock_client):
    s = OpenSearchSearcher(client=mock_client, index_name="spree")

    # 클라이언트가 반환할 결과 모킹
    mock_client.search.return_value = {"hits": {"total": {"value": 1}, "hits": [{"_id": "1"}]}}
    body = {"query": {"bool": {"must": {"match_all": {}}}}, "from": 0}

    # 실행
    res = s.search(body)

    # 결과 그대로 전달되는지
    assert res == {"hits": {"total": {"value": 1}, "hits": [{"_id": "1"}]}}
    mock_client.search.assert_called_once_with(index="spree", body=body)


def test_search_propagates_client_errors(mock_client):
    s = OpenSearchSearcher(client=mock_client, index_name="spree")
    mock_client.search.side_effect = ConnectionError("N/A", "opensearch down", None)

    with pytest.raises(ConnectionError):
        s.search({})


def test_get_calls_client_with_id(mock_client):
    s = OpenSearchSearcher(client=mock_client, index_name="spree")
    mock_client.get.return_value = {"_id": "7", "found": True, "_source": {"name": "Tote"}}

    res = s.get("7")

    assert res["_source"] == {"name": "Tote"}
    mock_client.get.assert_called_once_with(index="spree", id="7")


def test_get_not_found_raises_resource_not_found(mock_client):
    """
    엔진의 NotFoundError 는 도메인 예외로 바뀌어야 함
    """
    s = OpenSearchSearcher(client=mock_client, index_name="spree")
    mock_client.get.side_effect = NotFoundError(404, "not_found", {"found": False})

    with pytest.raises(ResourceNotFound) as ei:
        s.get("missing")

    assert ei.value.resource == "product"
    assert "missing" in str(ei.value)
