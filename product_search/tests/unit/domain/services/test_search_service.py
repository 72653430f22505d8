from unittest.mock import MagicMock
import pytest

from product_search.app.domain.models import QueryParams
from product_search.app.domain.services.search_service import ProductSearchService
from product_search.app.platform.exceptions import InvalidInput, ResourceNotFound


@pytest.fixture
def mock_searcher():
    return MagicMock()


@pytest.fixture
def service(mock_searcher):
    return ProductSearchService(searcher=mock_searcher)


def test_search_passes_compiled_body_to_searcher(service, mock_searcher):
    """
    파라미터를 컴파일한 문서가 그대로 검색 포트에 전달되는지 검증
    """

    # given
    mock_searcher.search.return_value = {"hits": {"total": {"value": 0}, "hits": []}}
    params = QueryParams(query="shirt", taxon_ids=[3], sorting="price_asc")

    # when
    res = service.search(params)

    # then
    assert res == {"hits": {"total": {"value": 0}, "hits": []}}
    mock_searcher.search.assert_called_once()
    (body,), _ = mock_searcher.search.call_args
    assert body == service.compile(params)
    assert body["query"]["bool"]["must"]["query_string"]["query"] == "shirt"
    assert body["sort"][0] == {"price": {"order": "asc"}}


def test_compile_does_not_call_searcher(service, mock_searcher):
    body = service.compile(QueryParams())

    assert body["query"]["bool"]["must"] == {"match_all": {}}
    mock_searcher.search.assert_not_called()


def test_search_propagates_exception(service, mock_searcher):
    """
    검색 포트가 예외를 던지면 서비스도 그대로 전파해야 함
    """

    # given
    mock_searcher.search.side_effect = RuntimeError("opensearch down")

    # when / then
    with pytest.raises(RuntimeError) as ei:
        _ = service.search(QueryParams(query="shoes"))

    assert "opensearch down" in str(ei.value)


def test_get_delegates_to_searcher(service, mock_searcher):
    mock_searcher.get.return_value = {"_id": "42", "found": True, "_source": {"name": "Mug"}}

    res = service.get("42")

    assert res["_source"]["name"] == "Mug"
    mock_searcher.get.assert_called_once_with("42")


@pytest.mark.parametrize("product_id", ["", "   "])
def test_get_blank_id_raises_invalid_input(service, mock_searcher, product_id):
    with pytest.raises(InvalidInput):
        service.get(product_id)
    mock_searcher.get.assert_not_called()


def test_get_propagates_not_found(service, mock_searcher):
    mock_searcher.get.side_effect = ResourceNotFound("product")

    with pytest.raises(ResourceNotFound):
        service.get("404")
