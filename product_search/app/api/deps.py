from __future__ import annotations

from urllib.parse import urlparse

from fastapi import Depends, Request
from opensearchpy import OpenSearch

from product_search.app.domain.ports import SearchPort
from product_search.app.domain.services.search_service import ProductSearchService
from product_search.app.adapters.searchers.opensearch_searcher import OpenSearchSearcher
from product_search.app.platform.config import settings


# ---- 클라이언트 ----
def build_opensearch(host: str) -> OpenSearch:
    u = urlparse(host)
    return OpenSearch(
        hosts=[
            {"host": u.hostname, "port": u.port or 9200, "scheme": u.scheme or "http"}
        ],
        verify_certs=False,
    )


def get_opensearch(request: Request) -> OpenSearch:
    """
    앱 시작 시 main.py의 lifespan에서 만들어 넣어둔 OpenSearch 클라이언트를 꺼낸다.
    없으면(테스트 등) 즉석 생성.
    """
    if hasattr(request.app.state, "opensearch"):
        return request.app.state.opensearch
    return build_opensearch(settings.OPENSEARCH_HOST)


def get_search_service(os: OpenSearch = Depends(get_opensearch)) -> ProductSearchService:
    """
    FastAPI DI에서 OpenSearch 클라이언트를 받아 ProductSearchService를 생성해 주입한다.
    """
    searcher: SearchPort = OpenSearchSearcher(os, settings.OPENSEARCH_INDEX)
    return ProductSearchService(searcher)
