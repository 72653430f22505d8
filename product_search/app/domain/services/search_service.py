# product_search/app/domain/services/search_service.py
"""
ProductSearchService
====================

상품 검색 유스케이스.

Flow:
    QueryParams → compile_query → SearchRequest → SearchPort

- 도메인은 **Port(인터페이스)** 에만 의존합니다. (DIP)
- 구현체는 adapters 레이어에서 주입(의존성 주입; DI)합니다.

예시:
    svc = ProductSearchService(searcher)
    result = svc.search(QueryParams(query="shirt", sorting="price_asc"))
"""

from __future__ import annotations
from typing import Any, Dict

import logging

from product_search.app.domain.ports import SearchPort
from product_search.app.domain.models import QueryParams
from product_search.app.domain.query.compiler import compile_query
from product_search.app.platform.exceptions import InvalidInput

logger = logging.getLogger(__name__)

class ProductSearchService:

    def __init__(
        self,
        searcher: SearchPort) -> None:
        self._searcher = searcher

    # ================= public API =================
    def compile(self, params: QueryParams) -> Dict[str, Any]:
        """
        검색 엔진에 보낼 요청 문서를 만든다. (실행하지 않음)
        """
        return compile_query(params).to_body()

    def search(self, params: QueryParams) -> Dict[str, Any]:
        """
        검색을 수행하는 메서드.
        Args:
            params: QueryParams  : 검색 파라미터
        Returns:
            Dict[str, Any]: 검색 엔진 원본 응답 (hits, aggregations)
        """
        body = self.compile(params)
        logger.info(
            "service.search: query=%s from=%s sorting=%s properties=%s taxon_ids=%s",
            params.query, params.from_, params.sorting.value,
            params.properties, params.taxon_ids,
        )
        logger.debug("service.search: body=%s", body)
        return self._searcher.search(body)

    def get(self, product_id: str) -> Dict[str, Any]:
        """
        상품 1건 조회. 검색 쿼리 컴파일과 무관한 단순 위임.
        """
        if not product_id or not product_id.strip():
            raise InvalidInput("product_id must not be blank")
        logger.info("service.get: product_id=%s", product_id)
        return self._searcher.get(product_id)
