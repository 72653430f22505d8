"""
컴파일된 상품 검색 요청을 OpenSearch에 실행하는 SearchPort 구현체.
"""

from __future__ import annotations

import logging
from typing import Any, Dict
from opensearchpy import OpenSearch
from opensearchpy.exceptions import NotFoundError
from product_search.app.domain.ports import SearchPort
from product_search.app.platform.exceptions import ResourceNotFound

logger = logging.getLogger(__name__)

class OpenSearchSearcher(SearchPort):

    def __init__(self, client: OpenSearch, index_name: str) -> None:
        self.client = client
        self.index_name = index_name

    def search(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        Opensearch에 검색을 수행하여 결과를 반환한다.

        Args:
            body (Dict[str, Any]): 컴파일된 검색 요청 문서
        Returns:
            Dict[str, Any]: 검색 결과(hits, aggregations, took, timed_out)
        """
        return self.client.search(index=self.index_name, body=body)

    def get(self, product_id: str) -> Dict[str, Any]:
        """
        상품 문서 1건을 id로 조회한다.

        Raises:
            ResourceNotFound: 문서가 없을 때
        """
        try:
            return self.client.get(index=self.index_name, id=product_id)
        except NotFoundError as e:
            logger.info("product not found: index=%s id=%s", self.index_name, product_id)
            raise ResourceNotFound("product", f"product {product_id} not found") from e
