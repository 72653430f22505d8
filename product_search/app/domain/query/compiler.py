"""
QueryParams -> SearchRequest 컴파일러.

각 단계(text / filter / sort / aggregation)는 서로의 결과를 보지 않는 순수 함수이고,
필드 이름 계약(fields 모듈)으로만 맞물린다. 결과 문서는 마지막에 한 번 조립한다.

    {
      min_score: 0.1,
      query: { bool: { must: {...}, filter: { bool: { must: [...] } } } },
      filter: { range: { price: { gte, lte } } },      # 가격 범위가 유효할 때만
      sort: [...],
      from: 0,
      aggregations: { price, properties, taxon_ids }
    }
"""

from __future__ import annotations

from product_search.app.domain.models import QueryParams, SearchRequest
from product_search.app.domain.query.aggregations import build_aggregations
from product_search.app.domain.query.filters import build_facet_filter, build_price_filter
from product_search.app.domain.query.sorting import resolve_sort
from product_search.app.domain.query.text_query import build_text_query

MIN_SCORE = 0.1


def compile_query(params: QueryParams) -> SearchRequest:
    must = build_text_query(params.query)
    facet_filter = build_facet_filter(params)
    price_filter = build_price_filter(params.price_min, params.price_max)

    bool_query = {"must": must}
    if facet_filter is not None:
        bool_query["filter"] = facet_filter

    return SearchRequest(
        min_score=MIN_SCORE,
        query={"bool": bool_query},
        filter=price_filter,
        sort=resolve_sort(params.sorting),
        from_=params.from_,
        aggregations=build_aggregations(),
    )
