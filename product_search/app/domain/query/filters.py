"""
필터 절 구성.

두 종류의 필터를 만든다.

- facet 영향 필터 (query.bool.filter): 속성, taxon, 판매 시작, 판매 종료.
  스코어링 쿼리 안쪽에 있으므로 집계도 같은 결과 집합 위에서 계산된다.
- facet 중립 필터 (최상위 filter): 가격 범위.
  슬라이더 값이 집계 카운트를 줄이지 않도록 바깥쪽에 둔다.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Mapping

from product_search.app.domain import fields
from product_search.app.domain.models import JSONDict, QueryParams


def build_property_filters(properties: Mapping[str, Iterable[str]]) -> list[JSONDict]:
    """
    {"color": ["red", "blue"], "size": ["M"]} ->
        {"terms": {"properties": ["color||red", "color||blue"]}}
        {"terms": {"properties": ["size||M"]}}

    키 사이에는 AND, 같은 키의 값 사이에는 OR 관계가 된다.
    값이 없는 키는 절을 만들지 않는다.
    """
    clauses = []
    for key, values in properties.items():
        tokens = [fields.property_token(key, value) for value in values]
        if tokens:
            clauses.append({"terms": {fields.PROPERTIES: tokens}})
    return clauses


def build_taxon_filter(taxon_ids: Iterable[int | str]) -> JSONDict | None:
    # 빈 terms 는 "아무것도 매칭 안 됨"이 되므로 절 자체를 생략
    ids = list(taxon_ids)
    if not ids:
        return None
    return {"terms": {fields.TAXON_IDS: ids}}


def availability_filter() -> JSONDict:
    """판매 시작된 상품만."""
    return {"range": {fields.AVAILABLE_ON: {"lte": fields.NOW_ROUNDED_TO_HOUR}}}


def discontinuation_filter() -> JSONDict:
    """판매 종료일이 없거나 아직 지나지 않은 상품만."""
    return {
        "bool": {
            "should": [
                {"bool": {"must_not": {"exists": {"field": fields.DISCONTINUE_ON}}}},
                {"range": {fields.DISCONTINUE_ON: {"gte": fields.NOW_ROUNDED_TO_HOUR}}},
            ]
        }
    }


def build_facet_filter(params: QueryParams) -> JSONDict | None:
    """
    facet 영향 필터들의 AND 결합.

    browse_mode 는 배치를 바꾸지 않는다. taxon 필터는 항상 안쪽에 들어간다.
    """
    must = build_property_filters(params.properties)
    taxon = build_taxon_filter(params.taxon_ids)
    if taxon is not None:
        must.append(taxon)
    must.append(availability_filter())
    must.append(discontinuation_filter())
    # 판매 기간 필터가 항상 들어가므로 실제로는 비지 않음
    if not must:
        return None
    return {"bool": {"must": must}}


def build_price_filter(price_min: Decimal | None, price_max: Decimal | None) -> JSONDict | None:
    """
    두 값이 모두 있고 price_min < price_max 일 때만 범위 필터를 만든다.
    한쪽만 있거나 뒤집힌 범위는 에러 없이 무시한다.

    경계값은 JSON 숫자(float)로 내보낸다. 가격 필드가 double 로 색인되어 있어
    float 로 표현할 수 없는 자릿수는 엔진에서도 구분되지 않는다.
    """
    if price_min is None or price_max is None:
        return None
    if not price_min < price_max:
        return None
    return {"range": {fields.PRICE: {"gte": float(price_min), "lte": float(price_max)}}}
