"""
검색어 -> bool 쿼리의 must 절.
"""

from __future__ import annotations

from product_search.app.domain import fields
from product_search.app.domain.models import JSONDict

# name 필드에 가중치 5
SEARCH_FIELDS = (f"{fields.NAME}^5", fields.DESCRIPTION, fields.SKU)


def escape_query_string(text: str) -> str:
    """
    query_string 에 넘길 검색어의 큰따옴표를 한 번 escape 한다.

    query_string 파서가 한 단계는 스스로 풀기 때문에 여기서 정확히 한 단계만
    더해야 한다. 두 번 escape 하면 백슬래시가 문자 그대로 매칭된다.
    """
    return text.replace('"', '\\"')


def build_text_query(query: str | None) -> JSONDict:
    """
    검색어가 없거나 공백뿐이면 match_all, 아니면 query_string.

    - default_operator AND: 모든 단어가 어느 필드에든 매칭되어야 함
    - use_dis_max: 필드 점수 합산 대신 가장 높은 필드 점수 사용
    """
    if query is None or not query.strip():
        return {"match_all": {}}
    return {
        "query_string": {
            "query": escape_query_string(query),
            "fields": list(SEARCH_FIELDS),
            "default_operator": "AND",
            "use_dis_max": True,
        }
    }
