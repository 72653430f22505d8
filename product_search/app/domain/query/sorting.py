from __future__ import annotations

from product_search.app.domain import fields
from product_search.app.domain.models import JSONDict, Sorting


def _asc(field: str) -> JSONDict:
    return {field: {"order": "asc"}}


def _desc(field: str) -> JSONDict:
    return {field: {"order": "desc"}}


def resolve_sort(sorting: Sorting | str | None) -> list[str | JSONDict]:
    """
    정렬 모드 -> 정렬 키 목록. 모든 모드가 점수를 tie-break 로 포함한다.
    이름 정렬은 항상 분석되지 않은 untouched_name 을 쓴다.
    """
    mode = sorting if isinstance(sorting, Sorting) else Sorting(sorting)
    match mode:
        case Sorting.name_asc:
            return [_asc(fields.UNTOUCHED_NAME), _asc(fields.PRICE), fields.SCORE]
        case Sorting.name_desc:
            return [_desc(fields.UNTOUCHED_NAME), _asc(fields.PRICE), fields.SCORE]
        case Sorting.price_asc:
            return [_asc(fields.PRICE), _asc(fields.UNTOUCHED_NAME), fields.SCORE]
        case Sorting.price_desc:
            return [_desc(fields.PRICE), _asc(fields.UNTOUCHED_NAME), fields.SCORE]
        case _:
            return [fields.SCORE, _asc(fields.UNTOUCHED_NAME), _asc(fields.PRICE)]
