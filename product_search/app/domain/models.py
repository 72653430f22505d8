"""
도메인 모델 정의.

- QueryParams: 상품 검색 입력(불변). 쿼리 언어에 대한 지식은 없다.
- Sorting: 정렬 모드
- SearchRequest: 컴파일된 검색 엔진 요청 문서

Pydantic v2 기반 모델이라 검증/직렬화가 용이합니다.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


JSONDict = dict[str, Any]

class Sorting(str, Enum):
    """정렬 모드. 알 수 없는 값은 default로 취급한다."""
    name_asc = "name_asc"
    name_desc = "name_desc"
    price_asc = "price_asc"
    price_desc = "price_desc"
    score = "score"
    default = "default"

    @classmethod
    def _missing_(cls, value: object) -> Sorting:
        return cls.default


def _unique(values) -> list:
    # 순서를 유지하면서 중복 제거
    return list(dict.fromkeys(values))


class QueryParams(BaseModel):
    """
    상품 검색 파라미터.

    생성 시점에 기본값이 모두 채워지므로 컴파일러는 None 분기 없이
    빈 값/빈 컬렉션만 다루면 된다. 잘못된 형태의 "빈" 입력(공백 검색어,
    빈 매핑, 뒤집힌 가격 범위 등)은 여기서 에러로 만들지 않는다.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: int = Field(0, alias="from", description="페이지 오프셋")
    query: str | None = Field(None, description="자유 텍스트 검색어")
    price_min: Decimal | None = Field(None, description="최소 가격")
    price_max: Decimal | None = Field(None, description="최대 가격")
    properties: dict[str, list[str]] = Field(
        default_factory=dict, description="속성 이름 -> 값 집합"
    )
    taxon_ids: list[int | str] = Field(default_factory=list, description="taxon id 집합")
    browse_mode: bool = Field(False, description="브라우즈 모드 (현재 컴파일 결과에 영향 없음)")
    sorting: Sorting = Field(Sorting.default, description="정렬 모드")

    @field_validator("from_", mode="before")
    @classmethod
    def _default_from(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator("properties", mode="before")
    @classmethod
    def _default_properties(cls, v: Any) -> Any:
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v
        # 숫자 값(예: size=42)도 "size||42" 토큰이 되도록 문자열로
        return {
            key: [str(x) for x in values] if isinstance(values, (list, tuple, set)) else values
            for key, values in v.items()
        }

    @field_validator("properties")
    @classmethod
    def _unique_property_values(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        return {key: _unique(values) for key, values in v.items()}

    @field_validator("taxon_ids", mode="before")
    @classmethod
    def _default_taxon_ids(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("taxon_ids")
    @classmethod
    def _unique_taxon_ids(cls, v: list[int | str]) -> list[int | str]:
        return _unique(v)

    @field_validator("browse_mode", mode="before")
    @classmethod
    def _default_browse_mode(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("sorting", mode="before")
    @classmethod
    def _coerce_sorting(cls, v: Any) -> Sorting:
        if isinstance(v, Sorting):
            return v
        return Sorting(v) if isinstance(v, str) else Sorting.default


class SearchRequest(BaseModel):
    """
    컴파일된 검색 요청 문서.

    query.bool.filter(속성/taxon/판매기간)와 최상위 filter(가격)는 서로 겹치지
    않는다. 최상위 filter는 집계(aggregation)에 영향을 주지 않는다.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    min_score: float
    query: JSONDict
    filter: JSONDict | None = None
    sort: list[str | JSONDict]
    from_: int = Field(0, alias="from")
    aggregations: JSONDict

    def to_body(self) -> JSONDict:
        """검색 클라이언트에 그대로 넘길 dict. filter가 없으면 키 자체를 뺀다."""
        body = self.model_dump(by_alias=True)
        if body["filter"] is None:
            del body["filter"]
        return body
