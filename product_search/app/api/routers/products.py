from decimal import Decimal
from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from product_search.app.api.deps import get_search_service, ProductSearchService
from product_search.app.domain.models import QueryParams
from product_search.app.platform.response import ok
from typing import Dict, List, Any
import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])

class ProductSearchRequest(BaseModel):
    """
    상품 검색 요청 바디
    """
    model_config = ConfigDict(populate_by_name=True)

    from_: int = Field(0, alias="from", ge=0, description="페이지 오프셋")
    query: str | None = Field(None, description="검색어 (비어 있으면 전체)")
    price_min: Decimal | None = Field(None, description="최소 가격 (price_max와 함께 지정)")
    price_max: Decimal | None = Field(None, description="최대 가격 (price_min과 함께 지정)")
    properties: Dict[str, List[str | int | float]] = Field(
        default_factory=dict, description="속성 필터. 예: {\"color\": [\"red\", \"blue\"]}"
    )
    taxon_ids: List[int | str] = Field(default_factory=list, description="카테고리(taxon) id 목록")
    browse_mode: bool = Field(False, description="브라우즈 모드")
    sorting: str | None = Field(
        None,
        description="name_asc | name_desc | price_asc | price_desc | score (그 외는 기본 정렬)",
    )

    def to_params(self) -> QueryParams:
        return QueryParams.model_validate(self.model_dump())

class ApiResponse(BaseModel):
    """
    공통 응답
    """
    success: bool = Field(..., description="성공 여부")
    message: str = Field(..., description="결과 메시지")
    data: Dict[str, Any] = Field(..., description="검색 엔진 응답 또는 컴파일된 요청 문서")
    trace_id: str | None = Field(None, description="요청 ID")

@router.post(
    "/search",
    summary="상품 검색",
    description=(
        "검색어, 가격 범위, 속성/카테고리 필터, 정렬로 상품을 검색합니다. "
        "응답에는 가격 통계와 속성/카테고리 facet 집계가 포함됩니다."
    ),
    operation_id="searchProducts",
    status_code=200,
    response_model=ApiResponse,
    responses={
        400: {"description": "잘못된 요청 값"},
        500: {"description": "서버 내부 오류"},
    },
)
def search(req: ProductSearchRequest, svc: ProductSearchService = Depends(get_search_service)):
    logger.info("ProductSearchRequest: %s", req)
    result = svc.search(req.to_params())
    return ApiResponse(**ok(result, message="검색 성공"))

@router.post(
    "/search/compile",
    summary="상품 검색 요청 문서 미리보기",
    description="검색을 실행하지 않고 OpenSearch에 보낼 요청 문서만 반환합니다.",
    operation_id="compileProductSearch",
    status_code=200,
    response_model=ApiResponse,
)
def compile_search(req: ProductSearchRequest, svc: ProductSearchService = Depends(get_search_service)):
    body = svc.compile(req.to_params())
    return ApiResponse(**ok(body, message="컴파일 성공"))

@router.get(
    "/{product_id}",
    summary="상품 단건 조회",
    operation_id="getProduct",
    status_code=200,
    response_model=ApiResponse,
    responses={
        404: {"description": "상품 없음"},
        500: {"description": "서버 내부 오류"},
    },
)
def get_product(product_id: str, svc: ProductSearchService = Depends(get_search_service)):
    result = svc.get(product_id)
    return ApiResponse(**ok(result, message="조회 성공"))
