"""
상품 인덱스 필드 이름.

색인(매핑/문서 변환) 쪽과 검색 쿼리 컴파일러가 공유하는 계약입니다.
이름이 바뀌면 양쪽이 함께 바뀌어야 합니다.
"""

NAME = "name"                      # analyzed, 검색 boost 대상
UNTOUCHED_NAME = "untouched_name"  # keyword, 정렬 전용
DESCRIPTION = "description"
SKU = "sku"
PRICE = "price"
AVAILABLE_ON = "available_on"
DISCONTINUE_ON = "discontinue_on"
TAXON_IDS = "taxon_ids"            # 자신 + 조상 taxon id
PROPERTIES = "properties"          # "key||value" 복합 토큰

SCORE = "_score"

PROPERTY_TOKEN_SEPARATOR = "||"

# 엔진 date math: 현재 시각을 시간 단위로 내림 (엔진 측 쿼리 캐시 적중용)
NOW_ROUNDED_TO_HOUR = "now/1h"


def property_token(key: str, value: str) -> str:
    """속성 이름/값 쌍을 properties 필드에 저장되는 복합 토큰으로 인코딩한다."""
    return f"{key}{PROPERTY_TOKEN_SEPARATOR}{value}"
