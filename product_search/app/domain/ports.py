"""
도메인 포트(추상 인터페이스).

애플리케이션 서비스(유스케이스)는 아래 포트(추상)에만 의존합니다.
구체 구현은 adapters 레이어에서 제공하고, FastAPI DI로 주입합니다.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol


class SearchPort(Protocol):
    """
    컴파일된 검색 요청을 실행하고, 단건 조회를 수행합니다.
    """
    def search(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        Args:
            body: 컴파일된 검색 요청 문서
        Returns:
            Dict[str, Any]: 검색 엔진 원본 응답
        """
        ...

    def get(self, product_id: str) -> Dict[str, Any]:
        """
        Returns:
            Dict[str, Any]: 상품 문서 원본 응답
        """
        ...
