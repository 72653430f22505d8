from __future__ import annotations

from contextlib import asynccontextmanager
from fastapi import FastAPI
from starlette.exceptions import HTTPException
from fastapi.exceptions import RequestValidationError
import logging

from product_search.app.api.routers import health, products
from product_search.app.api.deps import build_opensearch
from product_search.app.platform.config import settings
from product_search.app.platform.logging import setup_logging
from product_search.app.platform.errors import (
    http_exception_handler,
    validation_exception_handler,
    unhandled_exception_handler,
    domain_exception_handler
)
from product_search.app.platform import exceptions as domainex
from product_search.app.middlewares.request_context import RequestContextMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 로깅 등 공통 준비
    setup_logging(
        log_to_file=settings.LOG_TO_FILE,
        log_dir=settings.LOG_DIR,
        as_json=settings.LOG_AS_JSON,
        level=settings.LOG_LEVEL,
    )

    # OpenSearch 클라이언트를 한 번만 생성해서 공유
    app.state.opensearch = build_opensearch(settings.OPENSEARCH_HOST)
    try:
        yield
    finally:
        try:
            app.state.opensearch.close()
        except Exception:
            logger.warning("failed to close opensearch client", exc_info=True)

app = FastAPI(title="Product Search API", lifespan=lifespan)
app.include_router(health.router)
app.include_router(products.router, prefix="/api")

# Global Exception Filter
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(domainex.DomainError, domain_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# 요청 컨텍스트/액세스 로그 미들웨어
app.add_middleware(RequestContextMiddleware)
