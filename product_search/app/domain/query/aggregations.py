from __future__ import annotations

from product_search.app.domain import fields
from product_search.app.domain.models import JSONDict

# 사실상 무제한 버킷
MAX_BUCKETS = 1000000


def build_aggregations() -> JSONDict:
    """입력과 무관하게 항상 같은 세 개의 집계."""
    return {
        "price": {"stats": {"field": fields.PRICE}},
        "properties": {
            "terms": {
                "field": fields.PROPERTIES,
                "order": {"_count": "asc"},
                "size": MAX_BUCKETS,
            }
        },
        "taxon_ids": {"terms": {"field": fields.TAXON_IDS, "size": MAX_BUCKETS}},
    }
