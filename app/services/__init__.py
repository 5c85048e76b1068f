"""Services package - 비즈니스 로직 (카탈로그 저장소 / 영양 정보 집계)"""
# noqa: D104

from . import catalog_service
from . import nutrition_service
from . import usage_reconciler

__all__ = [
    "catalog_service",
    "nutrition_service",
    "usage_reconciler",
]
