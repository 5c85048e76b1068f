"""API v1 라우터 - 재료 / 컴포넌트 / 레시피"""
from fastapi import APIRouter

from app.api.v1.routes import components, health, ingredients, recipes

api_router = APIRouter()

# 상태 확인
api_router.include_router(health.router, tags=["health"])

# 재료
api_router.include_router(ingredients.router, tags=["ingredients"])

# 컴포넌트 (영양 정보 / 원가 집계)
api_router.include_router(components.router, tags=["components"])

# 레시피 (영양 정보 / 원가 / 무게 집계)
api_router.include_router(recipes.router, tags=["recipes"])
