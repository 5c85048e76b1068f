"""공통 스키마"""
from pydantic import BaseModel


class HealthStatus(BaseModel):
    """서비스 상태"""

    status: str
