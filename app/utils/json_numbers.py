"""JSON 직렬화용 숫자 처리 유틸리티"""
import math
from typing import Any


def finite_or_none(value: Any) -> Any:
    """
    inf / nan 값을 None으로 바꿔 JSON으로 보낼 수 있게 변환

    serving / packageSize가 0인 재료는 환산 결과가 inf 또는 nan이 될 수 있고,
    JSON에는 이를 표현할 방법이 없어 null로 내보냅니다.
    dict / list는 재귀적으로 처리합니다.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: finite_or_none(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [finite_or_none(item) for item in value]
    return value
