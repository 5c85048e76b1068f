"""
컴포넌트 재료 목록 갱신 - 저장된 목록과 요청 목록의 차이 계산

요청 목록의 각 항목은 다음 중 하나입니다.
- id가 "temp-"로 시작: 새로 추가된 재료 (inserted)
- 저장된 usage id와 일치: 유지 (재료/양/순서가 바뀌었으면 updated)
저장된 usage 중 요청 목록에 없는 것은 삭제(removed)됩니다.

apply_changes(stored, reconcile(stored, proposed)) == proposed
"""
from dataclasses import dataclass, field
from typing import Optional

from app.core.exceptions import InvalidUsageError

TEMP_ID_PREFIX = "temp-"


@dataclass(frozen=True)
class UsageEntry:
    """usage 한 줄 (usage_id가 None이면 아직 저장되지 않은 항목)"""

    usage_id: Optional[int]
    ingredient_id: int
    amount: Optional[float]
    position: int


@dataclass
class UsageChanges:
    inserted: list[UsageEntry] = field(default_factory=list)
    updated: list[UsageEntry] = field(default_factory=list)
    removed: list[int] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.inserted or self.updated or self.removed)


def parse_usage_key(key: str, position: int) -> Optional[int]:
    """요청 id를 usage_id로 변환 ("temp-..."는 None)"""
    key = str(key)
    if key.startswith(TEMP_ID_PREFIX):
        return None
    try:
        return int(key)
    except ValueError as exc:
        raise InvalidUsageError(f"Invalid usage id '{key}' at position {position}") from exc


def reconcile(stored: list[UsageEntry], proposed: list[UsageEntry]) -> UsageChanges:
    """저장된 목록을 요청 목록으로 바꾸기 위한 변경 사항 계산"""
    stored_by_id = {entry.usage_id: entry for entry in stored}
    changes = UsageChanges()
    seen: set[int] = set()

    for entry in proposed:
        if entry.usage_id is None:
            changes.inserted.append(entry)
            continue
        if entry.usage_id not in stored_by_id:
            raise InvalidUsageError(f"Usage '{entry.usage_id}' does not belong to this component")
        if entry.usage_id in seen:
            raise InvalidUsageError(f"Usage '{entry.usage_id}' appears more than once")
        seen.add(entry.usage_id)
        if entry != stored_by_id[entry.usage_id]:
            changes.updated.append(entry)

    changes.removed = [entry.usage_id for entry in stored if entry.usage_id not in seen]
    return changes


def apply_changes(stored: list[UsageEntry], changes: UsageChanges) -> list[UsageEntry]:
    """변경 사항을 저장된 목록에 적용 (position 순서로 정렬)"""
    removed = set(changes.removed)
    kept = {entry.usage_id: entry for entry in stored if entry.usage_id not in removed}
    for entry in changes.updated:
        kept[entry.usage_id] = entry
    return sorted([*kept.values(), *changes.inserted], key=lambda entry: entry.position)
