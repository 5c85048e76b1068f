"""컴포넌트 재료 목록 차이 계산 테스트"""
import pytest

from app.core.exceptions import InvalidUsageError
from app.services.usage_reconciler import (
    UsageEntry,
    apply_changes,
    parse_usage_key,
    reconcile,
)


@pytest.fixture
def stored():
    return [
        UsageEntry(usage_id=1, ingredient_id=10, amount=100, position=0),
        UsageEntry(usage_id=2, ingredient_id=11, amount=50, position=1),
        UsageEntry(usage_id=3, ingredient_id=12, amount=5, position=2),
    ]


class TestParseUsageKey:
    def test_temp_id_is_new(self):
        assert parse_usage_key("temp-1697", 0) is None

    def test_numeric_id(self):
        assert parse_usage_key("42", 0) == 42
        assert parse_usage_key(42, 0) == 42

    def test_malformed_id(self):
        with pytest.raises(InvalidUsageError):
            parse_usage_key("abc", 3)


class TestReconcile:
    def test_unchanged_list_has_no_changes(self, stored):
        changes = reconcile(stored, list(stored))

        assert changes.is_empty

    def test_insert_update_remove(self, stored):
        proposed = [
            UsageEntry(usage_id=1, ingredient_id=10, amount=120, position=0),
            UsageEntry(usage_id=None, ingredient_id=13, amount=30, position=1),
            UsageEntry(usage_id=3, ingredient_id=12, amount=5, position=2),
        ]

        changes = reconcile(stored, proposed)

        assert changes.inserted == [proposed[1]]
        assert changes.updated == [proposed[0]]
        assert changes.removed == [2]

    def test_reordering_counts_as_update(self, stored):
        proposed = [
            UsageEntry(usage_id=2, ingredient_id=11, amount=50, position=0),
            UsageEntry(usage_id=1, ingredient_id=10, amount=100, position=1),
        ]

        changes = reconcile(stored, proposed)

        assert [entry.usage_id for entry in changes.updated] == [2, 1]
        assert changes.removed == [3]
        assert changes.inserted == []

    def test_empty_proposal_removes_everything(self, stored):
        changes = reconcile(stored, [])

        assert changes.removed == [1, 2, 3]

    def test_unknown_usage_id_is_rejected(self, stored):
        proposed = [UsageEntry(usage_id=99, ingredient_id=10, amount=1, position=0)]

        with pytest.raises(InvalidUsageError):
            reconcile(stored, proposed)

    def test_duplicate_usage_id_is_rejected(self, stored):
        proposed = [
            UsageEntry(usage_id=1, ingredient_id=10, amount=100, position=0),
            UsageEntry(usage_id=1, ingredient_id=10, amount=100, position=1),
        ]

        with pytest.raises(InvalidUsageError):
            reconcile(stored, proposed)

    @pytest.mark.parametrize(
        "proposed",
        [
            [],
            [UsageEntry(usage_id=None, ingredient_id=20, amount=1, position=0)],
            [
                UsageEntry(usage_id=3, ingredient_id=12, amount=5, position=0),
                UsageEntry(usage_id=None, ingredient_id=20, amount=1, position=1),
                UsageEntry(usage_id=1, ingredient_id=15, amount=100, position=2),
            ],
            [
                UsageEntry(usage_id=1, ingredient_id=10, amount=100, position=0),
                UsageEntry(usage_id=2, ingredient_id=11, amount=50, position=1),
                UsageEntry(usage_id=3, ingredient_id=12, amount=5, position=2),
                UsageEntry(usage_id=None, ingredient_id=10, amount=7, position=3),
            ],
        ],
    )
    def test_applying_changes_yields_proposed(self, stored, proposed):
        assert apply_changes(stored, reconcile(stored, proposed)) == proposed
