"""Tests for accumulate, group_by, spread_map and map."""

import operator

import pytest

import pyoiter as po


class TestAccumulate:
    """Test Iter.accumulate."""

    def test_running_fold(self) -> None:
        """Test that each value folds the previous result with the next input."""

        def combine(acc: str, value: str) -> str:
            return f"({acc}+{value})"

        result = po.Iter("a", "b", "c").accumulate(combine).to_list()
        assert result == ["a", combine("a", "b"), combine(combine("a", "b"), "c")]

    def test_default_addition(self) -> None:
        """Test the default addition."""
        assert po.Iter(1, 2, 3, 4).accumulate().to_list() == [1, 3, 6, 10]

    def test_custom_operator(self) -> None:
        """Test another binary operator."""
        assert po.Iter(1, 2, 3, 4).accumulate(operator.mul).to_list() == [1, 2, 6, 24]

    def test_empty(self) -> None:
        """Test that an empty source gives nothing."""
        assert po.Iter().accumulate().to_list() == []

    def test_single(self) -> None:
        """Test that the first value is yielded unchanged."""
        assert po.Iter([1]).accumulate().to_list() == [[1]]


class TestGroupBy:
    """Test Iter.group_by."""

    def test_consecutive_runs(self) -> None:
        """Test that only consecutive equal keys are grouped."""
        result = po.Iter.from_("AAABBAC").group_by().to_list()
        assert [(g.key, g.values) for g in result] == [
            ("A", ["A", "A", "A"]),
            ("B", ["B", "B"]),
            ("A", ["A"]),
            ("C", ["C"]),
        ]

    def test_key_function(self) -> None:
        """Test grouping by a computed key."""
        result = po.Iter("apple", "avocado", "banana", "blueberry", "cherry")
        groups = result.group_by(operator.itemgetter(0)).to_list()
        assert [g.key for g in groups] == ["a", "b", "c"]
        assert groups[1].values == ["banana", "blueberry"]

    def test_groups_are_named_tuples(self) -> None:
        """Test the Group type."""
        (group,) = po.Iter(1, 1).group_by().to_list()
        assert isinstance(group, po.Group)
        key, values = group
        assert (key, values) == (1, [1, 1])
        assert repr(group) == "(1, [1, 1])"

    def test_empty(self) -> None:
        """Test that an empty source gives no group."""
        assert po.Iter().group_by().to_list() == []

    def test_none_key(self) -> None:
        """Test that None is a regular key."""
        result = po.Iter(None, None, 0).group_by().to_list()
        assert [g.key for g in result] == [None, 0]

    def test_first_key_always_opens_a_group(self) -> None:
        """Test that a key equal to everything still names the first group."""

        class Anything:
            def __eq__(self, other: object) -> bool:
                return True

            __hash__ = object.__hash__

        anything = Anything()
        (group,) = po.Iter(1, 2).group_by(lambda _: anything).to_list()
        assert group.key is anything
        assert group.values == [1, 2]

    def test_group_pulls_one_value_ahead(self, tracked) -> None:  # noqa: ANN001
        """Test that a group is complete once the next key is seen."""
        groups = iter(po.Iter.from_(tracked.source("aab")).group_by())
        assert next(groups) == ("a", ["a", "a"])
        assert tracked.pulled == ["a", "a", "b"]

    def test_rejects_non_callables(self) -> None:
        """Test that a non-callable key raises NotCallableError."""
        with pytest.raises(po.NotCallableError):
            po.Iter(1).group_by("key")  # type: ignore[arg-type]


class TestSpreadMap:
    """Test Iter.spread_map."""

    def test_spreads_values(self) -> None:
        """Test that each value is spread as positional arguments."""
        result = po.Iter((1, 2), (3, 4), [5, 6]).spread_map(operator.add)
        assert result.to_list() == [3, 7, 11]

    def test_after_zip(self) -> None:
        """Test the usual zip then spread pipeline."""
        result = po.Iter(1, 2).zip([3, 4], [5, 6]).spread_map(lambda a, b, c: a * b * c)
        assert result.to_list() == [15, 48]

    def test_rejects_non_callables(self) -> None:
        """Test that a non-callable raises NotCallableError, a TypeError."""
        with pytest.raises(po.NotCallableError, match="is not callable"):
            po.Iter((1, 2)).spread_map(42)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            po.Iter((1, 2)).spread_map(None)  # type: ignore[arg-type]


class TestMap:
    """Test Iter.map."""

    def test_map(self) -> None:
        """Test mapping a function."""
        assert po.Iter.range(3).map(str).to_list() == ["0", "1", "2"]

    def test_lazy(self) -> None:
        """Test that nothing is computed before values are requested."""
        calls: list[int] = []
        mapped = po.Iter(1, 2).map(calls.append)
        assert calls == []
        mapped.to_list()
        assert calls == [1, 2]
