import pytest

import lazylist as ll
from lazylist import LazyList


class TestConstruction:
    """Test the list builders"""

    def test_empty(self):
        """Test that empty() has no elements and zero length"""
        e = ll.empty()
        assert len(e) == 0
        assert ll.to_list(e) == []
        assert ll.is_empty(e)
        assert ll.to_list(LazyList.empty()) == []

    def test_from_values(self):
        """Test building from variadic values"""
        xs = ll.from_values(3, 1, 2)
        assert len(xs) == 3
        assert ll.to_list(xs) == [3, 1, 2]

    def test_from_array(self):
        """Test building from an existing sequence"""
        xs = ll.from_array([1, 2, 6, 10, 12, 202])
        assert len(xs) == 6
        assert ll.to_list(xs) == [1, 2, 6, 10, 12, 202]

    def test_from_array_returns_lazy_list_unchanged(self):
        """Test that an existing LazyList is passed through"""
        xs = ll.from_values(1, 2)
        assert ll.from_array(xs) is xs

    def test_from_array_snapshots_mutable_input(self):
        """Test that later mutation of the caller's list cannot change the LazyList"""
        source = [1, 2, 3]
        xs = ll.from_array(source)
        source.append(4)
        source[0] = 100
        assert len(xs) == 3
        assert ll.to_list(xs) == [1, 2, 3]

    def test_from_array_makes_generators_replayable(self):
        """Test that a one-shot generator becomes a replayable list"""
        xs = ll.from_array(x * x for x in range(4))
        assert ll.to_list(xs) == [0, 1, 4, 9]
        assert ll.to_list(xs) == [0, 1, 4, 9], "Second pass should replay the same elements"

    def test_from_array_keeps_range(self):
        """Test that a range is used directly"""
        xs = ll.from_array(range(5, 10))
        assert len(xs) == 5
        assert ll.to_list(xs) == [5, 6, 7, 8, 9]

    def test_l_normalizes_arguments(self):
        """Test the variadic convenience constructor"""
        assert ll.to_list(ll.l([1, 2, 3])) == [1, 2, 3]
        assert ll.to_list(ll.l(1, 2, 3)) == [1, 2, 3]
        assert ll.to_list(ll.l()) == []
        assert ll.to_list(ll.l(5)) == [5]

    def test_l_with_several_lists_keeps_them_as_elements(self):
        """Test that several list arguments become nested elements"""
        xs = ll.l([1], [2, 3])
        assert len(xs) == 2
        assert ll.equals(ll.head(xs), ll.l(1))

    def test_strings_are_scalars(self):
        """Test that a single string argument is a single element"""
        xs = ll.l("abc")
        assert len(xs) == 1
        assert ll.head(xs) == "abc"

    def test_to_list_rejects_non_lists(self):
        """Test that scalars are not coerced into lists"""
        with pytest.raises(ll.TypeMismatchError):
            ll.to_list(42)
