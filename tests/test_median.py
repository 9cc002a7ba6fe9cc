import statistics

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.median import MedianFinder


def test_source_example():
    finder = MedianFinder()
    finder.add(3)
    finder.add(50)
    assert finder.median() == 26.5


def test_single_value_is_its_own_median():
    finder = MedianFinder()
    finder.add(17)
    assert finder.median() == 17
    assert len(finder) == 1


def test_empty_stream_raises():
    with pytest.raises(ValueError):
        MedianFinder().median()


@given(st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1, max_size=60))
def test_running_median_matches_statistics(values):
    finder = MedianFinder()
    for count, value in enumerate(values, start=1):
        finder.add(value)
        assert finder.median() == statistics.median(values[:count])
    assert len(finder) == len(values)