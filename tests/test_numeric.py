from fjira.numeric import clamp


def test_inside_range():
    assert clamp(5, 0, 10) == 5


def test_bounds():
    assert clamp(-3, 0, 10) == 0
    assert clamp(30, 0, 10) == 10


def test_empty_range_prefers_upper():
    assert clamp(0, 0, -1) == -1