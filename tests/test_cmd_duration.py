import pytest

from promptparts.cmd_duration import render_time


def test_10s():
    assert render_time(10) == "10s"


def test_90s():
    assert render_time(90) == "1m30s"


def test_10110s():
    assert render_time(10110) == "2h48m30s"


def test_1d():
    assert render_time(86400) == "1d"


def test_zero_renders_empty():
    assert render_time(0) == ""


def test_negative_rejected():
    with pytest.raises(ValueError):
        render_time(-1)