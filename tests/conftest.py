import pytest

from arclet.resulttree import lang


@pytest.fixture(autouse=True)
def _en_us():
    old = lang.current
    lang.select("en-US")
    yield
    lang.select(old)
