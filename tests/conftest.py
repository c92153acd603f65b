import pytest


REFERENCE_TABLES = [
    "+-------+-------+-------+-------+-------+-------+\n"
    "| 100.0 |  10.0 |  10.0 |  10.0 |  10.0 |  10.0 |\n"
    "+-------+-------+-------+-------+-------+-------+\n",
    "+-------+-------+-------+-------+-------+-------+\n"
    "| 100.0 |  19.0 |  10.0 |  10.0 |  10.0 |   9.0 |\n"
    "+-------+-------+-------+-------+-------+-------+\n",
    "+-------+-------+-------+-------+-------+-------+\n"
    "| 100.0 |  26.2 |  10.9 |  10.0 |   9.9 |   8.2 |\n"
    "+-------+-------+-------+-------+-------+-------+\n",
]


@pytest.fixture
def reference_tables():
    """初值 10、6 段、K=0.1、左端 100 度：初始 + 两步后的三张表."""
    return list(REFERENCE_TABLES)
