import pytest
from prelude.core.types import (
    InvalidArgument,
    require_callable,
    require_count,
    require_non_empty,
    require_sequence,
    require_type_name,
)


def test_require_callable_passes_through():
    assert require_callable(abs) is abs


def test_require_callable_reports_argument_name():
    with pytest.raises(InvalidArgument) as excinfo:
        require_callable(1, argument="predicate")

    assert excinfo.value.argument == "predicate"
    assert "predicate" in str(excinfo.value)


def test_require_count():
    assert require_count(3) == 3
    assert require_count(-1) == -1
    with pytest.raises(InvalidArgument):
        require_count(False)
    with pytest.raises(InvalidArgument):
        require_count(3.0)


def test_require_sequence_keeps_identity():
    data = (1, 2)
    assert require_sequence(data) is data
    assert require_sequence("abc") == "abc"
    assert require_sequence(range(3)) == range(3)


@pytest.mark.parametrize("value", [None, 5, {1, 2}, {"a": 1}, iter([1, 2])])
def test_require_sequence_rejects_non_sequences(value):
    with pytest.raises(InvalidArgument):
        require_sequence(value)


def test_require_non_empty():
    assert require_non_empty([0]) == [0]
    with pytest.raises(InvalidArgument):
        require_non_empty([])


def test_require_type_name():
    assert require_type_name("list") == "list"
    with pytest.raises(InvalidArgument):
        require_type_name("")


def test_rejection_is_logged_at_debug(caplog):
    from prelude.logger.logger import logger

    logger.propagate = True
    try:
        with caplog.at_level("DEBUG", logger="prelude"):
            with pytest.raises(InvalidArgument):
                require_type_name("")
    finally:
        logger.propagate = False

    assert any("type_name" in record.getMessage() for record in caplog.records)
