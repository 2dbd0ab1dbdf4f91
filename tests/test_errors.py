import pytest

from ckmeans.clustering import ckmeans
from ckmeans.errors import (
    CkmeansError,
    ConversionError,
    HighWindowError,
    LowWindowError,
    TooFewClassesError,
    TooManyClassesError,
)

TOO_FEW = "You can't specify 0 classes. Try a positive number"
TOO_MANY = "You can't generate more classes than there are data values"
CONVERSION = "An error occurred during numeric conversion"
LOW_WINDOW = "Couldn't get last element of low window"
HIGH_WINDOW = "Couldn't get first element of high window"


def test_default_messages():
    errors = [
        (TooFewClassesError(), TOO_FEW),
        (TooManyClassesError(), TOO_MANY),
        (ConversionError(), CONVERSION),
        (LowWindowError(), LOW_WINDOW),
        (HighWindowError(), HIGH_WINDOW),
    ]
    for err, expected in errors:
        assert str(err) == expected
        assert err.message == expected


def test_all_errors_share_base():
    errors = [
        (TooFewClassesError(), TooFewClassesError, TOO_FEW),
        (TooManyClassesError(), TooManyClassesError, TOO_MANY),
        (ConversionError(), ConversionError, CONVERSION),
        (LowWindowError(), LowWindowError, LOW_WINDOW),
        (HighWindowError(), HighWindowError, HIGH_WINDOW),
    ]
    for err, cls, expected in errors:
        assert isinstance(err, cls)
        assert isinstance(err, CkmeansError)
        assert err.message == expected


def test_zero_classes_raises_value_error():
    with pytest.raises(ValueError) as excinfo:
        ckmeans([1.0, 2.0, 3.0], 0)
    assert isinstance(excinfo.value, TooFewClassesError)
    assert isinstance(excinfo.value, CkmeansError)
    assert str(excinfo.value) == TOO_FEW


def test_too_many_classes_raises_value_error():
    with pytest.raises(ValueError) as excinfo:
        ckmeans([1.0, 2.0], 3)
    assert isinstance(excinfo.value, TooManyClassesError)
    assert isinstance(excinfo.value, CkmeansError)
    assert str(excinfo.value) == TOO_MANY


def test_internal_errors_are_not_value_errors():
    errors = [
        (ConversionError(), CONVERSION),
        (LowWindowError(), LOW_WINDOW),
        (HighWindowError(), HIGH_WINDOW),
    ]
    for err, expected in errors:
        assert isinstance(err, CkmeansError)
        assert not isinstance(err, ValueError)
        assert err.message == expected


def test_custom_message_overrides_default():
    err = ConversionError("bad cast")
    assert str(err) == "bad cast"
    assert err.message == "bad cast"


def test_error_carries_message():
    err = TooManyClassesError()
    assert "more classes than there are" in str(err)
    assert err.message == TOO_MANY


def test_distinct_errors_are_not_interchangeable():
    low = LowWindowError()
    high = HighWindowError()
    assert not isinstance(low, HighWindowError)
    assert not isinstance(high, LowWindowError)
    assert low.message != high.message
    assert low.message == LOW_WINDOW
    assert high.message == HIGH_WINDOW