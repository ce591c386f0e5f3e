from soapcalc.utils import clamp_batch_weight, coerce_number, format_number


def test_coerce_number():
    assert coerce_number("12.5") == 12.5
    assert coerce_number(3) == 3.0
    assert coerce_number("") == 0
    assert coerce_number("abc") == 0
    assert coerce_number(None) == 0
    assert coerce_number(float("nan")) == 0


def test_clamp_batch_weight():
    assert clamp_batch_weight(800) == 800
    assert clamp_batch_weight(0.2) == 1
    assert clamp_batch_weight("") == 1


def test_format_number():
    assert format_number(17.328, 3) == "17.328"
    assert format_number(36.48) == "36.5"
    assert format_number("n/a") == "n/a"
