import pytest
from pydantic import ValidationError

from objcraft import Rectangle, rectangle


def test_rectangle_fields_and_area():
    r = rectangle(10, 20)
    assert r.width == 10
    assert r.height == 20
    assert r.get_area() == 200


def test_area_is_computed_on_demand():
    r = rectangle(2, 3)
    r.width = 5
    assert r.get_area() == 15


def test_float_dimensions():
    assert rectangle(1.5, 4).get_area() == pytest.approx(6.0)


def test_rectangle_is_a_model():
    r = rectangle(10, 20)
    assert isinstance(r, Rectangle)
    assert r.model_dump() == {'width': 10, 'height': 20}


def test_non_numeric_dimensions_rejected():
    with pytest.raises(ValidationError):
        rectangle('wide', 20)
