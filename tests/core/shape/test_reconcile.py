# tests/core/shape/test_reconcile.py
"""Testes de reconciliação de chaves com os campos de um shape."""

from dataclasses import dataclass

import pytest

from atlas_config.core.config.errors import ClassValidationError
from atlas_config.core.shape import Field, Shape, materialize, reconcile_keys, required


class Target:
    def __init__(self):
        self.fooBarBaz = ""


def test_reconcile_matches_class_key_case():
    shape = Shape(Target, [Field("fooBarBaz")])
    assert reconcile_keys({"FOOBARBAZ": "baz"}, shape) == {"fooBarBaz": "baz"}


def test_reconcile_drops_undeclared_and_fills_missing_with_none():
    shape = Shape(Target, [Field("fooBarBaz"), Field("other")])
    out = reconcile_keys({"fooBARbaz": 1, "extra": 2}, shape)
    assert out == {"fooBarBaz": 1, "other": None}


def test_materialize_validates_by_default():
    @dataclass
    class Named:
        name: str = ""

    shape = Shape(Named, [Field("name", str, rules=(required(),))])

    assert materialize({"NAME": "x"}, shape).name == "x"
    with pytest.raises(ClassValidationError):
        materialize({}, shape)
    assert materialize({}, shape, validate=False).name is None
