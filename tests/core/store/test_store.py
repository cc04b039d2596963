# tests/core/store/test_store.py
"""
Testes do ConfigStore.

Este módulo valida a consulta por caminho e a materialização tipada
do store, incluindo as opções de normalização de chaves.

Os testes asseguram que:
- valores existentes são retornados e ausentes resultam em None
- a consulta ignora caixa por padrão e respeita `case_sensitive_keys`
- `remove_key_underscores` / `remove_key_hyphens` normalizam as chaves
- shapes são instanciados e validados conforme `validate_class`
- o mapeamento armazenado nunca é mutado por consultas
- chaves não-string (ex.: inteiros do YAML) são consultáveis como strings
"""

import asyncio
import copy
from dataclasses import dataclass, field

import pytest

from atlas_config.core.config.errors import ClassValidationError
from atlas_config.core.shape import Field, Shape, min_length, required
from atlas_config.core.builder import ConfigAggregator
from atlas_config.core.store import ConfigStore
from tests.core.shape._postponed_shapes import PostponedDbConfig


@dataclass
class BarConfig:
    bar: str = ""


@dataclass
class StrictBarConfig:
    bar: str = field(default="", metadata={"rules": (required(), min_length(5))})


def test_get_existing_value(sample_config):
    store = ConfigStore(sample_config, {})
    assert store.get("foo.bar") == "baz"


def test_get_missing_value_returns_none(sample_config):
    store = ConfigStore(sample_config)
    assert store.get("foo.baz") is None
    assert store.get("nope.deeper") is None


def test_get_without_path_returns_whole_config(sample_config):
    store = ConfigStore(sample_config)
    assert store.get() == sample_config
    assert store.get("") == sample_config


def test_get_returns_instance_of_shape(sample_config):
    """
    Verifica que o shape informado é instanciado com os dados resolvidos.

    Invariantes:
        - O retorno é instância da classe do shape
        - Campos são populados a partir do mapeamento resolvido
    """
    store = ConfigStore(sample_config)
    obj = store.get("foo", BarConfig)
    assert isinstance(obj, BarConfig)
    assert obj.bar == "baz"


def test_get_with_explicit_shape(sample_config):
    class Target:
        def __init__(self):
            self.bar = ""

    store = ConfigStore(sample_config)
    obj = store.get("FOO", Shape(Target, [Field("bar", str)]))
    assert isinstance(obj, Target)
    assert obj.bar == "baz"


def test_shape_is_ignored_for_non_mapping_values(sample_config):
    store = ConfigStore(sample_config)
    assert store.get("foo.bar", BarConfig) == "baz"
    assert store.get("foo.baz", BarConfig) is None


def test_get_is_case_insensitive_by_default(sample_config):
    store = ConfigStore(sample_config, {})
    assert store.get("FOO") == {"bar": "baz"}
    assert store.get("Foo.BAR") == "baz"


def test_get_case_sensitive_option(sample_config):
    store = ConfigStore(sample_config, {"case_sensitive_keys": True})
    assert store.get("FOO") is None
    assert store.get("foo.bar") == "baz"


def test_remove_key_underscores_option(sample_config):
    store = ConfigStore(sample_config, {"remove_key_underscores": True})
    assert store.get("snakecase") == "baz"
    assert store.get("snake_case") is None


def test_remove_key_hyphens_option(sample_config):
    store = ConfigStore(sample_config, {"remove_key_hyphens": True})
    assert store.get("kebabcase") == "baz"


def test_key_removal_strips_only_first_occurrence():
    store = ConfigStore({"a_b_c": 1, "x-y-z": {"n_e_s_t": 2}}, {"remove_key_underscores": True, "remove_key_hyphens": True})
    assert store.get("ab_c") == 1
    assert store.get("xy-z.ne_s_t") == 2
    assert store.get("abc") is None


def test_validation_failure_raises_with_violations(sample_config):
    store = ConfigStore(sample_config)
    with pytest.raises(ClassValidationError) as exc_info:
        store.get("foo", StrictBarConfig)

    violations = exc_info.value.violations
    assert [(v.property, v.rule) for v in violations] == [("bar", "min_length")]
    assert "min_length" in str(exc_info.value)


def test_validation_disabled_returns_unvalidated_instance(sample_config):
    store = ConfigStore(sample_config, {"validate_class": False})
    obj = store.get("foo", StrictBarConfig)
    assert isinstance(obj, StrictBarConfig)
    assert obj.bar == "baz"


def test_get_never_mutates_stored_config(sample_config):
    original = copy.deepcopy(sample_config)
    store = ConfigStore(sample_config, {"remove_key_underscores": True})
    store.get("FOO", BarConfig)
    store.get("foo.bar")
    assert sample_config == original
    assert store.get("foo") == {"bar": "baz"}


def test_aget_matches_get(sample_config):
    store = ConfigStore(sample_config)
    assert asyncio.run(store.aget("foo.bar")) == "baz"
    assert asyncio.run(store.aget("foo", BarConfig)).bar == "baz"


def test_non_string_keys_are_queryable_as_strings(tmp_path):
    """
    Verifica que chaves não-string não quebram a consulta.

    YAML como `2024: year` ou `80: http` produz chaves `int` no PyYAML.

    Invariantes:
        - Ausência continua sendo `None`, nunca exceção
        - A chave é consultável pela sua forma textual
        - Vale para fontes em arquivo e em memória, com ou sem normalização de chaves
    """
    p = tmp_path / "ports.yaml"
    p.write_text("name: app\n2024: year\nports:\n  80: http\n", encoding="utf-8")

    store = ConfigAggregator().add_yaml_file(p).build()
    assert store.get("name") == "app"
    assert store.get("2024") == "year"
    assert store.get("ports.80") == "http"
    assert store.get("ports.81") is None

    in_memory = ConfigStore({1: {True: "on"}, "x_y": 2}, {"remove_key_underscores": True})
    assert in_memory.get("1.true") == "on"
    assert in_memory.get("xy") == 2


def test_postponed_annotations_still_type_check():
    """
    Verifica que um dataclass declarado sob `from __future__ import annotations`
    é validado como o equivalente com anotações avaliadas.
    """
    store = ConfigStore({"db": {"host": "h", "port": "not-a-number"}})
    with pytest.raises(ClassValidationError) as exc:
        store.get("db", PostponedDbConfig)
    assert [v.property for v in exc.value.violations] == ["port"]

    ok = ConfigStore({"db": {"host": "h", "port": 5432}}).get("db", PostponedDbConfig)
    assert ok.port == 5432
