"""Reconciliação de chaves de um mapeamento com os campos de um shape."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from ..config.errors import ClassValidationError
from ..config.keys import lower_keys
from .schema import Shape
from .validation import validate_instance


def reconcile_keys(mapping: Mapping[str, Any], shape: Shape) -> Dict[str, Any]:
    """
    Casa as chaves de `mapping` com os nomes de campo de `shape`, sem distinção de caixa.

    Ex.: {"FOOBARBAZ": "baz"} + campo `fooBarBaz` → {"fooBarBaz": "baz"}.

    Campos ausentes no mapeamento resultam em `None`; chaves não declaradas
    no shape são descartadas.
    """
    lowered = lower_keys(mapping)
    return {name: lowered.get(name.lower()) for name in shape.field_names}


def materialize(mapping: Mapping[str, Any], shape: Shape, *, validate: bool = True) -> Any:
    """Reconcilia, instancia e (opcionalmente) valida.

    Raises:
        ClassValidationError: se `validate` e a instância violar alguma regra.
    """
    instance = shape.instantiate(reconcile_keys(mapping, shape))
    if validate:
        violations = validate_instance(instance, shape)
        if violations:
            raise ClassValidationError(violations)
    return instance
