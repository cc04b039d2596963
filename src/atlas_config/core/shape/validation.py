"""
Avaliador local de regras de shape.

Dada uma instância materializada e seu shape, produz a lista de violações
na ordem de declaração dos campos (e, dentro de cada campo, na ordem das
regras). Lista vazia significa instância válida.

Política (v1):
    - campo `optional` com valor None → nenhuma checagem
    - tipo declarado e não atendido → uma violação "type"; regras do campo
      não são avaliadas
    - demais casos → todas as regras são avaliadas
"""

from __future__ import annotations

from typing import Any, List

from ..errors import Violation, type_violation
from .schema import ExpectedType, Shape


def _type_name(expected: ExpectedType) -> str:
    if isinstance(expected, tuple):
        return " | ".join(t.__name__ for t in expected)
    return expected.__name__


def _matches_type(value: Any, expected: ExpectedType) -> bool:
    types = expected if isinstance(expected, tuple) else (expected,)
    # bool é subclasse de int, mas não conta como número de configuração
    if isinstance(value, bool) and bool not in types:
        return False
    return isinstance(value, types)


def validate_instance(instance: Any, shape: Shape) -> List[Violation]:
    violations: List[Violation] = []
    for field in shape.fields:
        value = getattr(instance, field.name, None)

        if value is None and field.optional:
            continue

        if field.type is not None and not _matches_type(value, field.type):
            violations.append(type_violation(prop=field.name, expected=_type_name(field.type), value=value))
            continue

        for r in field.rules:
            violation = r.evaluate(field.name, value)
            if violation is not None:
                violations.append(violation)

    return violations
