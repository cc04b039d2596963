"""
Atlas Config — Canonical Error Structures (v1)

Este módulo define o payload canônico de violações do Atlas Config e o
catálogo estável de códigos de erro usados pelas exceções tipadas.

Violações são artefatos de diagnóstico e devem ser:

- explícitas
- serializáveis
- acionáveis
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Violation:
    """
    Violação estruturada de uma regra declarada em um shape.

    Campos:
    - rule: nome estável da regra violada (ex.: "required", "min_length", "type")
    - property: nome do campo do shape
    - message: mensagem curta, humana e objetiva
    - value: valor encontrado na instância (pode ser None)
    - hint: ação sugerida ao operador (opcional)
    """

    rule: str
    property: str
    message: str
    value: Any = None
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável da violação."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Fontes / build
SOURCE_VALIDATION_FAILED = "SOURCE_VALIDATION_FAILED"
CONFIG_FILE_NOT_FOUND = "CONFIG_FILE_NOT_FOUND"
CONFIG_UNSUPPORTED_FORMAT = "CONFIG_UNSUPPORTED_FORMAT"
CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
CONFIG_INVALID_ROOT = "CONFIG_INVALID_ROOT"

# Store / opções
CONFIG_INVALID_OPTIONS = "CONFIG_INVALID_OPTIONS"

# Shapes
SHAPE_DEFINITION_ERROR = "SHAPE_DEFINITION_ERROR"
CLASS_VALIDATION_FAILED = "CLASS_VALIDATION_FAILED"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def type_violation(*, prop: str, expected: str, value: Any) -> Violation:
    return Violation(
        rule="type",
        property=prop,
        message=f"{prop} must be of type {expected}",
        value=value,
        hint="Ajuste o valor na fonte de configuração ou o tipo declarado no shape.",
    )


def rule_violation(*, rule: str, prop: str, message: str, value: Any) -> Violation:
    return Violation(rule=rule, property=prop, message=message, value=value)
