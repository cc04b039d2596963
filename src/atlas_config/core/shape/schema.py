"""
Schema canônico de shapes — alvo de materialização tipada de configuração.

Um shape é uma descrição explícita do tipo de destino de uma consulta:
a classe a instanciar e a lista ordenada de campos, cada um com tipo
esperado e regras de validação.

Esta implementação evita decorators e reflexão em runtime: regras e tipos
são declarados diretamente em `Field`, ou em `dataclasses.field(metadata=...)`
quando o shape é derivado de uma dataclass via `Shape.from_dataclass`.
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Type, Union, get_origin, get_type_hints

from ..config.errors import ShapeDefinitionError
from ..errors import Violation, rule_violation


ExpectedType = Union[type, Tuple[type, ...]]


@dataclass(frozen=True)
class Rule:
    """Regra nomeada de validação de um campo.

    `message` pode referenciar `{property}` e `{value}`.
    """

    name: str
    check: Callable[[Any], bool]
    message: str

    def evaluate(self, prop: str, value: Any) -> Optional[Violation]:
        if self.check(value):
            return None
        return rule_violation(
            rule=self.name,
            prop=prop,
            message=self.message.replace("{property}", prop).replace("{value}", str(value)),
            value=value,
        )


# ---------------------------------------------------------------------------
# Regras embutidas
# ---------------------------------------------------------------------------

def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def rule(name: str, check: Callable[[Any], bool], message: str) -> Rule:
    return Rule(name=name, check=check, message=message)


def required() -> Rule:
    return Rule("required", lambda v: v is not None, "{property} is required")


def not_empty() -> Rule:
    return Rule(
        "not_empty",
        lambda v: v is not None and v != "" and not (hasattr(v, "__len__") and len(v) == 0),
        "{property} must not be empty",
    )


def min_length(n: int) -> Rule:
    return Rule(
        "min_length",
        lambda v: hasattr(v, "__len__") and len(v) >= n,
        f"{{property}} must be longer than or equal to {n} characters",
    )


def max_length(n: int) -> Rule:
    return Rule(
        "max_length",
        lambda v: hasattr(v, "__len__") and len(v) <= n,
        f"{{property}} must be shorter than or equal to {n} characters",
    )


def min_value(n: float) -> Rule:
    return Rule("min_value", lambda v: _is_number(v) and v >= n, f"{{property}} must not be less than {n}")


def max_value(n: float) -> Rule:
    return Rule("max_value", lambda v: _is_number(v) and v <= n, f"{{property}} must not be greater than {n}")


def one_of(values: Iterable[Any]) -> Rule:
    allowed = tuple(values)
    return Rule(
        "one_of",
        lambda v: v in allowed,
        f"{{property}} must be one of the following values: {', '.join(map(str, allowed))}",
    )


def matches(pattern: str) -> Rule:
    compiled = re.compile(pattern)
    return Rule(
        "matches",
        lambda v: isinstance(v, str) and compiled.search(v) is not None,
        f"{{property}} must match {pattern} regular expression",
    )


# ---------------------------------------------------------------------------
# Field / Shape
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Field:
    """
    Campo declarado de um shape.

    - name: nome da propriedade na instância (ex.: "fooBar", "port")
    - type: tipo (ou tupla de tipos) esperado; None desativa a checagem
    - rules: regras avaliadas na ordem declarada
    - optional: quando o valor é None, nenhuma checagem é aplicada
    """

    name: str
    type: Optional[ExpectedType] = None
    rules: Tuple[Rule, ...] = ()
    optional: bool = False


class Shape:
    """Alvo de materialização: classe + campos declarados (ordem preservada)."""

    def __init__(self, target: Type[Any], fields: Sequence[Field], name: Optional[str] = None):
        if not callable(target):
            raise ShapeDefinitionError("shape target must be an instantiable class")

        seen: set[str] = set()
        for f in fields:
            if not isinstance(f, Field):
                raise ShapeDefinitionError(f"shape fields must be Field instances, got {type(f).__name__}")
            if not isinstance(f.name, str) or not f.name.strip():
                raise ShapeDefinitionError("field name must be a non-empty string")
            if f.name in seen:
                raise ShapeDefinitionError(f"duplicate field name: {f.name}")
            seen.add(f.name)

        self.target = target
        self.fields: Tuple[Field, ...] = tuple(fields)
        self.name = name or getattr(target, "__name__", repr(target))

    def __repr__(self) -> str:
        return f"Shape({self.name}, fields={list(self.field_names)})"

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    @classmethod
    def from_dataclass(cls, target: Type[Any]) -> "Shape":
        """
        Deriva um shape de uma dataclass.

        Todo campo deve ter default (ou default_factory). Tipo, regras e
        opcionalidade vêm de `metadata`: {"type": ..., "rules": (...), "optional": bool}.
        Na ausência de `metadata["type"]`, a anotação resolvida (inclusive sob
        `from __future__ import annotations`) é usada quando é uma classe
        simples; genéricos e uniões não geram checagem de tipo.

        Raises:
            ShapeDefinitionError: se a dataclass for inválida ou suas anotações
                não puderem ser resolvidas.
        """
        if not (isinstance(target, type) and dataclasses.is_dataclass(target)):
            raise ShapeDefinitionError(f"{target!r} is not a dataclass type")

        try:
            hints = get_type_hints(target)
        except (NameError, TypeError) as e:
            raise ShapeDefinitionError(f"cannot resolve annotations of {target.__name__}: {e}") from e

        declared = []
        for f in dataclasses.fields(target):
            if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
                raise ShapeDefinitionError(f"{target.__name__}.{f.name} must declare a default value")
            resolved = hints.get(f.name, f.type)
            annotation = resolved if isinstance(resolved, type) and get_origin(resolved) is None else None
            declared.append(
                Field(
                    name=f.name,
                    type=f.metadata.get("type", annotation),
                    rules=tuple(f.metadata.get("rules", ())),
                    optional=bool(f.metadata.get("optional", False)),
                )
            )
        return cls(target, declared)

    def instantiate(self, data: Mapping[str, Any]) -> Any:
        """
        Materializa uma instância do alvo a partir de dados já reconciliados.

        Dataclasses recebem os valores via construtor (campos `init=False` são
        atribuídos após a construção); demais classes são instanciadas sem
        argumentos e populadas por atribuição.
        """
        values: Dict[str, Any] = {name: data.get(name) for name in self.field_names}
        if dataclasses.is_dataclass(self.target):
            init_names = {f.name for f in dataclasses.fields(self.target) if f.init}
            instance = self.target(**{k: v for k, v in values.items() if k in init_names})
            # dataclasses congeladas rejeitam setattr
            assign = object.__setattr__ if self.target.__dataclass_params__.frozen else setattr
            for name, value in values.items():
                if name not in init_names:
                    assign(instance, name, value)
            return instance

        instance = self.target()
        for name, value in values.items():
            setattr(instance, name, value)
        return instance


ShapeLike = Union[Shape, Type[Any]]


def as_shape(target: ShapeLike) -> Shape:
    """Aceita um `Shape` ou uma dataclass e devolve o `Shape` correspondente."""
    if isinstance(target, Shape):
        return target
    return Shape.from_dataclass(target)
