# src/atlas_config/core/config/options.py
"""Opções de consulta do ConfigStore (fixadas na construção do store)."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union

from .errors import InvalidOptionsError


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise InvalidOptionsError(msg)


@dataclass(frozen=True)
class StoreOptions:
    """
    Opções de consulta de um ConfigStore.

    Campos:
    - case_sensitive_keys: chaves comparadas com distinção de caixa (padrão: False)
    - validate_class: valida instâncias de shape após a materialização (padrão: True)
    - remove_key_underscores: remove o primeiro "_" de cada chave (padrão: False)
    - remove_key_hyphens: remove o primeiro "-" de cada chave (padrão: False)
    """

    case_sensitive_keys: bool = False
    validate_class: bool = True
    remove_key_underscores: bool = False
    remove_key_hyphens: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "StoreOptions":
        """Valida e materializa opções a partir de um mapeamento simples."""
        _expect(isinstance(data, Mapping), "store options must be a mapping")
        known = {f.name for f in fields(cls)}
        for key, value in data.items():
            _expect(key in known, f"unknown store option: {key}")
            _expect(isinstance(value, bool), f"store option {key} must be boolean")
        return cls(**dict(data))


OptionsLike = Union[StoreOptions, Mapping[str, Any], None]


def coerce_options(options: Optional[OptionsLike]) -> StoreOptions:
    if options is None:
        return StoreOptions()
    if isinstance(options, StoreOptions):
        return options
    return StoreOptions.from_mapping(options)
