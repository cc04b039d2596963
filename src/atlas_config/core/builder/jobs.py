# src/atlas_config/core/builder/jobs.py
"""
Jobs de carregamento do agregador.

Um job é uma unidade diferida de carregamento de fonte, registrada antes
do `build` e consumida exatamente uma vez, na ordem de registro.

Variantes (união etiquetada por `kind`):
    - ObjectJob     → mapeamento em memória (objetos, variáveis de ambiente)
    - FileJob       → arquivo estruturado (JSON/YAML); nunca aplica aninhamento
    - DotEnvFileJob → arquivo dotenv (KEY=VALUE); aninhamento opcional

Invariantes:
    - Jobs são imutáveis (frozen)
    - `source` identifica a fonte em erros e eventos de build
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Literal, Mapping, Optional, Union

Validator = Callable[[Dict[str, Any]], bool]
FileFormat = Literal["json", "yaml"]


@dataclass(frozen=True)
class ObjectJob:
    data: Mapping[str, Any]
    label: str = "object"
    nesting: bool = False
    namespace: Optional[str] = None
    validator: Optional[Validator] = None

    kind: Literal["object"] = "object"

    @property
    def source(self) -> str:
        return self.label


@dataclass(frozen=True)
class FileJob:
    path: Path
    format: FileFormat
    namespace: Optional[str] = None
    validator: Optional[Validator] = None

    kind: Literal["file"] = "file"

    @property
    def source(self) -> str:
        return str(self.path)


@dataclass(frozen=True)
class DotEnvFileJob:
    path: Path
    nesting: bool = False
    namespace: Optional[str] = None
    validator: Optional[Validator] = None

    kind: Literal["dotenv-file"] = "dotenv-file"

    @property
    def source(self) -> str:
        return str(self.path)


LoadJob = Union[ObjectJob, FileJob, DotEnvFileJob]
