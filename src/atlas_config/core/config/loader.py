# src/atlas_config/core/config/loader.py
"""
Loaders canônicos de fontes de configuração em arquivo.

Este módulo é responsável por ler arquivos de configuração do disco e
entregá-los ao agregador como mapeamentos puros (`dict`).

Formatos suportados (v1):
    - JSON (.json)      → `json5` (superconjunto JSON5: comentários, vírgulas finais, chaves sem aspas)
    - YAML (.yaml, .yml) → PyYAML (`yaml.safe_load`)
    - dotenv (KEY=VALUE) → python-dotenv (`dotenv_values`)

Decisões arquiteturais:
    - O arquivo deve existir no momento do build
    - Arquivos YAML vazios são interpretados como dicionários vazios
    - O conteúdo raiz deve ser um mapeamento
    - Chaves são sempre strings (chaves YAML como `80:` viram "80")
    - Falhas de parsing são encapsuladas em `ConfigParseError`

Limites explícitos:
    - Não realiza merge de configuração
    - Não aplica namespace nem aninhamento
    - Não valida semântica de domínio
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Union

import json5
import yaml  # PyYAML
from dotenv import dotenv_values

from .errors import (
    ConfigFileNotFoundError,
    ConfigParseError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .keys import stringify_keys

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
Loader = Callable[[PathLike], Dict[str, Any]]


def _read_text(path: Path) -> str:
    if not path.exists():
        raise ConfigFileNotFoundError(f"config file not found: {path}")
    return path.read_text(encoding="utf-8")


def _ensure_mapping(data: Any, path: Path) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"config root must be a mapping, got {type(data).__name__}: {path}"
        )
    return stringify_keys(data)


def load_json_file(path: PathLike) -> Dict[str, Any]:
    """Carrega um arquivo JSON (sintaxe JSON5 aceita) cujo root deve ser um objeto."""
    p = Path(path)
    raw = _read_text(p)
    try:
        data = json5.loads(raw)
    except ValueError as e:
        raise ConfigParseError(f"failed to parse JSON file {p}: {e}") from e
    logger.debug("loaded JSON config file %s", p)
    return _ensure_mapping(data, p)


def load_yaml_file(path: PathLike) -> Dict[str, Any]:
    """Carrega um arquivo YAML; documento vazio resulta em `{}`."""
    p = Path(path)
    raw = _read_text(p)
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"failed to parse YAML file {p}: {e}") from e
    logger.debug("loaded YAML config file %s", p)
    return _ensure_mapping(data, p)


def load_dotenv_file(path: PathLike) -> Dict[str, Any]:
    """
    Carrega um arquivo dotenv como mapeamento plano str → str.

    Linhas sem `=` (valor `None` no python-dotenv) são descartadas.
    Não interpola nem altera `os.environ`.
    """
    p = Path(path)
    raw = _read_text(p)
    values = dotenv_values(stream=io.StringIO(raw), interpolate=False)
    logger.debug("loaded dotenv config file %s", p)
    return {key: value for key, value in values.items() if value is not None}


LOADERS: Dict[str, Loader] = {
    "json": load_json_file,
    "yaml": load_yaml_file,
    "dotenv": load_dotenv_file,
}


def get_loader(fmt: str) -> Loader:
    """Retorna o loader registrado para o formato (`json`, `yaml`, `dotenv`)."""
    if fmt not in LOADERS:
        raise UnsupportedConfigFormatError(f"unsupported config format: {fmt}")
    return LOADERS[fmt]
