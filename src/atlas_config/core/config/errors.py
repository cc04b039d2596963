# src/atlas_config/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Atlas Config.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento de fontes, a agregação (build) e a consulta tipada
de configuração.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Falhas de validação interrompem o build ou a consulta imediatamente
    - Ausência de chave NÃO é erro: consultas retornam `None`

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Cada exceção expõe um `code` estável (catálogo em `core.errors`)

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra eventos nem loga
"""

from __future__ import annotations

import json
from typing import Any, List, Sequence

from ..errors import (
    CLASS_VALIDATION_FAILED,
    CONFIG_FILE_NOT_FOUND,
    CONFIG_INVALID_OPTIONS,
    CONFIG_INVALID_ROOT,
    CONFIG_PARSE_ERROR,
    CONFIG_UNSUPPORTED_FORMAT,
    SHAPE_DEFINITION_ERROR,
    SOURCE_VALIDATION_FAILED,
    Violation,
)


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração.

    Todas as exceções levantadas durante carregamento de fontes, build
    do agregador e consultas tipadas devem herdar desta classe.
    """

    code: str = "CONFIG_ERROR"


class ConfigFileNotFoundError(ConfigError):
    """Arquivo de configuração registrado não existe no momento do build."""

    code = CONFIG_FILE_NOT_FOUND


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato de arquivo não suportado pelo loader.

    Formatos suportados:
        - JSON (.json)
        - YAML (.yaml, .yml)
        - dotenv (qualquer extensão, via `add_dotenv_file`)
    """

    code = CONFIG_UNSUPPORTED_FORMAT


class ConfigParseError(ConfigError):
    """Falha ao parsear JSON/YAML/dotenv."""

    code = CONFIG_PARSE_ERROR


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz de uma fonte não é um mapeamento.

    Decisões arquiteturais:
        - Toda fonte agregada deve produzir um mapa chave-valor
        - Listas ou valores escalares no root são inválidos
    """

    code = CONFIG_INVALID_ROOT


class InvalidOptionsError(ConfigError):
    """Opções de store inválidas (chave desconhecida ou valor não booleano)."""

    code = CONFIG_INVALID_OPTIONS


class ShapeDefinitionError(ConfigError):
    """Declaração de shape malformada (campo sem nome, duplicado, sem default)."""

    code = SHAPE_DEFINITION_ERROR


class SourceValidationError(ConfigError):
    """
    Exceção levantada quando o validator de uma fonte rejeita seu conteúdo.

    Decisões arquiteturais:
        - O build é abortado imediatamente
        - Nenhum store parcial é produzido
        - A mensagem identifica a fonte rejeitada

    Atributos:
        source: descrição da fonte (caminho do arquivo ou rótulo do objeto).
    """

    code = SOURCE_VALIDATION_FAILED

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"Invalid config source: {source}")


class ClassValidationError(ConfigError):
    """
    Exceção levantada quando uma instância de shape viola suas regras.

    Carrega a lista estruturada de violações (`Violation`), na ordem
    em que os campos foram declarados no shape.

    Invariantes:
        - `violations` nunca é vazia
    """

    code = CLASS_VALIDATION_FAILED

    def __init__(self, violations: Sequence[Violation]):
        self.violations: List[Violation] = list(violations)
        payload = [v.to_dict() for v in self.violations]
        super().__init__(f"Invalid config: {json.dumps(payload, default=_safe_repr)}")


def _safe_repr(value: Any) -> str:
    return repr(value)
