# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas Config.

Este módulo define fixtures reutilizáveis que fornecem:
- o mapeamento de configuração de referência usado pelos testes de store
- variáveis de ambiente com chaves aninhadas por delimitador ("__")
- arquivos de configuração (JSON, YAML, dotenv) gravados em `tmp_path`

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Arquivos são sempre criados em diretórios temporários isolados
    - Variáveis de ambiente são controladas via `monkeypatch`

Invariantes:
    - Nenhuma fixture altera o ambiente fora do escopo do teste
    - Dados retornados são determinísticos
"""

import os
from pathlib import Path

import pytest


@pytest.fixture
def sample_config() -> dict:
    """
    Configuração de referência para consultas no store.

    Cobre:
    - caminho aninhado (`foo.bar`)
    - chave kebab-case (remoção de hífen)
    - chave snake_case (remoção de underscore)
    """
    return {
        "foo": {"bar": "baz"},
        "kebab-case": "baz",
        "snake_case": "baz",
    }


@pytest.fixture
def nested_env(monkeypatch) -> dict:
    """Substitui o ambiente do processo por variáveis com aninhamento via "__"."""
    for key in list(os.environ):
        monkeypatch.delenv(key, raising=False)
    values = {
        "FOO__BAR": "baz",
        "FOO__BAZ__BAR": "baz",
        "FOO__BAZ__BAZ": "bar",
    }
    for key, value in values.items():
        monkeypatch.setenv(key, value)
    return values


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """
    Diretório temporário com uma fonte de cada formato suportado.

    - config.json → {"json": {"foo": {"bar": "baz"}}}
    - config.yaml → {"yaml": {"foo": {"bar": "baz"}}}
    - .env        → ENV__FOO__BAR=baz
    """
    (tmp_path / "config.json").write_text(
        '{\n  "json": {\n    "foo": {"bar": "baz"}\n  }\n}\n', encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text(
        "yaml:\n  foo:\n    bar: baz\n", encoding="utf-8"
    )
    (tmp_path / ".env").write_text(
        "# dotenv de teste\nENV__FOO__BAR=baz\nPLAIN=value\n", encoding="utf-8"
    )
    return tmp_path
