# src/atlas_config/core/config/keys.py
"""
Resolução e transformação de chaves de configuração.

Este módulo reúne os algoritmos puros que operam sobre as chaves de um
mapeamento de configuração aninhado:

    - resolve_path             → navegação por caminho pontuado ("a.b.c")
    - transform_keys_recursive → renomeação recursiva de chaves
    - stringify_keys           → normalização recursiva de chaves para `str`
    - to_nested_object         → expansão de chaves com delimitador ("A__B") em árvore
    - remove_first             → fábrica de renomeação que remove um caractere

Invariantes:
    - Nenhuma função muta o mapeamento recebido
    - Ausência é representada por `None`, nunca por exceção
    - Apenas `Mapping` é considerado nível navegável (listas são folhas)

Limites explícitos:
    - Não carrega arquivos
    - Não valida valores
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from .merge import deep_merge


KeyRenamer = Callable[[str], str]

DEFAULT_NESTING_DELIMITER = "__"
PATH_SEPARATOR = "."


def lower_keys(mapping: Mapping[str, Any]) -> Dict[str, Any]:
    """Cópia rasa com chaves em minúsculas; colisões: a última chave vence."""
    return {key.lower(): value for key, value in mapping.items()}


def resolve_path(
    path: str,
    root: Mapping[str, Any],
    case_insensitive: bool = False,
) -> Optional[Any]:
    """
    Resolve um caminho pontuado em um mapeamento aninhado.

    Regras:
        - `path == ""` retorna o próprio `root`
        - cada segmento desce exatamente um nível
        - com `case_insensitive`, o segmento e as chaves do nível corrente são
          comparados em minúsculas, nível a nível
        - valor intermediário que não é mapeamento, ou segmento ausente,
          resulta em `None` (nunca em resultado parcial)

    Args:
        path (str): Caminho pontuado (ex.: "database.host").
        root (Mapping[str, Any]): Mapeamento de configuração.
        case_insensitive (bool): Ativa comparação sem distinção de caixa.

    Returns:
        Optional[Any]: Valor encontrado ou `None`.
    """
    if path == "":
        return root

    current: Any = root
    for segment in path.split(PATH_SEPARATOR):
        if not isinstance(current, Mapping):
            return None
        if case_insensitive:
            segment = segment.lower()
            current = lower_keys(current)
        if segment not in current:
            return None
        current = current[segment]

    return current


def transform_keys_recursive(
    mapping: Mapping[str, Any],
    rename: KeyRenamer,
) -> Dict[str, Any]:
    """
    Produz um novo mapeamento com todas as chaves renomeadas por `rename`.

    Valores que são mapeamentos são processados recursivamente; demais
    valores (inclusive `None` e listas) são copiados sem alteração.

    A função de renomeação é aplicada como fornecida: idempotência ou
    remoção completa de uma classe de caracteres são responsabilidade
    de quem a fornece.
    """
    transformed: Dict[str, Any] = {}
    for key, value in mapping.items():
        if isinstance(value, Mapping):
            transformed[rename(key)] = transform_keys_recursive(value, rename)
        else:
            transformed[rename(key)] = value
    return transformed


def stringify_keys(mapping: Mapping[Any, Any]) -> Dict[str, Any]:
    """
    Converte recursivamente todas as chaves para `str`.

    Parsers como o PyYAML produzem chaves `int`, `bool` ou `date`
    (ex.: `80: http`); a navegação por caminho opera apenas sobre strings.
    """
    return transform_keys_recursive(mapping, str)


def to_nested_object(
    mapping: Mapping[str, Any],
    delimiter: str = DEFAULT_NESTING_DELIMITER,
) -> Dict[str, Any]:
    """
    Expande chaves com delimitador em um mapeamento aninhado.

    Exemplo:
        {"FOO__BAR": "baz", "FOO__BAZ__BAR": "baz"}
        → {"FOO": {"BAR": "baz", "BAZ": {"BAR": "baz"}}}

    Regras:
        - chave sem delimitador é copiada como entrada de topo
        - chave com delimitador gera um ramo de um único caminho, mesclado
          via `deep_merge` ao acumulado
        - a ordem de iteração das chaves é a ordem de merge; em conflito
          de folha, a chave mais recente vence

    Args:
        mapping (Mapping[str, Any]): Mapeamento plano (ex.: variáveis de ambiente).
        delimiter (str): Indicador de aninhamento. Padrão: "__".

    Returns:
        Dict[str, Any]: Novo mapeamento aninhado.
    """
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")

    nested: Dict[str, Any] = {}
    for key, value in mapping.items():
        key = str(key)
        segments = key.split(delimiter)

        if len(segments) == 1:
            nested[key] = value
            continue

        branch: Dict[str, Any] = {segments[-1]: value}
        for segment in reversed(segments[:-1]):
            branch = {segment: branch}
        nested = deep_merge(nested, branch)

    return nested


def remove_first(char: str) -> KeyRenamer:
    """Fábrica de renomeação que remove apenas a primeira ocorrência de `char`."""

    def _rename(key: str) -> str:
        return key.replace(char, "", 1)

    return _rename
