# src/atlas_config/core/config/merge.py
"""
Utilitário canônico de deep-merge de configuração.

Este módulo implementa a política de deep-merge utilizada pelo agregador
para combinar fontes de configuração na ordem de registro.

Política de merge (v1):
    - dict + dict → merge recursivo por chave
    - qualquer outro par → sobrescrita pelo override (listas incluídas)
    - chaves ausentes no override → preservadas da base

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Chaves irmãs vindas de fontes distintas são preservadas
    - Em conflito de folha, o valor mais recente vence

Limites explícitos:
    - Não carrega arquivos de configuração
    - Não realiza coerção de tipos
"""

from copy import deepcopy
from typing import Any, Dict, Mapping


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois mapeamentos de configuração.

    Combina `base` com `override`, produzindo um novo dicionário sem mutar
    nenhum dos inputs.

    Decisões arquiteturais:
        - Mapeamentos aninhados são mesclados recursivamente
        - Conflito de tipos (ex.: dict vs str) resolve-se pelo override
        - Listas são sobrescritas integralmente (sem merge elemento a elemento)

    Args:
        base (Mapping[str, Any]): Configuração acumulada até aqui.
        override (Mapping[str, Any]): Configuração da fonte mais recente.

    Returns:
        Dict[str, Any]: Nova configuração resultante do deep-merge.
    """
    result: Dict[str, Any] = {key: deepcopy(value) for key, value in base.items()}

    for key, override_value in override.items():
        base_value = result.get(key)

        if isinstance(base_value, Mapping) and isinstance(override_value, Mapping):
            result[key] = deep_merge(base_value, override_value)
            continue

        if isinstance(override_value, Mapping):
            # normaliza mapeamentos arbitrários (ex.: os.environ) para dict
            result[key] = deep_merge({}, override_value)
            continue

        result[key] = deepcopy(override_value)

    return result
