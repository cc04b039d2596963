# src/atlas_config/core/store/store.py
"""
ConfigStore — detentor canônico da configuração agregada.

O ConfigStore encapsula um único mapeamento de configuração (já mesclado)
e as opções de consulta fixadas na construção. Expõe `get`, que resolve
um caminho pontuado e, opcionalmente, materializa a instância de um shape.

Princípios fundamentais:
    - O mapeamento armazenado nunca é mutado por consultas
    - Ausência de chave é `None`, nunca exceção
    - Opções são imutáveis após a construção

Invariantes:
    - Normalização de chaves (underscore/hífen) ocorre uma única vez, na construção
    - Todas as chaves armazenadas são strings
    - Apenas mapeamentos passam pelo processamento de shape

Limites explícitos:
    - Não carrega fontes (responsabilidade do agregador)
    - Não mantém cache (responsabilidade do MemoizedConfigStore)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional

from ..config.keys import remove_first, resolve_path, stringify_keys, transform_keys_recursive
from ..config.options import OptionsLike, StoreOptions, coerce_options
from ..shape import ShapeLike, as_shape, materialize

logger = logging.getLogger(__name__)


class ConfigStore:
    """
    Store de configuração com consulta por caminho e materialização tipada.

    Args:
        config: mapeamento de configuração agregado.
        options: `StoreOptions` ou mapeamento com os nomes das opções.

    Decisões arquiteturais:
        - `remove_key_underscores` / `remove_key_hyphens` removem apenas a
          primeira ocorrência do caractere em cada chave, em todos os níveis
        - consultas sem distinção de caixa descem nível a nível
    """

    def __init__(self, config: Mapping[str, Any], options: OptionsLike = None):
        self._options: StoreOptions = coerce_options(options)

        stored: Dict[str, Any] = stringify_keys(config)
        if self._options.remove_key_underscores:
            stored = transform_keys_recursive(stored, remove_first("_"))
        if self._options.remove_key_hyphens:
            stored = transform_keys_recursive(stored, remove_first("-"))
        self._config = stored

    @property
    def options(self) -> StoreOptions:
        return self._options

    def get(self, path: Optional[str] = None, shape: Optional[ShapeLike] = None) -> Any:
        """
        Resolve `path` e, se informado, materializa `shape` com o resultado.

        Args:
            path: caminho pontuado; `None` ou "" retorna a configuração inteira.
            shape: `Shape` ou dataclass de destino.

        Returns:
            Valor bruto resolvido, instância do shape, ou `None` se ausente.

        Raises:
            ClassValidationError: se `validate_class` e a instância violar regras.
        """
        key = path if path is not None else ""
        if not self._options.case_sensitive_keys:
            key = key.lower()

        value = resolve_path(key, self._config, case_insensitive=not self._options.case_sensitive_keys)

        if not isinstance(value, Mapping):
            return value

        if shape is None:
            return value

        target = as_shape(shape)
        logger.debug("materializing %s at path %r", target.name, key)
        return materialize(value, target, validate=self._options.validate_class)

    async def aget(self, path: Optional[str] = None, shape: Optional[ShapeLike] = None) -> Any:
        """Variante awaitable de `get` (não suspende; mesma semântica)."""
        return self.get(path, shape)
