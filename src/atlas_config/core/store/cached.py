# src/atlas_config/core/store/cached.py
"""
MemoizedConfigStore — ConfigStore com memoização por (path, shape).

Cada par distinto (path, shape) é calculado no máximo uma vez durante a
vida do store; chamadas repetidas retornam exatamente o mesmo objeto
(identidade estável), o que importa para consumidores que dependem de
identidade (ex.: singletons de injeção de dependência).

Política de cache (v1):
    - nível externo indexado por `path` como recebido (`None` incluído)
    - nível interno indexado pela identidade do shape (`None` incluído)
    - valores presentes são retornados mesmo quando falsy (0, "", None)
    - um miss grava o resultado como única entrada de um novo nível interno
      para aquele `path`, substituindo o anterior
    - entradas nunca expiram
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any, Dict, Optional

from ..config.options import OptionsLike
from ..shape import ShapeLike
from .store import ConfigStore

logger = logging.getLogger(__name__)

_ABSENT = object()


class MemoizedConfigStore(ConfigStore):
    """ConfigStore cujo `get` é memoizado por (path, shape)."""

    def __init__(self, config: Mapping[str, Any], options: OptionsLike = None):
        super().__init__(config, options)
        self._cache: Dict[Optional[str], Dict[Optional[ShapeLike], Any]] = {}
        self._lock = threading.Lock()

    def get(self, path: Optional[str] = None, shape: Optional[ShapeLike] = None) -> Any:
        cached = self._cache.get(path)
        if cached is not None:
            value = cached.get(shape, _ABSENT)
            if value is not _ABSENT:
                return value

        with self._lock:
            # outra thread pode ter preenchido o par enquanto esperávamos
            cached = self._cache.get(path)
            if cached is not None and shape in cached:
                return cached[shape]

            logger.debug("config cache miss for path=%r shape=%r", path, shape)
            value = super().get(path, shape)
            self._cache[path] = {shape: value}
            return value
