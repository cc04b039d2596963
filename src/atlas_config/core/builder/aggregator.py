# src/atlas_config/core/builder/aggregator.py
"""
ConfigAggregator — agregação ordenada de fontes de configuração.

Este módulo define o agregador, responsável por coletar fontes heterogêneas
(objetos em memória, variáveis de ambiente, arquivos JSON/YAML/dotenv) como
jobs diferidos e produzir, no `build`, um `MemoizedConfigStore` com o
resultado do deep-merge.

Pipeline por job (ordem de registro):
    1. carregar o mapeamento bruto (objeto direto ou loader do formato)
    2. aplicar aninhamento por delimitador (apenas objetos e dotenv)
    3. executar o validator da fonte (falha → `SourceValidationError`)
    4. aplicar namespace (`{namespace: mapping}`)
    5. mesclar no acumulado via `deep_merge` (o mais recente vence)

Decisões arquiteturais:
    - Jobs são consumidos exatamente uma vez e descartados após o build
    - Qualquer falha aborta o build; nenhum store parcial é retornado
    - Cada job gera um evento estruturado em `events`

Limites explícitos:
    - Não observa mudanças em arquivos
    - Não persiste configuração
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..config.errors import SourceValidationError
from ..config.keys import to_nested_object
from ..config.loader import get_loader
from ..config.merge import deep_merge
from ..config.options import OptionsLike, coerce_options
from ..store import MemoizedConfigStore
from .jobs import DotEnvFileJob, FileJob, LoadJob, ObjectJob, Validator

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_LEVELS = {"INFO": logging.INFO, "ERROR": logging.ERROR}


class ConfigAggregator:
    """
    Agregador de fontes de configuração com API encadeável.

    Args:
        options: opções padrão do store produzido (sobrescrevíveis em `build`).

    Exemplo:
        store = (
            ConfigAggregator()
            .add_yaml_file("config.yaml")
            .add_dotenv_file(".env", nesting=True)
            .add_env_vars(namespace="env")
            .build()
        )
        store.get("database.host")
    """

    def __init__(self, options: OptionsLike = None):
        self._options = coerce_options(options)
        self._jobs: List[LoadJob] = []
        self.events: List[Dict[str, Any]] = []

    @property
    def jobs(self) -> Tuple[LoadJob, ...]:
        return tuple(self._jobs)

    # -----------------------------
    # Registro de fontes
    # -----------------------------
    def add_object(
        self,
        data: Mapping[str, Any],
        *,
        nesting: bool = False,
        namespace: Optional[str] = None,
        validator: Optional[Validator] = None,
        label: str = "object",
    ) -> "ConfigAggregator":
        self._jobs.append(
            ObjectJob(data=data, label=label, nesting=nesting, namespace=namespace, validator=validator)
        )
        return self

    def add_env_vars(
        self,
        *,
        nesting: bool = False,
        namespace: Optional[str] = None,
        validator: Optional[Validator] = None,
    ) -> "ConfigAggregator":
        """Registra um snapshot de `os.environ` tirado no momento da chamada."""
        return self.add_object(
            dict(os.environ), nesting=nesting, namespace=namespace, validator=validator, label="env"
        )

    def add_key_value(self, key: str, value: Any) -> "ConfigAggregator":
        return self.add_object({key: value}, label=f"key:{key}")

    def add_json_file(
        self,
        path: PathLike,
        *,
        namespace: Optional[str] = None,
        validator: Optional[Validator] = None,
    ) -> "ConfigAggregator":
        self._jobs.append(FileJob(path=Path(path), format="json", namespace=namespace, validator=validator))
        return self

    def add_yaml_file(
        self,
        path: PathLike,
        *,
        namespace: Optional[str] = None,
        validator: Optional[Validator] = None,
    ) -> "ConfigAggregator":
        self._jobs.append(FileJob(path=Path(path), format="yaml", namespace=namespace, validator=validator))
        return self

    def add_dotenv_file(
        self,
        path: PathLike,
        *,
        nesting: bool = False,
        namespace: Optional[str] = None,
        validator: Optional[Validator] = None,
    ) -> "ConfigAggregator":
        self._jobs.append(
            DotEnvFileJob(path=Path(path), nesting=nesting, namespace=namespace, validator=validator)
        )
        return self

    # -----------------------------
    # Build
    # -----------------------------
    def build(self, options: OptionsLike = None) -> MemoizedConfigStore:
        """
        Consome os jobs na ordem de registro e produz o store memoizado.

        Raises:
            SourceValidationError: se o validator de alguma fonte a rejeitar.
            ConfigError: para falhas de carregamento (arquivo ausente, parse, root inválido).
        """
        store_options = coerce_options(options) if options is not None else self._options
        jobs, self._jobs = self._jobs, []
        self.events = []

        merged: Dict[str, Any] = {}
        for job in jobs:
            data = self._load(job)

            if job.validator is not None and not job.validator(data):
                self._log(job, "ERROR", "source rejected by validator")
                raise SourceValidationError(job.source)

            keys = len(data)
            if job.namespace:
                data = {job.namespace: data}

            merged = deep_merge(merged, data)
            self._log(job, "INFO", "source merged", keys=keys, namespace=job.namespace)

        logger.debug("built config from %d source(s)", len(jobs))
        self.events.append(
            self._event(source="*", kind="build", level="INFO", message="build completed", jobs=len(jobs))
        )
        return MemoizedConfigStore(merged, store_options)

    def _load(self, job: LoadJob) -> Dict[str, Any]:
        if isinstance(job, ObjectJob):
            data = dict(job.data)
            return to_nested_object(data) if job.nesting else data
        if isinstance(job, DotEnvFileJob):
            data = get_loader("dotenv")(job.path)
            return to_nested_object(data) if job.nesting else data
        if isinstance(job, FileJob):
            return get_loader(job.format)(job.path)
        raise TypeError(f"unknown load job: {type(job).__name__}")

    # -----------------------------
    # Eventos de build
    # -----------------------------
    def _event(self, *, source: str, kind: str, level: str, message: str, **extra: Any) -> Dict[str, Any]:
        event = {
            "source": source,
            "kind": kind,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        return event

    def _log(self, job: LoadJob, level: str, message: str, **extra: Any) -> None:
        self.events.append(self._event(source=job.source, kind=job.kind, level=level, message=message, **extra))
        logger.log(_LEVELS[level], "%s (%s %s)", message, job.kind, job.source)
