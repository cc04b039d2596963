# src/atlas_config/__init__.py
"""
Atlas Config — agregação de configuração em camadas com consultas tipadas.

Fontes (objetos, variáveis de ambiente, arquivos JSON/YAML/dotenv) são
registradas em um `ConfigAggregator`, mescladas em ordem de registro e
expostas por um `MemoizedConfigStore`:

    store = ConfigAggregator().add_yaml_file("config.yaml").add_env_vars(nesting=True).build()
    db = store.get("database", DatabaseConfig)

Limites explícitos:
    - Não infere schemas
    - Não observa mudanças em arquivos
    - Não possui camada de rede ou persistência
"""

from .core.builder import ConfigAggregator, DotEnvFileJob, FileJob, ObjectJob
from .core.config import (
    ClassValidationError,
    ConfigError,
    ConfigFileNotFoundError,
    ConfigParseError,
    InvalidConfigRootTypeError,
    InvalidOptionsError,
    ShapeDefinitionError,
    SourceValidationError,
    StoreOptions,
    UnsupportedConfigFormatError,
    deep_merge,
    remove_first,
    resolve_path,
    to_nested_object,
    transform_keys_recursive,
)
from .core.errors import Violation
from .core.shape import (
    Field,
    Rule,
    Shape,
    matches,
    max_length,
    max_value,
    min_length,
    min_value,
    not_empty,
    one_of,
    reconcile_keys,
    required,
    rule,
    validate_instance,
)
from .core.store import ConfigStore, MemoizedConfigStore

__all__ = [
    "ConfigAggregator",
    "ConfigStore",
    "MemoizedConfigStore",
    "StoreOptions",
    "ObjectJob",
    "FileJob",
    "DotEnvFileJob",
    "Shape",
    "Field",
    "Rule",
    "Violation",
    "rule",
    "required",
    "not_empty",
    "min_length",
    "max_length",
    "min_value",
    "max_value",
    "one_of",
    "matches",
    "resolve_path",
    "transform_keys_recursive",
    "to_nested_object",
    "remove_first",
    "reconcile_keys",
    "validate_instance",
    "deep_merge",
    "ConfigError",
    "SourceValidationError",
    "ClassValidationError",
    "ConfigFileNotFoundError",
    "UnsupportedConfigFormatError",
    "ConfigParseError",
    "InvalidConfigRootTypeError",
    "InvalidOptionsError",
    "ShapeDefinitionError",
]
