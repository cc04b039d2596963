# src/atlas_config/core/config/__init__.py

"""
Camada de configuração do Atlas Config.

Este pacote contém os algoritmos puros e utilitários de I/O sobre os quais
o store e o agregador são construídos.

Responsabilidades do pacote:
    - Resolução de caminhos pontuados (case-sensitive ou não)
    - Renomeação recursiva de chaves e expansão de chaves com delimitador
    - Deep-merge determinístico com sobrescrita pelo mais recente
    - Carregamento de arquivos JSON, YAML e dotenv
    - Opções de consulta do store

Invariantes:
    - Mapeamentos recebidos nunca são mutados
    - Ausência de chave é `None`, nunca exceção

Limites explícitos:
    - Não materializa shapes
    - Não mantém cache
"""

from .errors import (  # noqa: F401
    ClassValidationError,
    ConfigError,
    ConfigFileNotFoundError,
    ConfigParseError,
    InvalidConfigRootTypeError,
    InvalidOptionsError,
    ShapeDefinitionError,
    SourceValidationError,
    UnsupportedConfigFormatError,
)
from .keys import (  # noqa: F401
    lower_keys,
    remove_first,
    resolve_path,
    stringify_keys,
    to_nested_object,
    transform_keys_recursive,
)
from .merge import deep_merge  # noqa: F401
from .loader import get_loader, load_dotenv_file, load_json_file, load_yaml_file  # noqa: F401
from .options import StoreOptions  # noqa: F401
