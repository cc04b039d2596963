"""
Agregação de fontes do Atlas Config.

- **jobs**
  - `ObjectJob`, `FileJob`, `DotEnvFileJob`: jobs diferidos de carregamento
- **aggregator**
  - `ConfigAggregator`: registro encadeável de fontes e build do store
"""

from .jobs import DotEnvFileJob, FileJob, LoadJob, ObjectJob  # noqa: F401
from .aggregator import ConfigAggregator  # noqa: F401
