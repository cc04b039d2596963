"""
Store de configuração do Atlas Config.

- **store**
  - `ConfigStore`: consulta por caminho e materialização tipada
- **cached**
  - `MemoizedConfigStore`: memoização por (path, shape) com identidade estável
"""

from .store import ConfigStore  # noqa: F401
from .cached import MemoizedConfigStore  # noqa: F401
