"""Atlas Config — Shapes (core).

Componentes para materialização tipada de configuração:
 - schema explícito (Shape, Field, Rule)
 - reconciliação de chaves (caixa da fonte → nome do campo)
 - avaliação local de regras (Violation)
"""

from .schema import (  # noqa: F401
    Field,
    Rule,
    Shape,
    ShapeLike,
    as_shape,
    matches,
    max_length,
    max_value,
    min_length,
    min_value,
    not_empty,
    one_of,
    required,
    rule,
)
from .validation import validate_instance  # noqa: F401
from .reconcile import materialize, reconcile_keys  # noqa: F401
