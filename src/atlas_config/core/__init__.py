# src/atlas_config/core/__init__.py
"""
Core do Atlas Config.

Componentes principais:
    - config  → resolução de chaves, deep-merge, loaders e opções
    - shape   → schema explícito de shapes, reconciliação e validação
    - store   → ConfigStore e MemoizedConfigStore
    - builder → jobs de carregamento e ConfigAggregator

Princípios fundamentais:
    - Ausência de chave nunca é exceção
    - Falhas de validação interrompem a inicialização explicitamente
    - Nenhum estado global é mantido
"""
