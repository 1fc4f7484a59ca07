"""
Shared kernel for cross-layer primitives (models, repositories).
Intentionally does not import submodules eagerly to avoid circular dependencies.
"""

__all__: list[str] = []
