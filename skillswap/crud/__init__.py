"""CRUD package exports with lazy module loading.

Keeps `import skillswap.crud` cheap for unit tests that only touch one
data-access module.
"""

from importlib import import_module

__all__ = ["user", "skill", "session", "search", "review"]


def __getattr__(name):
    if name in __all__:
        return import_module(f".{name}", __name__)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
