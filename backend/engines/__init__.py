from engines.inflection import NameInflector, get_inflector

__all__ = [
    "NameInflector",
    "get_inflector",
]
