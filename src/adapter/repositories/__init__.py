from .json_entity_store import JsonFileEntityStore

__all__ = [
    "JsonFileEntityStore",
]
