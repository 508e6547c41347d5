"""Device-local key-value storage backends."""

from planner.storage.dynamo import DynamoBindingStore
from planner.storage.file import JsonFileBindingStore
from planner.storage.interface import BindingStore, get_binding_store
from planner.storage.memory import MemoryBindingStore

__all__ = ["BindingStore", "DynamoBindingStore", "JsonFileBindingStore", "MemoryBindingStore", "get_binding_store"]
