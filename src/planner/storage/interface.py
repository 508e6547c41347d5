from abc import ABC, abstractmethod


class BindingStore(ABC):
    """Key-value backend for device-local state."""

    @abstractmethod
    def get(self, key: str) -> str | None: ...

    @abstractmethod
    def put(self, key: str, value: str) -> None: ...

    @abstractmethod
    def delete(self, key: str) -> None: ...


def get_binding_store() -> BindingStore:
    from planner.config import get_config

    config = get_config()

    if config.binding_backend == "memory":
        from planner.storage.memory import MemoryBindingStore

        return MemoryBindingStore()

    if config.binding_backend == "dynamodb":
        from planner.clients import get_dynamo_client
        from planner.storage.dynamo import DynamoBindingStore

        return DynamoBindingStore(get_dynamo_client(), config.binding_table, config.device_id)

    from planner.storage.file import JsonFileBindingStore

    return JsonFileBindingStore(config.binding_file_path)
