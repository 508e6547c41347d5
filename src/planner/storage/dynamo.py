"""DynamoDB store: one item per (device, key), for devices without local disk."""

from typing import Any

from .interface import BindingStore


class DynamoBindingStore(BindingStore):
    def __init__(self, dynamo_client: Any, table_name: str, device_id: str):
        self._client = dynamo_client
        self._table = table_name
        self._device_id = device_id

    def _key(self, key: str) -> dict[str, dict[str, str]]:
        return {"deviceId": {"S": self._device_id}, "storageKey": {"S": key}}

    def get(self, key: str) -> str | None:
        response = self._client.get_item(TableName=self._table, Key=self._key(key), ConsistentRead=True)
        item = response.get("Item")
        if not item:
            return None
        return item["value"]["S"]

    def put(self, key: str, value: str) -> None:
        self._client.put_item(
            TableName=self._table,
            Item={**self._key(key), "value": {"S": value}},
        )

    def delete(self, key: str) -> None:
        """delete_item is idempotent: no error for missing items."""
        self._client.delete_item(TableName=self._table, Key=self._key(key))
