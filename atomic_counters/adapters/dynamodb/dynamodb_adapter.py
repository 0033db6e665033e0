"""DynamoDB adapter — implements CounterStorePort with boto3."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping

import boto3
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

from atomic_counters.application.ports.counter_store import CounterStorePort
from atomic_counters.config import settings
from atomic_counters.domain.policies.request_overrides import (
    AMOUNT_VALUE,
    COUNT_NAME,
    merge_overrides,
)
from atomic_counters.domain.value_objects.counter_request import (
    AtomicAddRequest,
    GetCountRequest,
)

logger = logging.getLogger(__name__)

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


class DynamoDBCounterStore(CounterStorePort):
    """Counters as DynamoDB items, incremented with ``UpdateItem ... ADD``.

    boto3 is blocking, so each call runs in a worker thread; the event loop
    only awaits the result.
    """

    def __init__(self, client=None):
        self._client = client if client is not None else self._default_client()

    @staticmethod
    def _default_client():
        kwargs: dict[str, Any] = {}
        if settings.aws_region:
            kwargs["region_name"] = settings.aws_region
        if settings.dynamodb_endpoint_url:
            kwargs["endpoint_url"] = settings.dynamodb_endpoint_url
        return boto3.client("dynamodb", **kwargs)

    async def atomic_add(self, request: AtomicAddRequest) -> Mapping[str, Any] | None:
        params = self.build_update_params(request)
        logger.debug("UpdateItem %s", params)
        response = await asyncio.to_thread(self._client.update_item, **params)
        return _deserialize(response.get("Attributes"))

    async def get_item(self, request: GetCountRequest) -> Mapping[str, Any] | None:
        params = self.build_get_params(request)
        logger.debug("GetItem %s", params)
        response = await asyncio.to_thread(self._client.get_item, **params)
        return _deserialize(response.get("Item"))

    @staticmethod
    def build_update_params(request: AtomicAddRequest) -> dict[str, Any]:
        derived = {
            "TableName": request.table_name,
            "Key": _serialize(request.key),
            "UpdateExpression": f"ADD {COUNT_NAME} {AMOUNT_VALUE}",
            "ExpressionAttributeNames": {COUNT_NAME: request.count_attribute},
            "ExpressionAttributeValues": {AMOUNT_VALUE: _serializer.serialize(request.amount)},
            "ReturnValues": "UPDATED_NEW",
        }
        return merge_overrides(derived, request.overrides)

    @staticmethod
    def build_get_params(request: GetCountRequest) -> dict[str, Any]:
        derived = {
            "TableName": request.table_name,
            "Key": _serialize(request.key),
            "ProjectionExpression": COUNT_NAME,
            "ExpressionAttributeNames": {COUNT_NAME: request.count_attribute},
        }
        return merge_overrides(derived, request.overrides)


def _serialize(item: Mapping[str, Any]) -> dict[str, Any]:
    return {name: _serializer.serialize(value) for name, value in item.items()}


def _deserialize(item: Mapping[str, Any] | None) -> dict[str, Any] | None:
    if item is None:
        return None
    return {name: _deserializer.deserialize(value) for name, value in item.items()}
