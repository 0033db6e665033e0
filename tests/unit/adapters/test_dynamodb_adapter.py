"""Tests for DynamoDBCounterStore — boto3 client stubbed with botocore's Stubber (no network)."""

from decimal import Decimal

import boto3
import pytest
from botocore.exceptions import ClientError
from botocore.stub import Stubber

from atomic_counters.adapters.dynamodb.dynamodb_adapter import DynamoDBCounterStore
from atomic_counters.application.counter_service import AtomicCounters
from atomic_counters.application.options import CounterOptions
from atomic_counters.domain.errors import MalformedResponse, StoreError
from atomic_counters.domain.value_objects.counter_request import (
    AtomicAddRequest,
    GetCountRequest,
)


@pytest.fixture
def client():
    return boto3.client(
        "dynamodb",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def stubber(client):
    with Stubber(client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def counters(client):
    store = DynamoDBCounterStore(client)
    return AtomicCounters(store_factory=lambda: store)


def _add_request(**kwargs) -> AtomicAddRequest:
    fields = dict(
        table_name="AtomicCounters", key_attribute="id",
        counter_id="Users", count_attribute="lastValue", amount=1,
    )
    fields.update(kwargs)
    return AtomicAddRequest(**fields)


# ─── Request building ───────────────────────────────────────────────


def test_update_params():
    params = DynamoDBCounterStore.build_update_params(_add_request(amount=5))
    assert params == {
        "TableName": "AtomicCounters",
        "Key": {"id": {"S": "Users"}},
        "UpdateExpression": "ADD #count :amount",
        "ExpressionAttributeNames": {"#count": "lastValue"},
        "ExpressionAttributeValues": {":amount": {"N": "5"}},
        "ReturnValues": "UPDATED_NEW",
    }


def test_update_params_with_overrides():
    request = _add_request(overrides={"TableName": "Other", "ReturnConsumedCapacity": "TOTAL"})
    params = DynamoDBCounterStore.build_update_params(request)
    assert params["TableName"] == "Other"
    assert params["ReturnConsumedCapacity"] == "TOTAL"
    assert params["UpdateExpression"] == "ADD #count :amount"


def test_update_params_with_condition_bound():
    request = _add_request(overrides={
        "ConditionExpression": "attribute_not_exists(#count) OR #count < :max",
        "ExpressionAttributeValues": {":max": {"N": "100"}},
    })
    params = DynamoDBCounterStore.build_update_params(request)
    assert params["ConditionExpression"] == "attribute_not_exists(#count) OR #count < :max"
    assert params["ExpressionAttributeNames"] == {"#count": "lastValue"}
    assert params["ExpressionAttributeValues"] == {
        ":amount": {"N": "1"},
        ":max": {"N": "100"},
    }


def test_update_params_fractional_amount():
    params = DynamoDBCounterStore.build_update_params(_add_request(amount=0.5))
    assert params["ExpressionAttributeValues"] == {":amount": {"N": "0.5"}}


def test_get_params():
    request = GetCountRequest(
        table_name="AtomicCounters", key_attribute="id", counter_id="Users",
        count_attribute="count", overrides={"ConsistentRead": True},
    )
    assert DynamoDBCounterStore.build_get_params(request) == {
        "TableName": "AtomicCounters",
        "Key": {"id": {"S": "Users"}},
        "ProjectionExpression": "#count",
        "ExpressionAttributeNames": {"#count": "count"},
        "ConsistentRead": True,
    }


# ─── Store calls ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_atomic_add_deserializes_attributes(client, stubber):
    request = _add_request(amount=5)
    stubber.add_response(
        "update_item",
        {"Attributes": {"lastValue": {"N": "5"}}},
        DynamoDBCounterStore.build_update_params(request),
    )
    attributes = await DynamoDBCounterStore(client).atomic_add(request)
    assert attributes == {"lastValue": Decimal("5")}


@pytest.mark.asyncio
async def test_get_item_absent_returns_none(client, stubber):
    stubber.add_response("get_item", {})
    request = GetCountRequest(
        table_name="AtomicCounters", key_attribute="id",
        counter_id="Users", count_attribute="lastValue",
    )
    assert await DynamoDBCounterStore(client).get_item(request) is None


# ─── Through the facade ─────────────────────────────────────────────


@pytest.mark.asyncio
async def test_increment_returns_new_value(counters, stubber):
    stubber.add_response("update_item", {"Attributes": {"lastValue": {"N": "2"}}})
    assert await counters.increment("Users") == 2


@pytest.mark.asyncio
async def test_get_last_value_of_missing_counter_is_zero(counters, stubber):
    stubber.add_response("get_item", {})
    assert await counters.get_last_value("Users") == 0


@pytest.mark.asyncio
async def test_get_last_value_string_attribute_is_malformed(counters, stubber):
    stubber.add_response("get_item", {"Item": {"lastValue": {"S": "2"}}})
    with pytest.raises(MalformedResponse):
        await counters.get_last_value("Users")


@pytest.mark.asyncio
async def test_increment_without_attributes_is_malformed(counters, stubber):
    stubber.add_response("update_item", {})
    with pytest.raises(MalformedResponse):
        await counters.increment("Users")


@pytest.mark.asyncio
async def test_client_error_surfaces_as_store_error(counters, stubber):
    stubber.add_client_error(
        "update_item",
        service_error_code="ProvisionedThroughputExceededException",
        service_message="Slow down",
        http_status_code=400,
    )
    errors = []
    result = counters.increment("Users", CounterOptions(on_error=errors.append))
    with pytest.raises(StoreError) as exc_info:
        await result

    error = exc_info.value
    assert isinstance(error.cause, ClientError)
    assert error.code == "ProvisionedThroughputExceededException"
    assert errors == [error]


@pytest.mark.asyncio
async def test_fractional_stored_value_is_truncated(counters, stubber):
    stubber.add_response("get_item", {"Item": {"lastValue": {"N": "2.5"}}})
    assert await counters.get_last_value("Users") == 2


@pytest.mark.asyncio
async def test_failed_condition_surfaces_as_store_error(counters, stubber):
    stubber.add_client_error(
        "update_item",
        service_error_code="ConditionalCheckFailedException",
        http_status_code=400,
    )
    options = CounterOptions(request_overrides={
        "ConditionExpression": "#count < :max",
        "ExpressionAttributeValues": {":max": {"N": "3"}},
    })
    with pytest.raises(StoreError) as exc_info:
        await counters.increment("Users", options)
    assert exc_info.value.code == "ConditionalCheckFailedException"
