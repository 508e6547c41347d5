"""Shared test fixtures for the trip planner."""

import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def memory_store():
    from planner.storage import MemoryBindingStore

    return MemoryBindingStore()


@pytest.fixture
def binding(memory_store):
    from planner.services.binding import DeviceTripBinding

    return DeviceTripBinding(memory_store)


@pytest.fixture
def trip_client():
    from planner.models import CreatedTrip
    from planner.remote import TripClient

    client = AsyncMock(spec=TripClient)
    client.create.return_value = CreatedTrip(trip_id="trip-123")
    return client


@pytest.fixture
def participant_client():
    from planner.remote import ParticipantClient

    client = AsyncMock(spec=ParticipantClient)
    client.confirm.return_value = None
    return client


@pytest.fixture
def link_client():
    from planner.remote import LinkClient

    return AsyncMock(spec=LinkClient)


# DynamoDB fixtures
@pytest.fixture
def dynamodb_client():
    """Provide a DynamoDB client for integration tests."""
    import boto3
    from planner.config import get_config

    config = get_config()

    return boto3.client(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )


@pytest.fixture
def bindings_table(dynamodb_client):
    """Provide the device bindings table name, emptied after the test."""
    from planner.config import get_config

    table_name = get_config().binding_table
    yield table_name

    # Cleanup: scan and delete all items created during test
    response = dynamodb_client.scan(TableName=table_name)
    for item in response.get("Items", []):
        dynamodb_client.delete_item(
            TableName=table_name,
            Key={"deviceId": item["deviceId"], "storageKey": item["storageKey"]},
        )
