"""Lazy-initialized clients: reused for the lifetime of the process."""

from functools import lru_cache
from typing import Any

import boto3

from planner.config import get_config


@lru_cache(maxsize=1)
def get_dynamo_client() -> Any:
    config = get_config()
    return boto3.client("dynamodb", endpoint_url=config.dynamodb_endpoint, region_name=config.aws_region)
