from os import environ

from pydantic import BaseModel, ConfigDict, Field


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_url: str
    api_timeout: float | None = None
    deep_link_scheme: str
    binding_backend: str = Field(..., pattern="^(memory|file|dynamodb)$")
    binding_file_path: str
    binding_table: str
    device_id: str
    dynamodb_endpoint: str | None = None
    aws_region: str
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config: for testing only."""
    global _cached_config
    _cached_config = None


def _optional_float(name: str) -> float | None:
    raw = environ.get(name, "").strip()
    return float(raw) if raw else None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        api_url=environ.get("PLANNER_API_URL", "http://localhost:3333"),
        api_timeout=_optional_float("PLANNER_API_TIMEOUT"),
        deep_link_scheme=environ.get("DEEP_LINK_SCHEME", "planner"),
        binding_backend=environ.get("BINDING_BACKEND", "file"),
        binding_file_path=environ.get("BINDING_FILE_PATH", ".planner/binding.json"),
        binding_table=environ.get("BINDING_TABLE", "DeviceBindings"),
        device_id=environ.get("DEVICE_ID", "local"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
