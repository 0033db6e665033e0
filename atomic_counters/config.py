"""Application configuration via Pydantic Settings.

NOTE: Environment variable names are mapped explicitly so that the AWS-style
names (AWS_REGION, DYNAMODB_ENDPOINT_URL) are picked up as-is.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Counters table layout
    table_name: str = Field(default="AtomicCounters", validation_alias="ATOMIC_COUNTERS_TABLE")
    key_attribute: str = Field(default="id", validation_alias="ATOMIC_COUNTERS_KEY_ATTRIBUTE")
    count_attribute: str = Field(
        default="lastValue",
        validation_alias="ATOMIC_COUNTERS_COUNT_ATTRIBUTE",
    )
    increment: int = Field(default=1, validation_alias="ATOMIC_COUNTERS_INCREMENT")

    # Store
    store_backend: str = Field(default="dynamodb", validation_alias="COUNTER_STORE_BACKEND")
    aws_region: str | None = Field(default=None, validation_alias="AWS_REGION")
    dynamodb_endpoint_url: str | None = Field(
        default=None,
        validation_alias="DYNAMODB_ENDPOINT_URL",
    )

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
