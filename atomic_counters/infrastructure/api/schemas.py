"""Request / response models for the counters API."""

from pydantic import BaseModel


class IncrementRequest(BaseModel):
    amount: int | None = None
    table_name: str | None = None


class CounterValueResponse(BaseModel):
    counter_id: str
    value: int
