"""Outcome Schema: the result of one add invocation as seen by the entry point.

Invariants:
    - Exactly one of value / error is set
    - error holds the inner object of OnionError.to_response()
"""

from pydantic import BaseModel, model_validator


class AddOutcome(BaseModel):
    """Success value or error envelope for add(y)."""
    y: int
    value: int | None = None
    error: dict | None = None

    @model_validator(mode="after")
    def exactly_one_of_value_or_error(self) -> "AddOutcome":
        if (self.value is None) == (self.error is None):
            raise ValueError("exactly one of value or error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        if self.ok:
            return f"Ok({self.value})"
        return f"Err({self.error['code']}: {self.error['message']})"
