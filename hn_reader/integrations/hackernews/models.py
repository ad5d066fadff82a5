"""Data model for decoded Hacker News responses."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from hn_reader.integrations.hackernews.errors import HackerNewsError

T = TypeVar("T")


class Story(BaseModel):
    """A story as returned by the item endpoint.

    Only ``id`` and ``title`` are kept; the remaining wire fields
    (``by``, ``score``, ``time``, ``url``, ...) are ignored. Dead or
    deleted items come back without a title, which is still a valid story.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    id: int = Field(..., description="Story identifier")
    title: str | None = Field(default=None, description="Story title")


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of a single request: either a decoded value or an error."""

    value: T | None = None
    error: HackerNewsError | None = None

    @classmethod
    def success(cls, value: T) -> "FetchResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: HackerNewsError) -> "FetchResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value

    def value_or(self, default: Any) -> Any:
        return self.value if self.error is None else default
