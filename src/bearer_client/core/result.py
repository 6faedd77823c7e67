from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from bearer_client.core.models import HttpResponse

if TYPE_CHECKING:
    from bearer_client.http.errors import ClientError


@dataclass(frozen=True)
class Ok:
    """Successful request outcome."""

    value: HttpResponse

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> HttpResponse:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed request outcome carrying the error that ended it."""

    error: "ClientError"

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> HttpResponse:
        raise self.error


Result = Union[Ok, Err]
