"""Lookup outcomes and infrastructure failures.

Lookups that find nothing are normal outcomes and travel inside a ``Result``.
Upstream and storage failures are exceptions so the HTTP layer can tell them
apart from a legitimate "not found".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ParkingError:
    @property
    def message(self) -> str:
        return "Parking not found"


@dataclass(frozen=True, slots=True)
class ParkingNotFoundById(ParkingError):
    parking_id: int

    @property
    def message(self) -> str:
        return f"Parking with id {self.parking_id} not found"


@dataclass(frozen=True, slots=True)
class ParkingNotFoundByName(ParkingError):
    name: str

    @property
    def message(self) -> str:
        return f"Parking with name '{self.name}' not found"


@dataclass(frozen=True, slots=True)
class ParkingNotFoundBySymbol(ParkingError):
    symbol: str

    @property
    def message(self) -> str:
        return f"Parking with symbol '{self.symbol}' not found"


@dataclass(frozen=True, slots=True)
class ParkingNotFoundByAddress(ParkingError):
    address: str

    @property
    def message(self) -> str:
        return f"No parking found near address '{self.address}'"


@dataclass(frozen=True, slots=True)
class NoFreeParkingSpotsAvailable(ParkingError):
    opened: Optional[bool] = None

    @property
    def message(self) -> str:
        if self.opened is None:
            return "No parking with free spots available"
        state = "opened" if self.opened else "closed"
        return f"No {state} parking with free spots available"


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    data: Optional[T] = None
    error: Optional[ParkingError] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: Optional[T]) -> Result[T]:
        return cls(data=data)

    @classmethod
    def failure(cls, error: ParkingError) -> Result[T]:
        return cls(error=error)


class UpstreamUnavailableError(RuntimeError):
    """The live parking feed or the geocoder failed or timed out."""


class StorageError(RuntimeError):
    """The persistent store could not read or write its backing file."""
