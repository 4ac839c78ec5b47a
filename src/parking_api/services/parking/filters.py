"""Predicate over live parking snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import Iterable, Optional

from ...models.domain import ParkingResponse


@dataclass(frozen=True, slots=True)
class ParkingFilter:
    """All supplied fields must match; ``None`` imposes no constraint.

    ``symbol`` and ``name`` match when the query text contains the facility's
    value (case-insensitive), so "P1 garage" matches symbol "P1".
    """

    symbol: Optional[str] = None
    parking_id: Optional[int] = None
    name: Optional[str] = None
    is_opened: Optional[bool] = None
    has_free_spots: Optional[bool] = None

    def matches(self, parking: ParkingResponse, now: Optional[time] = None) -> bool:
        if self.symbol is not None and parking.symbol.lower() not in self.symbol.lower():
            return False
        if self.parking_id is not None and parking.parking_id != self.parking_id:
            return False
        if self.name is not None and parking.name.lower() not in self.name.lower():
            return False
        if self.is_opened is not None:
            moment = now or datetime.now().time()
            if parking.is_opened_at(moment) != self.is_opened:
                return False
        if self.has_free_spots is not None and (parking.free_spots > 0) != self.has_free_spots:
            return False
        return True

    def apply(self, parkings: Iterable[ParkingResponse]) -> list[ParkingResponse]:
        now = datetime.now().time()
        return [parking for parking in parkings if self.matches(parking, now)]
