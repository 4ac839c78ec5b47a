"""Live parking lookup endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...models.errors import Result
from ...schemas.parking import ErrorResponse, ParkingModel, to_models
from ...services.parking import ParkingService
from ..dependencies import get_parking_service

router = APIRouter(prefix="/parkings", tags=["parkings"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def unwrap(result: Result) -> object:
    """Return the payload of a successful result or raise a 404 carrying the error message."""
    if not result.is_success:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.error.message)
    return result.data


@router.get("", response_model=List[ParkingModel], status_code=status.HTTP_200_OK)
def get_parkings(
    symbol: Optional[str] = Query(default=None, description="Text containing the parking symbol"),
    parking_id: Optional[int] = Query(default=None, alias="id"),
    name: Optional[str] = Query(default=None, description="Text containing the parking name"),
    opened: Optional[bool] = Query(default=None),
    has_free_spots: Optional[bool] = Query(default=None),
    service: ParkingService = Depends(get_parking_service),
) -> List[ParkingModel]:
    parkings = service.get_by_params(
        symbol=symbol,
        parking_id=parking_id,
        name=name,
        opened=opened,
        has_free_spots=has_free_spots,
    )
    return to_models(ParkingModel, parkings)


@router.get("/free", response_model=List[ParkingModel], status_code=status.HTTP_200_OK)
def get_parkings_with_free_spots(
    opened: Optional[bool] = Query(default=None),
    service: ParkingService = Depends(get_parking_service),
) -> List[ParkingModel]:
    return to_models(ParkingModel, service.get_all_with_free_spots(opened))


@router.get("/most-free", response_model=ParkingModel, responses=NOT_FOUND)
def get_parking_with_the_most_free_spots(
    opened: Optional[bool] = Query(default=None),
    service: ParkingService = Depends(get_parking_service),
) -> ParkingModel:
    return ParkingModel.model_validate(unwrap(service.get_with_the_most_free_spots(opened)))


@router.get("/closest", response_model=ParkingModel, responses=NOT_FOUND)
def get_closest_parking(
    address: str = Query(..., min_length=1),
    service: ParkingService = Depends(get_parking_service),
) -> ParkingModel:
    return ParkingModel.model_validate(unwrap(service.get_closest_parking(address)))


@router.get("/name/{name}", response_model=ParkingModel, responses=NOT_FOUND)
def get_parking_by_name(
    name: str,
    opened: Optional[bool] = Query(default=None),
    service: ParkingService = Depends(get_parking_service),
) -> ParkingModel:
    return ParkingModel.model_validate(unwrap(service.get_by_name(name, opened)))


@router.get("/id/{parking_id}", response_model=ParkingModel, responses=NOT_FOUND)
def get_parking_by_id(
    parking_id: int,
    opened: Optional[bool] = Query(default=None),
    service: ParkingService = Depends(get_parking_service),
) -> ParkingModel:
    return ParkingModel.model_validate(unwrap(service.get_by_id(parking_id, opened)))


@router.get("/symbol/{symbol}", response_model=ParkingModel, responses=NOT_FOUND)
def get_parking_by_symbol(
    symbol: str,
    opened: Optional[bool] = Query(default=None),
    service: ParkingService = Depends(get_parking_service),
) -> ParkingModel:
    return ParkingModel.model_validate(unwrap(service.get_by_symbol(symbol, opened)))
