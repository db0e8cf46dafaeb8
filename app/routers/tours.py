# =============================================================================
# app/routers/tours.py - Tour Date CRUD Endpoints
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from core.models import MessageResponse, TourCreate, TourResponse, TourUpdate
from core.services.document_service import TourService

router = APIRouter()

TourId = Annotated[str, Path(description="Tour ID")]


@router.get("", response_model=list[TourResponse])
async def list_tours():
    """List all tour dates, soonest first."""
    return TourService.list()


@router.get("/{tour_id}", response_model=TourResponse)
async def get_tour(tour_id: TourId):
    """Get a single tour date."""
    return TourService.get(tour_id)


@router.post("", response_model=TourResponse, status_code=201)
async def create_tour(request: TourCreate):
    """
    Create a tour date.

    `title`, `location` and `date` are required. `ticketUrl` defaults
    to "#".
    """
    return TourService.create(request.model_dump(mode="json"))


@router.put("/{tour_id}", response_model=TourResponse)
async def update_tour(tour_id: TourId, request: TourUpdate):
    """Update only the fields present in the body."""
    return TourService.update(tour_id, request.model_dump(mode="json", exclude_unset=True))


@router.delete("/{tour_id}", response_model=MessageResponse)
async def delete_tour(tour_id: TourId):
    """Delete a tour date."""
    TourService.delete(tour_id)
    return MessageResponse(message="Tour deleted successfully")
