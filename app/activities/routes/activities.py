from fastapi import APIRouter, Depends, status

from app.activities.schemas.activity import ActivityCreate, ActivityResponse
from app.activities.schemas.statistics import UserStatisticsResponse
from app.activities.services.activity_service import ActivityService
from app.activities.services.statistics_service import StatisticsService
from app.core.schemas import (
    ApiResponse,
    DeletedCount,
    list_response,
    message_response,
    success_response,
)
from app.core.validators import parse_email_param
from app.db.store import Store, get_store

router = APIRouter()


@router.get("", response_model=ApiResponse[list[ActivityResponse]])
async def list_activities(
    store: Store = Depends(get_store),
) -> ApiResponse[list[ActivityResponse]]:
    return list_response(ActivityService.list_activities(store))


@router.get("/user/{email}", response_model=ApiResponse[list[ActivityResponse]])
async def list_user_activities(
    email: str, store: Store = Depends(get_store)
) -> ApiResponse[list[ActivityResponse]]:
    return list_response(ActivityService.list_user_activities(store, parse_email_param(email)))


@router.get("/statistics/{email}", response_model=ApiResponse[UserStatisticsResponse])
async def get_user_statistics(
    email: str, store: Store = Depends(get_store)
) -> ApiResponse[UserStatisticsResponse]:
    """
    Activity statistics of one user.

    Returns:
    - Totals over every activity (count, sums, averages, best level)
    - The same metrics per exercise type
    - The most recent activities
    """
    return success_response(
        StatisticsService.get_user_statistics(store, parse_email_param(email))
    )


@router.get("/{activity_id}", response_model=ApiResponse[ActivityResponse])
async def get_activity(
    activity_id: int, store: Store = Depends(get_store)
) -> ApiResponse[ActivityResponse]:
    return success_response(ActivityService.get_activity(store, activity_id))


@router.post(
    "", response_model=ApiResponse[ActivityResponse], status_code=status.HTTP_201_CREATED
)
async def create_activity(
    payload: ActivityCreate, store: Store = Depends(get_store)
) -> ApiResponse[ActivityResponse]:
    """Log a completed exercise session."""
    activity = ActivityService.create_activity(store, payload)
    return success_response(activity, message="Actividad registrada exitosamente")


@router.delete("/user/{email}", response_model=ApiResponse[DeletedCount])
async def delete_user_activities(
    email: str, store: Store = Depends(get_store)
) -> ApiResponse[DeletedCount]:
    email = parse_email_param(email)
    deleted = ActivityService.delete_user_activities(store, email)
    return success_response(
        DeletedCount(deleted=deleted),
        message=f"Se eliminaron {deleted} actividades del usuario {email}",
    )


@router.delete("/{activity_id}", response_model=ApiResponse[None])
async def delete_activity(activity_id: int, store: Store = Depends(get_store)) -> ApiResponse[None]:
    ActivityService.delete_activity(store, activity_id)
    return message_response("Actividad eliminada exitosamente")


@router.delete("", response_model=ApiResponse[DeletedCount])
async def delete_all_activities(store: Store = Depends(get_store)) -> ApiResponse[DeletedCount]:
    """Wipe every activity (admin reset)."""
    deleted = ActivityService.delete_all_activities(store)
    return success_response(
        DeletedCount(deleted=deleted),
        message=f"Se eliminaron todas las actividades ({deleted} registros)",
    )
