from fastapi import APIRouter, Depends, status

from app.core.schemas import ApiResponse, DeletedCount, message_response, success_response
from app.core.validators import parse_email_param
from app.db.store import Store, get_store
from app.progress.schemas.progress import ProgressResponse, ProgressSubmit, UserProgressResponse
from app.progress.services.progress_service import ProgressService

router = APIRouter()


@router.get("/user/{email}", response_model=ApiResponse[UserProgressResponse])
async def get_user_progress(
    email: str, store: Store = Depends(get_store)
) -> ApiResponse[UserProgressResponse]:
    """Recent daily progress of a user plus totals over all recorded days."""
    return success_response(ProgressService.get_user_progress(store, parse_email_param(email)))


@router.post(
    "", response_model=ApiResponse[ProgressResponse], status_code=status.HTTP_201_CREATED
)
async def submit_progress(
    payload: ProgressSubmit, store: Store = Depends(get_store)
) -> ApiResponse[ProgressResponse]:
    """Record a day's totals; a second submission for the same day replaces the first."""
    entry = ProgressService.submit_progress(store, payload)
    return success_response(entry, message="Progreso registrado exitosamente")


@router.delete("/user/{email}", response_model=ApiResponse[DeletedCount])
async def delete_user_progress(
    email: str, store: Store = Depends(get_store)
) -> ApiResponse[DeletedCount]:
    email = parse_email_param(email)
    deleted = ProgressService.delete_user_progress(store, email)
    return success_response(
        DeletedCount(deleted=deleted),
        message=f"Se eliminó todo el progreso del usuario {email}",
    )


@router.delete("/{progress_id}", response_model=ApiResponse[None])
async def delete_progress(progress_id: int, store: Store = Depends(get_store)) -> ApiResponse[None]:
    ProgressService.delete_progress(store, progress_id)
    return message_response("Progreso eliminado correctamente")


@router.delete("", response_model=ApiResponse[DeletedCount])
async def delete_all_progress(store: Store = Depends(get_store)) -> ApiResponse[DeletedCount]:
    """Wipe every progress entry (admin reset)."""
    deleted = ProgressService.delete_all_progress(store)
    return success_response(
        DeletedCount(deleted=deleted),
        message=f"Se eliminó todo el progreso ({deleted} registros)",
    )
