from fastapi import APIRouter, Depends, status

from app.achievements.schemas.achievement import (
    AchievementCreate,
    AchievementResponse,
    AchievementVerifyRequest,
    VerificationResult,
)
from app.achievements.services.achievement_service import AchievementService
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


@router.get("/user/{email}", response_model=ApiResponse[list[AchievementResponse]])
async def list_user_achievements(
    email: str, store: Store = Depends(get_store)
) -> ApiResponse[list[AchievementResponse]]:
    return list_response(
        AchievementService.list_user_achievements(store, parse_email_param(email))
    )


@router.post(
    "", response_model=ApiResponse[AchievementResponse], status_code=status.HTTP_201_CREATED
)
async def grant_achievement(
    payload: AchievementCreate, store: Store = Depends(get_store)
) -> ApiResponse[AchievementResponse]:
    """Grant an achievement by hand. 409 if the user already holds that type."""
    achievement = AchievementService.grant_achievement(store, payload)
    return success_response(achievement, message="Logro registrado exitosamente")


@router.post("/verify", response_model=ApiResponse[VerificationResult])
async def verify_achievements(
    payload: AchievementVerifyRequest, store: Store = Depends(get_store)
) -> ApiResponse[VerificationResult]:
    """
    Evaluate the achievement rules for a user.

    Returns only the achievements granted by this call; achievements the
    user already holds are not repeated.
    """
    result = AchievementService.verify_achievements(store, payload.user_email)
    return success_response(result, message="Verificación de logros completada")


@router.delete("/user/{email}", response_model=ApiResponse[DeletedCount])
async def delete_user_achievements(
    email: str, store: Store = Depends(get_store)
) -> ApiResponse[DeletedCount]:
    email = parse_email_param(email)
    deleted = AchievementService.delete_user_achievements(store, email)
    return success_response(
        DeletedCount(deleted=deleted),
        message=f"Se eliminaron todos los logros del usuario {email}",
    )


@router.delete("/{achievement_id}", response_model=ApiResponse[None])
async def delete_achievement(
    achievement_id: int, store: Store = Depends(get_store)
) -> ApiResponse[None]:
    AchievementService.delete_achievement(store, achievement_id)
    return message_response("Logro eliminado correctamente")


@router.delete("", response_model=ApiResponse[DeletedCount])
async def delete_all_achievements(
    store: Store = Depends(get_store),
) -> ApiResponse[DeletedCount]:
    """Wipe every achievement (admin reset)."""
    deleted = AchievementService.delete_all_achievements(store)
    return success_response(
        DeletedCount(deleted=deleted),
        message=f"Se eliminaron todos los logros ({deleted} registros)",
    )
