import logging
from dataclasses import dataclass
from typing import cast

from sqlalchemy import Select, delete, insert, select

from app.achievements.models.achievement import Achievement
from app.achievements.schemas.achievement import (
    AchievementCreate,
    AchievementResponse,
    VerificationResult,
)
from app.activities.schemas.statistics import ActivityTotals
from app.activities.services.statistics_service import StatisticsService
from app.core.datetime_utils import utcnow
from app.core.exceptions import (
    ConflictError,
    ConstraintViolationError,
    NotFoundError,
    StoreError,
)
from app.db.store import Store
from app.users.models.user import User
from app.users.schemas.user import UserResponse
from app.users.services.user_service import UserService

logger = logging.getLogger(__name__)

achievements = Achievement.__table__
users = User.__table__


@dataclass(frozen=True)
class AchievementRule:
    """Grant ``achievement_type`` once ``metric`` reaches ``threshold``."""

    achievement_type: str
    description: str
    metric: str
    threshold: float

    def is_met(self, totals: ActivityTotals) -> bool:
        return getattr(totals, self.metric) >= self.threshold


def _achievement_query() -> Select:
    return select(achievements, users.c.full_name.label("user_full_name")).select_from(
        achievements.outerjoin(users, achievements.c.user_id == users.c.id)
    )


class AchievementService:
    RULES: tuple[AchievementRule, ...] = (
        AchievementRule(
            "primeros_pasos",
            "¡Primeros pasos! Completaste 10 ejercicios",
            "exercises_completed_total",
            10,
        ),
        AchievementRule(
            "matematico_novato",
            "¡Matemático novato! Completaste 50 ejercicios",
            "exercises_completed_total",
            50,
        ),
        AchievementRule(
            "matematico_experto",
            "¡Matemático experto! Completaste 100 ejercicios",
            "exercises_completed_total",
            100,
        ),
        AchievementRule(
            "alta_precision",
            "¡Alta precisión! Mantienes más del 90% de precisión",
            "average_accuracy",
            90,
        ),
        AchievementRule(
            "puntuacion_1000",
            "¡Puntuación 1000! Alcanzaste 1000 puntos",
            "score_total",
            1000,
        ),
    )

    @staticmethod
    def _insert_achievement(
        store: Store, user: UserResponse, achievement_type: str, description: str
    ) -> AchievementResponse:
        """Insert one achievement row.

        Raises:
            ConflictError: the user already holds this achievement type
                (rejected by uq_achievement_user_type).
            StoreError: any other database failure.
        """
        earned_at = utcnow()
        try:
            result = store.execute(
                insert(achievements).values(
                    user_id=user.id,
                    achievement_type=achievement_type,
                    description=description,
                    earned_at=earned_at,
                )
            )
        except ConstraintViolationError as e:
            raise ConflictError(
                "Este logro ya ha sido obtenido por el usuario", resource="achievement"
            ) from e

        return AchievementResponse(
            id=cast(int, result.inserted_id),
            user_id=user.id,
            achievement_type=achievement_type,
            description=description,
            earned_at=earned_at,
            user_full_name=user.full_name,
        )

    @staticmethod
    def evaluate_rules(totals: ActivityTotals) -> list[AchievementRule]:
        """Rules whose threshold is met by ``totals``, in rule-table order."""
        return [rule for rule in AchievementService.RULES if rule.is_met(totals)]

    @staticmethod
    def verify_achievements(store: Store, email: str) -> VerificationResult:
        """Grant every rule-table achievement the user qualifies for and lacks.

        A failure to load the user's totals aborts the whole check. After
        that each rule is independent: an already-held achievement is skipped
        silently and any other insert failure is logged and skipped, so one
        rule can never stop the others.
        """
        user = UserService.get_user_by_email(store, email)
        totals = StatisticsService.get_user_totals(store, user.id)

        granted: list[AchievementResponse] = []
        for rule in AchievementService.evaluate_rules(totals):
            try:
                granted.append(
                    AchievementService._insert_achievement(
                        store, user, rule.achievement_type, rule.description
                    )
                )
            except ConflictError:
                logger.debug(
                    "Achievement already held: user_id=%s, type=%s",
                    user.id,
                    rule.achievement_type,
                )
            except StoreError:
                logger.exception(
                    "Achievement grant failed: user_id=%s, type=%s",
                    user.id,
                    rule.achievement_type,
                )

        if granted:
            logger.info(
                "Achievements granted: user_id=%s, types=%s",
                user.id,
                [a.achievement_type for a in granted],
            )
        return VerificationResult(newly_granted=granted, count=len(granted))

    @staticmethod
    def grant_achievement(store: Store, payload: AchievementCreate) -> AchievementResponse:
        """Grant an arbitrary achievement, bypassing the rule table."""
        user = UserService.get_user_by_email(store, payload.user_email)
        achievement = AchievementService._insert_achievement(
            store, user, payload.achievement_type, payload.description
        )
        logger.info(
            "Achievement granted manually: user_id=%s, type=%s",
            user.id,
            payload.achievement_type,
        )
        return achievement

    @staticmethod
    def list_user_achievements(store: Store, email: str) -> list[AchievementResponse]:
        rows = store.fetch_all(
            _achievement_query()
            .where(users.c.email == email)
            .order_by(achievements.c.earned_at.desc(), achievements.c.id.desc())
        )
        return [AchievementResponse.model_validate(dict(row)) for row in rows]

    @staticmethod
    def delete_achievement(store: Store, achievement_id: int) -> None:
        result = store.execute(delete(achievements).where(achievements.c.id == achievement_id))
        if result.affected_rows == 0:
            raise NotFoundError(
                f"No se encontró un logro con ID {achievement_id}", resource="achievement"
            )

    @staticmethod
    def delete_user_achievements(store: Store, email: str) -> int:
        user = UserService.get_user_by_email(store, email)
        result = store.execute(delete(achievements).where(achievements.c.user_id == user.id))
        logger.info("Achievements deleted: user_id=%s, count=%d", user.id, result.affected_rows)
        return result.affected_rows

    @staticmethod
    def delete_all_achievements(store: Store) -> int:
        result = store.execute(delete(achievements))
        logger.warning("All achievements deleted: count=%d", result.affected_rows)
        return result.affected_rows
