from uuid import UUID

from sqlalchemy import update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.notification_repository import INotificationRepository
from src.domain.entities import Notification, NotificationStatus


class NotificationRepository(INotificationRepository):
    """Notification repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def mark_handled_by_session_id(self, session_id: UUID) -> int:
        """Mark every open notification of a session as handled"""
        stmt = (
            update(Notification)
            .where(
                Notification.session_id == session_id,
                Notification.status != NotificationStatus.handled,
            )
            .values(status=NotificationStatus.handled)
        )
        result = await self.session.execute(stmt)
        return result.rowcount
