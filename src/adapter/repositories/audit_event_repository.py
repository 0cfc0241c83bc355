import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.domain.entities import AuditEvent

logger = logging.getLogger(__name__)


class AuditEventRepository(IAuditEventRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, event: AuditEvent) -> AuditEvent:
        # Never updated afterwards, so no refresh after the flush
        self.session.add(event)
        await self.session.flush()
        logger.info(
            f"Audit {event.action} customer={event.customer_id} actor={event.user_id}"
        )
        return event
