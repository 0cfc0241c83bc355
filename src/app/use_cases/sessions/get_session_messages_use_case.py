from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.identity import Identity

from .dtos import GetMessagesResponse, MessageInfo
from .session_lookup import get_visible_session


class GetSessionMessagesUseCase:
    """Messages of a visible session in chronological order"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, session_id: UUID
    ) -> Result[GetMessagesResponse]:
        async with self.uow:
            session_result = await get_visible_session(self.uow, identity, session_id)
            if session_result.is_err():
                return session_result

            messages = await self.uow.chat_messages.get_by_session_id(session_id)
            return Return.ok(
                GetMessagesResponse(
                    session_id=str(session_id),
                    messages=[MessageInfo.from_entity(m) for m in messages],
                )
            )
