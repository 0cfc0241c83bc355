"""
Reply To Session Use Case

Staff reply to a guest, followed by a best-effort email to the guest.
"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.email_sender import IEmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ChatMessage, MessageRole, SenderType
from src.domain.identity import Identity

from .dtos import MessageInfo, ReplyResponse
from .session_lookup import get_visible_session

logger = logging.getLogger(__name__)


class ReplyToSessionUseCase:
    """
    Use case for replying to a guest.

    Business Rules:
    - Any staff who can view the session may reply
    - Stored as role=assistant, sender_type=human
    - Clears needs_human, bumps updated_at, marks notifications handled
    - Save failure returns MESSAGE_SAVE_FAILED
    - Guest email is sent after commit; its failure never undoes the reply
    """

    def __init__(self, uow: UnitOfWork, email_sender: Optional[IEmailSender] = None):
        self.uow = uow
        self.email_sender = email_sender

    async def execute(
        self, identity: Identity, session_id: UUID, message: str
    ) -> Result[ReplyResponse]:
        content = (message or "").strip()
        if not content:
            return Return.err(Error("VALIDATION_ERROR", "Message is required"))

        async with self.uow:
            session_result = await get_visible_session(self.uow, identity, session_id)
            if session_result.is_err():
                return session_result
            session = session_result.value

            customer = await self.uow.customers.get_by_id(session.customer_id)

            reply = ChatMessage(
                session_id=session.id,
                role=MessageRole.assistant,
                sender_type=SenderType.human,
                content=content,
                sender_user_id=identity.user_id,
            )
            try:
                reply = await self.uow.chat_messages.create(reply)
                session.needs_human = False
                session.updated_at = utcnow()
                await self.uow.chat_sessions.update(session)
                await self.uow.notifications.mark_handled_by_session_id(session.id)
                await self.uow.commit()
            except SQLAlchemyError:
                logger.exception(f"Failed to save reply for session {session_id}")
                await self.uow.rollback()
                return Return.err(
                    Error("MESSAGE_SAVE_FAILED", "Could not save the message")
                )

            # Leaving the unit of work expires entities; keep plain values
            message_info = MessageInfo.from_entity(reply)
            guest_email = session.guest_email
            guest_name = session.guest_name
            customer_name = customer.name if customer else None
            customer_slug = customer.slug if customer else None

        email_sent = False
        if guest_email and customer_name and self.email_sender:
            try:
                email_sent = await self.email_sender.send_guest_reply(
                    to_email=guest_email,
                    customer_name=customer_name,
                    customer_slug=customer_slug,
                    message=content,
                    guest_name=guest_name,
                )
            except Exception:
                logger.exception(f"Guest reply email failed for session {session_id}")

        return Return.ok(ReplyResponse(message=message_info, email_sent=email_sent))
