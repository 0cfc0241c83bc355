from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_guard import can_view
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ChatSession
from src.domain.identity import Identity


async def get_visible_session(
    uow: UnitOfWork, identity: Identity, session_id: UUID
) -> Result[ChatSession]:
    """
    Load a live session the identity may view.

    Missing, soft-deleted and out-of-scope sessions all read as not found.
    Must be called inside an entered unit of work.
    """
    session = await uow.chat_sessions.get_by_id(session_id)
    if (
        session is None
        or session.deleted_at is not None
        or not can_view(identity, session.customer_id)
    ):
        return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))
    return Return.ok(session)
