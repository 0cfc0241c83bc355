"""
Session Actions Use Case

Single-session mutations: read state, assignment and deletion.
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.access_guard import require_manage
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, SessionEscalation
from src.domain.identity import Identity

from .dtos import SessionActionResponse, SessionSummary
from .session_lookup import get_visible_session

logger = logging.getLogger(__name__)

MARK_AS_READ = "markAsRead"
MARK_AS_UNREAD = "markAsUnread"
ASSIGN = "assign"
DELETE = "delete"


class SessionActionsUseCase:
    """
    Use case for staff actions on one chat session.

    Business Rules:
    - markAsRead / markAsUnread require view access and are idempotent
    - assign requires a working role (member or above) and exactly one target
    - escalation_level is previous + 1 when the session was assigned, else 1
    - Every assignment appends a SessionEscalation row in the same transaction
    - delete requires a working role; soft delete unless hard_delete is enabled
    - Soft-deleted or invisible sessions are reported as not found
    """

    def __init__(self, uow: UnitOfWork, hard_delete: bool = False):
        self.uow = uow
        self.hard_delete = hard_delete

    async def execute(
        self,
        identity: Identity,
        session_id: UUID,
        action: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> Result[SessionActionResponse]:
        """
        Dispatch an action by name.

        Args:
            identity: Resolved caller
            session_id: Target session
            action: markAsRead, markAsUnread, assign or delete
            data: Action arguments (assign: to_user_id/to_team_id, reason, note)
        """
        data = data or {}
        if action == MARK_AS_READ:
            return await self.mark_as_read(identity, session_id)
        if action == MARK_AS_UNREAD:
            return await self.mark_as_unread(identity, session_id)
        if action == ASSIGN:
            return await self.assign(
                identity,
                session_id,
                to_user_id=data.get("to_user_id"),
                to_team_id=data.get("to_team_id"),
                reason=data.get("reason"),
                note=data.get("note"),
            )
        if action == DELETE:
            return await self.delete(identity, session_id)
        return Return.err(Error("UNKNOWN_ACTION", f"Unknown action: {action}"))

    async def mark_as_read(
        self, identity: Identity, session_id: UUID
    ) -> Result[SessionActionResponse]:
        async with self.uow:
            session_result = await get_visible_session(self.uow, identity, session_id)
            if session_result.is_err():
                return session_result
            session = session_result.value

            session.is_read = True
            session.read_at = utcnow()
            session.read_by = identity.user_id
            await self.uow.chat_sessions.update(session)
            await self.uow.commit()

            return Return.ok(
                SessionActionResponse(
                    action=MARK_AS_READ, session=SessionSummary.from_entity(session)
                )
            )

    async def mark_as_unread(
        self, identity: Identity, session_id: UUID
    ) -> Result[SessionActionResponse]:
        async with self.uow:
            session_result = await get_visible_session(self.uow, identity, session_id)
            if session_result.is_err():
                return session_result
            session = session_result.value

            session.is_read = False
            session.read_at = None
            session.read_by = None
            await self.uow.chat_sessions.update(session)
            await self.uow.commit()

            return Return.ok(
                SessionActionResponse(
                    action=MARK_AS_UNREAD, session=SessionSummary.from_entity(session)
                )
            )

    async def assign(
        self,
        identity: Identity,
        session_id: UUID,
        to_user_id: Optional[UUID] = None,
        to_team_id: Optional[UUID] = None,
        reason: Optional[str] = None,
        note: Optional[str] = None,
    ) -> Result[SessionActionResponse]:
        if (to_user_id is None) == (to_team_id is None):
            return Return.err(
                Error(
                    "INVALID_ASSIGNMENT",
                    "Assign to exactly one of a user or a team",
                )
            )

        async with self.uow:
            session_result = await get_visible_session(self.uow, identity, session_id)
            if session_result.is_err():
                return session_result
            session = session_result.value

            error = require_manage(identity, session.customer_id)
            if error:
                return Return.err(error)

            if to_team_id is not None:
                team = await self.uow.teams.get_by_customer_and_id(
                    session.customer_id, to_team_id
                )
                if team is None:
                    return Return.err(Error("TEAM_NOT_FOUND", "Team not found"))
            else:
                user = await self.uow.users.get_by_id(to_user_id)
                if user is None:
                    return Return.err(Error("USER_NOT_FOUND", "User not found"))

            escalation = SessionEscalation(
                session_id=session.id,
                from_user_id=session.assigned_user_id,
                from_team_id=session.assigned_team_id,
                to_user_id=to_user_id,
                to_team_id=to_team_id,
                reason=reason,
                note=note,
                created_by=identity.user_id,
            )

            session.escalation_level = (
                session.escalation_level + 1 if session.is_assigned else 1
            )
            session.assigned_user_id = to_user_id
            session.assigned_team_id = to_team_id
            session.updated_at = utcnow()

            # Assignment and its escalation row commit together or not at all
            try:
                await self.uow.chat_sessions.update(session)
                await self.uow.session_escalations.create(escalation)
                await self.uow.commit()
            except SQLAlchemyError:
                logger.exception(f"Failed to assign session {session_id}")
                await self.uow.rollback()
                return Return.err(
                    Error("ASSIGNMENT_FAILED", "Could not save the assignment")
                )

            logger.info(
                f"Session {session_id} assigned at level {session.escalation_level}"
            )
            return Return.ok(
                SessionActionResponse(
                    action=ASSIGN, session=SessionSummary.from_entity(session)
                )
            )

    async def delete(
        self, identity: Identity, session_id: UUID
    ) -> Result[SessionActionResponse]:
        async with self.uow:
            session_result = await get_visible_session(self.uow, identity, session_id)
            if session_result.is_err():
                return session_result
            session = session_result.value

            error = require_manage(identity, session.customer_id)
            if error:
                return Return.err(error)

            if self.hard_delete:
                await self.uow.chat_sessions.delete(session)
            else:
                session.deleted_at = utcnow()
                session.deleted_by = identity.user_id
                await self.uow.chat_sessions.update(session)

            audit = AuditEvent(
                customer_id=session.customer_id,
                user_id=identity.user_id,
                action="session_deleted",
                event_metadata={
                    "session_id": str(session_id),
                    "hard_delete": self.hard_delete,
                },
            )
            await self.uow.audit_events.create(audit)
            await self.uow.commit()

            return Return.ok(SessionActionResponse(action=DELETE))
