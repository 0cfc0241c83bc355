from abc import ABC, abstractmethod

from src.domain.entities import AuditEvent


class IAuditEventRepository(ABC):
    """
    Append-only log of staff administration.

    Actions: member_added, invite_sent, member_updated, member_removed,
    invite_deleted, team_created, team_updated, team_deleted, session_deleted.
    """

    @abstractmethod
    async def create(self, event: AuditEvent) -> AuditEvent:
        """Append an event; it becomes durable with the unit of work's commit"""
        pass
