from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.audit_event_repository import AuditEventRepository
from src.adapter.repositories.chat_message_repository import ChatMessageRepository
from src.adapter.repositories.chat_session_repository import ChatSessionRepository
from src.adapter.repositories.customer_repository import CustomerRepository
from src.adapter.repositories.dashboard_user_repository import DashboardUserRepository
from src.adapter.repositories.invitation_repository import InvitationRepository
from src.adapter.repositories.membership_repository import MembershipRepository
from src.adapter.repositories.notification_repository import NotificationRepository
from src.adapter.repositories.push_subscription_repository import (
    PushSubscriptionRepository,
)
from src.adapter.repositories.session_escalation_repository import (
    SessionEscalationRepository,
)
from src.adapter.repositories.superadmin_repository import SuperadminRepository
from src.adapter.repositories.team_repository import TeamRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.superadmins = SuperadminRepository(self.session)
        self.customers = CustomerRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.dashboard_users = DashboardUserRepository(self.session)
        self.teams = TeamRepository(self.session)
        self.chat_sessions = ChatSessionRepository(self.session)
        self.chat_messages = ChatMessageRepository(self.session)
        self.session_escalations = SessionEscalationRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.notifications = NotificationRepository(self.session)
        self.push_subscriptions = PushSubscriptionRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
