from abc import ABC, abstractmethod

from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.app.repositories.chat_message_repository import IChatMessageRepository
from src.app.repositories.chat_session_repository import IChatSessionRepository
from src.app.repositories.customer_repository import ICustomerRepository
from src.app.repositories.dashboard_user_repository import IDashboardUserRepository
from src.app.repositories.invitation_repository import IInvitationRepository
from src.app.repositories.membership_repository import IMembershipRepository
from src.app.repositories.notification_repository import INotificationRepository
from src.app.repositories.push_subscription_repository import (
    IPushSubscriptionRepository,
)
from src.app.repositories.session_escalation_repository import (
    ISessionEscalationRepository,
)
from src.app.repositories.superadmin_repository import ISuperadminRepository
from src.app.repositories.team_repository import ITeamRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    superadmins: ISuperadminRepository
    customers: ICustomerRepository
    memberships: IMembershipRepository
    dashboard_users: IDashboardUserRepository
    teams: ITeamRepository
    chat_sessions: IChatSessionRepository
    chat_messages: IChatMessageRepository
    session_escalations: ISessionEscalationRepository
    invitations: IInvitationRepository
    notifications: INotificationRepository
    push_subscriptions: IPushSubscriptionRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
