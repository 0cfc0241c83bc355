from abc import ABC, abstractmethod
from typing import Optional


class IEmailSender(ABC):
    """Outbound transactional email port"""

    @abstractmethod
    async def send_guest_reply(
        self,
        to_email: str,
        customer_name: str,
        customer_slug: str,
        message: str,
        guest_name: Optional[str] = None,
    ) -> bool:
        """Email a staff reply to a chat guest. Returns True when accepted."""
        pass

    @abstractmethod
    async def send_invitation(
        self, to_email: str, customer_name: str, role: str, token: str
    ) -> bool:
        """Email an invitation link. Returns True when accepted."""
        pass
