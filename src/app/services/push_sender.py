from abc import ABC, abstractmethod
from typing import Any, Dict

from src.domain.entities import PushSubscription


class PushSubscriptionGone(Exception):
    """Push service answered 404/410: the endpoint no longer exists"""

    def __init__(self, endpoint: str, status_code: int):
        self.endpoint = endpoint
        self.status_code = status_code
        super().__init__(f"Push endpoint gone ({status_code})")


class IPushSender(ABC):
    """Web push delivery port"""

    @abstractmethod
    async def send(self, subscription: PushSubscription, payload: Dict[str, Any]) -> None:
        """
        Deliver one notification.

        Raises:
            PushSubscriptionGone: endpoint expired or unsubscribed
            Exception: any other delivery failure
        """
        pass
