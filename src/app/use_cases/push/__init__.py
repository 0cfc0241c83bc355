"""
Push Notification Use Cases
"""

from .dtos import SendPushResponse, SubscriptionResponse
from .send_push_use_case import SendPushUseCase
from .subscribe_push_use_case import SubscribePushUseCase
from .unsubscribe_push_use_case import UnsubscribePushUseCase

__all__ = [
    "SubscribePushUseCase",
    "UnsubscribePushUseCase",
    "SendPushUseCase",
    "SubscriptionResponse",
    "SendPushResponse",
]
