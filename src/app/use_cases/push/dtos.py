"""
Push Use Case DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel


class SubscriptionResponse(BaseModel):
    status: str


class SendPushResponse(BaseModel):
    success: bool = True
    sent: int
    total: int
