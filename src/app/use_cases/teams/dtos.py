"""
Team Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Team


class TeamInfo(BaseModel):
    id: str
    customer_id: str
    name: str
    description: Optional[str] = None
    is_default: bool
    member_count: int = 0
    created_at: Optional[str] = None

    @classmethod
    def from_entity(cls, team: Team, member_count: int = 0) -> "TeamInfo":
        return cls(
            id=str(team.id),
            customer_id=str(team.customer_id),
            name=team.name,
            description=team.description,
            is_default=team.is_default,
            member_count=member_count,
            created_at=team.created_at.isoformat() if team.created_at else None,
        )


class ListTeamsResponse(BaseModel):
    teams: List[TeamInfo]


class DeleteTeamResponse(BaseModel):
    status: str
