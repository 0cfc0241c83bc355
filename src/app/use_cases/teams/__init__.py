"""
Team Management Use Cases
"""

from .create_team_use_case import CreateTeamUseCase
from .delete_team_use_case import DeleteTeamUseCase
from .dtos import DeleteTeamResponse, ListTeamsResponse, TeamInfo
from .list_teams_use_case import ListTeamsUseCase
from .update_team_use_case import UpdateTeamUseCase

__all__ = [
    "ListTeamsUseCase",
    "CreateTeamUseCase",
    "UpdateTeamUseCase",
    "DeleteTeamUseCase",
    "TeamInfo",
    "ListTeamsResponse",
    "DeleteTeamResponse",
]
