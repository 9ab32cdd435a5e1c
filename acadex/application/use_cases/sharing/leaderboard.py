"""
리더보드 Use Case: Profile/Resource 전체에서 조회 시점 파생 (저장 없음)
"""
from __future__ import annotations

from acadex.application.ports.unit_of_work import UnitOfWork
from acadex.domain.sharing.entities import LeaderboardEntry
from acadex.domain.sharing.scoring import compute_leaderboard


def get_leaderboard(uow: UnitOfWork) -> list[LeaderboardEntry]:
    with uow:
        profiles = uow.profiles.list_all()
        resources = uow.resources.list_all()
    return compute_leaderboard(profiles, resources)
