"""
기여 점수 / 리더보드: 저장하지 않고 조회 시점에 Resource 목록에서 파생

public +10, private +5. 동점은 profile id 오름차순.
"""
from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from acadex.domain.sharing.entities import LeaderboardEntry, Profile, Resource, Visibility

POINTS_BY_VISIBILITY = {
    Visibility.PUBLIC: 10,
    Visibility.PRIVATE: 5,
}


def points_for(visibility: Visibility) -> int:
    return POINTS_BY_VISIBILITY[Visibility(visibility)]


def compute_leaderboard(
    profiles: Iterable[Profile],
    resources: Iterable[Resource],
) -> list[LeaderboardEntry]:
    points_by_owner: dict[int, int] = defaultdict(int)
    for resource in resources:
        points_by_owner[resource.owner_id] += points_for(resource.visibility)

    entries = [
        LeaderboardEntry(
            profile_id=p.id,
            name=p.name,
            college=p.college,
            branch=p.branch,
            points=points_by_owner.get(p.id, 0),
        )
        for p in profiles
    ]
    entries.sort(key=lambda e: (-e.points, e.profile_id))
    return entries
