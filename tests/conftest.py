"""Shared fixtures: fake clock, match/participant factories."""
import pytest

from lol_counters.domain.entities import MatchRecord, ParticipantRecord

STANDARD_LANES = ["TOP", "JUNGLE", "MIDDLE", "BOTTOM", "UTILITY"]


@pytest.fixture
def anyio_backend():
    return "asyncio"


class FakeClock:
    """Monotonic clock that only moves when told to or when slept on."""

    def __init__(self, start: float = 0.0):
        self.now = start
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


def participant(champion_id, team_id, win, position="", role="", puuid=""):
    return ParticipantRecord(
        champion_id=champion_id,
        team_id=team_id,
        win=win,
        position=position,
        role=role,
        puuid=puuid,
    )


def standard_match(
    match_id="JP1_1",
    blue=(1, 2, 3, 4, 5),
    red=(6, 7, 8, 9, 10),
    blue_wins=True,
    duration=1800,
    queue_id=420,
    game_mode="CLASSIC",
):
    """Five lanes per side, blue champions listed first."""
    participants = [
        participant(cid, 100, blue_wins, lane, puuid=f"{match_id}-b{i}")
        for i, (cid, lane) in enumerate(zip(blue, STANDARD_LANES))
    ] + [
        participant(cid, 200, not blue_wins, lane, puuid=f"{match_id}-r{i}")
        for i, (cid, lane) in enumerate(zip(red, STANDARD_LANES))
    ]
    return MatchRecord(
        match_id=match_id,
        duration_seconds=duration,
        queue_id=queue_id,
        game_mode=game_mode,
        participants=tuple(participants),
    )


@pytest.fixture
def make_match():
    return standard_match


@pytest.fixture
def make_participant():
    return participant
