"""Lane matchup extraction."""
from typing import Dict, Iterable, Iterator, List

from lol_counters.domain.entities import MatchRecord, MatchupObservation, ParticipantRecord
from lol_counters.domain.enums import Lane


def group_by_lane(match: MatchRecord) -> Dict[Lane, List[ParticipantRecord]]:
    """Participants per known lane, in match order. UNKNOWN lanes are dropped."""
    groups: Dict[Lane, List[ParticipantRecord]] = {lane: [] for lane in Lane.known_lanes()}
    for participant in match.participants:
        lane = participant.lane
        if lane.is_known:
            groups[lane].append(participant)
    return groups


def iter_matchups(matches: Iterable[MatchRecord]) -> Iterator[MatchupObservation]:
    """
    One observation per lane holding exactly two participants.

    Lanes with any other head count (a double-jungle comp, a missing
    position) yield nothing for that match; no best-effort pairing is tried.
    """
    for match in matches:
        for lane, participants in group_by_lane(match).items():
            if len(participants) != 2:
                continue
            first, second = participants
            yield MatchupObservation(
                lane=lane,
                champion_a=first.champion_id,
                champion_b=second.champion_id,
                winner_is_a=first.win,
                match_id=match.match_id,
            )


def extract_matchups(matches: Iterable[MatchRecord]) -> List[MatchupObservation]:
    return list(iter_matchups(matches))
