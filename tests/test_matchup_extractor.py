"""Tests for lane grouping and matchup extraction."""
import dataclasses

from lol_counters.application.services import extract_matchups, group_by_lane
from lol_counters.domain.enums import Lane


def test_standard_match_gives_one_matchup_per_lane(make_match):
    observations = extract_matchups([make_match(blue_wins=False)])

    assert [o.lane for o in observations] == Lane.known_lanes()
    assert [(o.champion_a, o.champion_b) for o in observations] == [
        (1, 6), (2, 7), (3, 8), (4, 9), (5, 10),
    ]
    assert all(o.winner_is_a is False for o in observations)
    assert {o.match_id for o in observations} == {"JP1_1"}


def test_role_is_used_when_position_is_missing(make_match):
    match = make_match()
    participants = list(match.participants)
    # blue support with an empty position but legacy role
    participants[4] = dataclasses.replace(participants[4], position="", role="DUO_SUPPORT")
    match = dataclasses.replace(match, participants=tuple(participants))

    utility = [o for o in extract_matchups([match]) if o.lane is Lane.UTILITY]

    assert len(utility) == 1
    assert (utility[0].champion_a, utility[0].champion_b) == (5, 10)


def test_lane_with_three_players_yields_nothing(make_match):
    match = make_match()
    participants = list(match.participants)
    # blue top player listed as a second jungler
    participants[0] = dataclasses.replace(participants[0], position="JUNGLE")
    match = dataclasses.replace(match, participants=tuple(participants))

    lanes = [o.lane for o in extract_matchups([match])]

    assert Lane.JUNGLE not in lanes
    assert Lane.TOP not in lanes
    assert lanes == [Lane.MIDDLE, Lane.BOTTOM, Lane.UTILITY]


def test_unknown_lane_is_excluded(make_match):
    match = make_match()
    participants = list(match.participants)
    participants[2] = dataclasses.replace(participants[2], position="Invalid", role="")
    match = dataclasses.replace(match, participants=tuple(participants))

    groups = group_by_lane(match)

    assert Lane.UNKNOWN not in groups
    assert [p.champion_id for p in groups[Lane.MIDDLE]] == [8]
    assert Lane.MIDDLE not in [o.lane for o in extract_matchups([match])]


def test_several_matches_are_concatenated_in_order(make_match):
    observations = extract_matchups([make_match("A"), make_match("B")])
    assert [o.match_id for o in observations] == ["A"] * 5 + ["B"] * 5


def test_lane_classification_from_role():
    assert Lane.classify("", "SOLO") is Lane.TOP
    assert Lane.classify("", "NONE") is Lane.JUNGLE
    assert Lane.classify("", "DUO_CARRY") is Lane.BOTTOM
    assert Lane.classify("MIDDLE", "DUO_SUPPORT") is Lane.MIDDLE
    assert Lane.classify("Invalid", "") is Lane.UNKNOWN
