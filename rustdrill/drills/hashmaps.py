"""Dictionary drills: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_U8_MAX = 255


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and five pieces in all."""
    basket = {"banana": 2}
    basket["apple"] = 2
    basket["mango"] = 1
    return basket


class Fruit(enum.Enum):
    """Kinds of fruit for the cake basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> dict[Fruit, int]:
    """Add one of every kind of fruit not yet in the basket.

    Fruit already present is left untouched. The basket is changed in
    place and also returned.
    """
    for fruit in Fruit:
        basket.setdefault(fruit, 1)
    return basket


@dataclass
class Team:
    """A team with the goals it scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not text.isascii() or not text.lstrip("+").isdigit() or text.count("+") > 1:
        raise ValueError(f"invalid goal count: {text!r}")
    goals = int(text)
    if goals > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return goals


def _credit(team: Team, scored: int, conceded: int) -> None:
    team.goals_scored += scored
    team.goals_conceded += conceded
    if team.goals_scored > _U8_MAX or team.goals_conceded > _U8_MAX:
        raise OverflowError(f"goal total of {team.name} out of range")


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines 'team1,team2,goals1,goals2'."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])
        team_1 = scores.setdefault(team_1_name, Team(team_1_name))
        _credit(team_1, team_1_score, team_2_score)
        team_2 = scores.setdefault(team_2_name, Team(team_2_name))
        _credit(team_2, team_2_score, team_1_score)
    return scores