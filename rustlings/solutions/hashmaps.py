"""Worked solutions to the hash map exercises."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_U8_MAX = 255


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five fruits."""
    basket = {"banana": 2}
    basket["mango"] = 100
    basket["apple"] = 1
    return basket


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add bananas and pineapples so every kind is present and there are more than eleven."""
    basket[Fruit.BANANA] = 5
    basket[Fruit.PINEAPPLE] = 7


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0

    def _record(self, scored: int, conceded: int) -> None:
        self.goals_scored = _add_goals(self.goals_scored, scored)
        self.goals_conceded = _add_goals(self.goals_conceded, conceded)


def _add_goals(total: int, goals: int) -> int:
    result = total + goals
    if result > _U8_MAX:
        raise OverflowError("goal count does not fit in 8 bits")
    return result


def _parse_goals(text: str) -> int:
    if not text.isdigit() or not text.isascii():
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals per team from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])
        scores.setdefault(team_1_name, Team())._record(team_1_score, team_2_score)
        scores.setdefault(team_2_name, Team())._record(team_2_score, team_1_score)
    return scores