"""Record snapshot data models - one immutable, group-scoped view of the store."""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Player:
    """A player referenced by results."""

    player_id: str
    name: str


@dataclass(frozen=True)
class Leader:
    """A leader a player can pick for a match."""

    leader_id: str
    name: str


@dataclass(frozen=True)
class Game:
    """A game (base game or standalone edition) a match was played with."""

    game_id: str
    name: str


@dataclass(frozen=True)
class Expansion:
    """An expansion a match may be played with."""

    expansion_id: str
    name: str


@dataclass(frozen=True)
class Match:
    """A single completed play session."""

    match_id: str
    date: date
    game_id: Optional[str] = None
    with_expansion: bool = False
    expansion_id: Optional[str] = None
    with_family_atomic: bool = False
    played_rounds: Optional[int] = None


@dataclass(frozen=True)
class Result:
    """One player's outcome within a match."""

    result_id: str
    match_id: str
    player_id: str
    leader_id: Optional[str] = None
    score: int = 0
    spice: int = 0
    solari: int = 0
    water: int = 0


@dataclass(frozen=True)
class RecordSnapshot:
    """Complete record set for one group - input to every engine operation.

    Records are held in tuples so a snapshot can be shared between
    computations without any of them being able to change it.
    """

    group_id: str
    matches: Tuple[Match, ...] = ()
    results: Tuple[Result, ...] = ()
    players: Tuple[Player, ...] = ()
    leaders: Tuple[Leader, ...] = ()
    games: Tuple[Game, ...] = ()
    expansions: Tuple[Expansion, ...] = ()
    _match_index: Dict[str, Match] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        # Lookup tables are derived once; frozen instances need object.__setattr__.
        object.__setattr__(
            self, "_match_index", {m.match_id: m for m in self.matches}
        )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def get_match(self, match_id: str) -> Optional[Match]:
        """Get a match by ID."""
        return self._match_index.get(match_id)

    def match_date(self, match_id: str) -> Optional[date]:
        """Date of the given match, or None if the match is unknown."""
        match = self._match_index.get(match_id)
        return match.date if match else None

    def player_name(self, player_id: str) -> str:
        """Display name for a player, falling back to the ID."""
        for player in self.players:
            if player.player_id == player_id:
                return player.name
        return player_id

    def leader_name(self, leader_id: Optional[str]) -> Optional[str]:
        """Display name for a leader, falling back to the ID."""
        if leader_id is None:
            return None
        for leader in self.leaders:
            if leader.leader_id == leader_id:
                return leader.name
        return leader_id

    def game_name(self, game_id: Optional[str]) -> Optional[str]:
        """Display name for a game, falling back to the ID."""
        if game_id is None:
            return None
        for game in self.games:
            if game.game_id == game_id:
                return game.name
        return game_id

    def expansion_name(self, expansion_id: Optional[str]) -> Optional[str]:
        """Display name for an expansion, falling back to the ID."""
        if expansion_id is None:
            return None
        for expansion in self.expansions:
            if expansion.expansion_id == expansion_id:
                return expansion.name
        return expansion_id

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------
    def results_by_match(self) -> Dict[str, List[Result]]:
        """Group results by match ID, preserving snapshot order."""
        grouped: Dict[str, List[Result]] = {}
        for result in self.results:
            grouped.setdefault(result.match_id, []).append(result)
        return grouped

    def results_for_player(self, player_id: str) -> List[Result]:
        """All results recorded by one player, in snapshot order."""
        return [r for r in self.results if r.player_id == player_id]

    def player_ids(self) -> List[str]:
        """Player IDs in order of first appearance in the results."""
        return list(dict.fromkeys(r.player_id for r in self.results))

    def match_dates(self) -> List[date]:
        """Distinct dates of matches that have results, ascending."""
        return sorted({
            self._match_index[r.match_id].date
            for r in self.results
            if r.match_id in self._match_index
        })

    def until(self, cutoff: date) -> "RecordSnapshot":
        """Cumulative sub-snapshot with every match dated on or before *cutoff*."""
        matches = tuple(m for m in self.matches if m.date <= cutoff)
        kept = {m.match_id for m in matches}
        return RecordSnapshot(
            group_id=self.group_id,
            matches=matches,
            results=tuple(r for r in self.results if r.match_id in kept),
            players=self.players,
            leaders=self.leaders,
            games=self.games,
            expansions=self.expansions,
        )
