"""
Bluff - Game State Machine

The aggregate root of a session: seated players, whose turn it is and the
standing bid. Only the four operations below mutate a game; each either
completes or raises a ``GameError`` without touching any state.

A game is not safe for concurrent use. Its owner must serialize all calls.
"""

import logging
import random

from bluff.engine.base import (
    NO_BID,
    Bid,
    BidClass,
    ChallengeResult,
    GameConfig,
    GameState,
    Hand,
    Player,
    PlayerInfo,
    RandomSource,
)
from bluff.engine.codec import is_greater
from bluff.engine.errors import (
    AlreadyStarted,
    BidTooLow,
    DuplicatePlayer,
    EngineInvariantError,
    InvalidCount,
    NoBidYet,
    NoEligiblePlayer,
    NotEnoughPlayers,
    NotStarted,
    WrongState,
    WrongTurn,
)
from bluff.engine.rotation import find_next_with_dice, has_next_with_dice

logger = logging.getLogger(__name__)


class BluffGame:
    """
    State machine for one game of Bluff.

    Attributes:
        config: Rules configuration
        state: Current lifecycle state
        players: Players in seating order (join order)
        turn_idx: Index of the player allowed to bid or challenge
        current_bid: Standing bid; the zero bid when none has been made
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.config = config or GameConfig()
        # The process-wide random source unless a dedicated one is injected
        self._rng: RandomSource = rng if rng is not None else random
        self.state = GameState.NOT_STARTED
        self.players: list[Player] = []
        self.turn_idx = 0
        self.current_bid = NO_BID

    # -- Observation -----------------------------------------------------

    @property
    def current_player(self) -> Player:
        """The player whose turn it is."""
        return self.players[self.turn_idx]

    @property
    def total_dice(self) -> int:
        """Number of dice left in play."""
        return sum(len(p.hand) for p in self.players)

    @property
    def winner(self) -> Player | None:
        """The last player holding dice, once the game is finished."""
        if self.state != GameState.FINISHED:
            return None
        return self.players[self.turn_idx]

    def index_of(self, player_id: int) -> int | None:
        """Seat index of ``player_id``, or None if not seated."""
        for i, player in enumerate(self.players):
            if player.id == player_id:
                return i
        return None

    # -- Admission and start ---------------------------------------------

    def add_player(self, info: PlayerInfo) -> None:
        """
        Seat a new player. Seating order becomes turn order.

        Raises:
            WrongState: If the game has already started
            DuplicatePlayer: If a player with the same id is seated
        """
        if self.state != GameState.NOT_STARTED:
            raise WrongState("Can't add players when the game has already started")
        if self.index_of(info.id) is not None:
            raise DuplicatePlayer("Player already added")

        self.players.append(Player(info=info))
        logger.info("Player %s (%d) joined, %d seated", info.name, info.id, len(self.players))

    def start_game(self) -> None:
        """
        Deal every player a fresh hand and give the first turn to seat 0.

        Raises:
            AlreadyStarted: If the game is not waiting to start
            NotEnoughPlayers: If too few players are seated
        """
        if self.state != GameState.NOT_STARTED:
            raise AlreadyStarted("Game already started")
        if len(self.players) < self.config.min_players:
            raise NotEnoughPlayers(
                f"At least {self.config.min_players} players are needed to play"
            )

        self.state = GameState.STARTED
        for player in self.players:
            player.hand = Hand.deal(self.config.dice_per_player, self._rng)
        self.turn_idx = 0
        self.current_bid = NO_BID
        logger.info(
            "Game started with %d players, %d dice each",
            len(self.players), self.config.dice_per_player,
        )

    # -- Play ------------------------------------------------------------

    def _check_turn(self, player_id: int | None) -> None:
        if self.state != GameState.STARTED:
            raise NotStarted("Game not started")
        if player_id != self.current_player.id:
            raise WrongTurn(f"It's {self.current_player.name}'s turn")

    def bid(self, candidate: Bid) -> None:
        """
        Make ``candidate`` the standing bid and pass the turn on.

        Raises:
            NotStarted: If the game is not in progress
            WrongTurn: If the bidder is not the current player
            InvalidCount: If the bid claims less than one die
            BidTooLow: If the bid does not outrank the standing bid
            EngineInvariantError: If nobody else holds dice, which cannot
                happen while the game is in progress
        """
        self._check_turn(candidate.player_id)
        if candidate.count < 1:
            raise InvalidCount("You must bid at least 1 dice")
        if not is_greater(candidate, self.current_bid):
            raise BidTooLow("You must make a higher bid than the current one")

        try:
            next_idx = find_next_with_dice(self.players, self.turn_idx)
        except NoEligiblePlayer as exc:
            logger.critical(
                "No player left to take the turn after %s while the game is in progress",
                self.current_player.name,
            )
            raise EngineInvariantError("Turn can't advance: no other player holds dice") from exc

        self.current_bid = candidate
        self.turn_idx = next_idx
        logger.debug(
            "Bid %d x %s by %d, turn passes to %s",
            candidate.count, candidate.dice.name, candidate.player_id, self.current_player.name,
        )

    def challenge_current_bid(self, player_id: int) -> ChallengeResult:
        """
        Reveal all hands and settle the standing bid.

        The losing side loses dice, every hand is rerolled and a new round
        begins with the side that was right. The game finishes when only one
        player holds dice.

        Args:
            player_id: Id of the challenging player

        Returns:
            ChallengeResult describing the outcome

        Raises:
            NotStarted: If the game is not in progress
            WrongTurn: If the challenger is not the current player
            NoBidYet: If no bid has been made this round
        """
        self._check_turn(player_id)
        if not self.current_bid.is_placed:
            raise NoBidYet("No bid has been made yet")

        bid = self.current_bid
        bidder_idx = self.index_of(bid.player_id)
        if bidder_idx is None:
            logger.critical("Standing bid belongs to unknown player %s", bid.player_id)
            raise EngineInvariantError(f"Bidder {bid.player_id} is not seated")

        bidder = self.players[bidder_idx]
        challenger = self.current_player
        revealed = tuple((p.info, tuple(p.hand)) for p in self.players)
        actual = sum(p.hand.count(bid.dice) for p in self.players)

        if actual < bid.count:
            # bidder overclaimed, challenger starts next round
            result = BidClass.HIGH_BID
            lost = bid.count - actual
            bidder.hand.lose(lost)
        elif actual > bid.count:
            # challenger was wrong, bidder starts next round
            result = BidClass.LOW_BID
            lost = actual - bid.count
            challenger.hand.lose(lost)
            self.turn_idx = bidder_idx
        else:
            result = BidClass.EXACT_BID
            lost = 1
            for i, player in enumerate(self.players):
                if i != bidder_idx:
                    player.hand.lose(1)
            self.turn_idx = bidder_idx

        for player in self.players:
            player.hand.reroll(self._rng)
        self.current_bid = NO_BID

        if not has_next_with_dice(self.players, self.turn_idx):
            self.state = GameState.FINISHED

        logger.info(
            "%s challenged %s's bid %d x %s: %d found, %s, %d dice lost",
            challenger.name, bidder.name, bid.count, bid.dice.name,
            actual, result.name, lost,
        )
        if self.state == GameState.FINISHED:
            logger.info("Game finished, %s wins", self.current_player.name)

        return ChallengeResult(
            result=result,
            lost_dice_count=lost,
            challenged_bid=bid,
            bidder=bidder.info,
            challenger=challenger.info,
            actual_count=actual,
            revealed_hands=revealed,
        )
