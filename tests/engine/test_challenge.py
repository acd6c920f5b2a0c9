"""
Bluff - Challenge Resolution Tests
"""

import pytest

from bluff.engine.base import NO_BID, Bid, BidClass, Dice, GameState, PlayerInfo
from bluff.engine.errors import NoBidYet, NotStarted, WrongTurn
from bluff.engine.game import BluffGame


class TestLowBid:
    """More dice than bid: the challenger loses the difference."""

    @pytest.fixture
    def game(self, make_game):
        return make_game(
            [
                (1, "A", [Dice.ONE, Dice.ONE, Dice.ONE]),
                (2, "B", [Dice.WILD, Dice.TWO, Dice.THREE]),
            ],
            turn_idx=1,
            bid=Bid(Dice.ONE, 2, player_id=1),
        )

    def test_result(self, game):
        result = game.challenge_current_bid(2)
        assert result.result == BidClass.LOW_BID
        assert result.lost_dice_count == 2
        assert result.actual_count == 4
        assert result.challenged_bid == Bid(Dice.ONE, 2, player_id=1)
        assert result.bidder == PlayerInfo(1, "A")
        assert result.challenger == PlayerInfo(2, "B")
        assert result.round_winner == PlayerInfo(1, "A")

    def test_state_after(self, game):
        game.challenge_current_bid(2)
        assert game.state == GameState.STARTED
        assert len(game.players[0].hand) == 3
        assert len(game.players[1].hand) == 1
        assert game.turn_idx == 0
        assert game.current_bid.count == 0


class TestHighBid:
    """Fewer dice than bid: the bidder loses the difference."""

    @pytest.fixture
    def game(self, make_game):
        return make_game(
            [
                (1, "A", [Dice.WILD, Dice.FIVE, Dice.ONE]),
                (2, "B", [Dice.FOUR, Dice.TWO, Dice.THREE]),
            ],
            turn_idx=1,
            bid=Bid(Dice.FIVE, 3, player_id=1),
        )

    def test_result(self, game):
        result = game.challenge_current_bid(2)
        assert result.result == BidClass.HIGH_BID
        assert result.lost_dice_count == 1
        assert result.actual_count == 2
        assert result.round_winner == PlayerInfo(2, "B")

    def test_state_after(self, game):
        game.challenge_current_bid(2)
        assert game.state == GameState.STARTED
        assert len(game.players[0].hand) == 2
        assert len(game.players[1].hand) == 3
        assert game.turn_idx == 1
        assert game.current_bid.count == 0


class TestExactBid:
    """Exactly right: everyone except the bidder loses one die."""

    @pytest.fixture
    def game(self, make_game):
        return make_game(
            [
                (101, "A", [Dice.WILD, Dice.FIVE, Dice.ONE, Dice.ONE, Dice.TWO]),
                (102, "B", [Dice.FOUR, Dice.FIVE, Dice.THREE, Dice.WILD, Dice.TWO]),
                (103, "C", [Dice.FIVE, Dice.TWO, Dice.ONE, Dice.TWO, Dice.WILD]),
            ],
            turn_idx=2,
            bid=Bid(Dice.WILD, 3, player_id=102),
        )

    def test_result(self, game):
        result = game.challenge_current_bid(103)
        assert result.result == BidClass.EXACT_BID
        assert result.lost_dice_count == 1
        assert result.actual_count == 3

    def test_state_after(self, game):
        game.challenge_current_bid(103)
        assert game.state == GameState.STARTED
        assert [len(p.hand) for p in game.players] == [4, 5, 4]
        assert game.turn_idx == 1
        assert game.current_bid.count == 0


class TestGameEnds:
    """The last player holding dice wins."""

    @pytest.fixture
    def game(self, make_game):
        return make_game(
            [
                (0, "A", [Dice.FIVE]),
                (1, "B", [Dice.FOUR, Dice.FOUR, Dice.FOUR]),
            ],
            turn_idx=0,
            bid=Bid(Dice.FOUR, 1, player_id=1),
        )

    def test_loss_capped_at_hand_size(self, game):
        result = game.challenge_current_bid(0)
        assert result.result == BidClass.LOW_BID
        assert result.lost_dice_count == 2
        assert len(game.players[0].hand) == 0
        assert len(game.players[1].hand) == 3

    def test_finished(self, game):
        game.challenge_current_bid(0)
        assert game.state == GameState.FINISHED
        assert game.turn_idx == 1
        assert game.winner.info == PlayerInfo(1, "B")

    def test_no_more_play(self, game):
        game.challenge_current_bid(0)
        with pytest.raises(NotStarted):
            game.bid(Bid(Dice.FOUR, 4, player_id=1))
        with pytest.raises(NotStarted):
            game.challenge_current_bid(1)

    def test_eliminated_player_skipped_next_round(self, make_game):
        game = make_game(
            [
                (1, "A", [Dice.FIVE]),
                (2, "B", [Dice.FOUR, Dice.FOUR]),
                (3, "C", [Dice.FOUR]),
            ],
            turn_idx=0,
            bid=Bid(Dice.FOUR, 1, player_id=3),
        )
        game.challenge_current_bid(1)
        assert game.state == GameState.STARTED
        assert len(game.players[0].hand) == 0
        assert game.turn_idx == 2
        game.bid(Bid(Dice.ONE, 1, player_id=3))
        assert game.turn_idx == 1
        game.bid(Bid(Dice.TWO, 1, player_id=2))
        assert game.turn_idx == 2


class TestAfterChallenge:
    """Reveal and reroll behaviour shared by all outcomes."""

    @pytest.fixture
    def game(self, make_game):
        return make_game(
            [
                (1, "A", [Dice.ONE, Dice.TWO]),
                (2, "B", [Dice.THREE, Dice.WILD]),
            ],
            turn_idx=1,
            bid=Bid(Dice.TWO, 3, player_id=1),
        )

    def test_hands_revealed_before_reroll(self, game):
        result = game.challenge_current_bid(2)
        assert result.revealed_hands == (
            (PlayerInfo(1, "A"), (Dice.ONE, Dice.TWO)),
            (PlayerInfo(2, "B"), (Dice.THREE, Dice.WILD)),
        )

    def test_every_hand_rerolled(self, game):
        game.challenge_current_bid(2)
        assert game.players[0].hand.dice == [Dice.FIVE]
        assert game.players[1].hand.dice == [Dice.FIVE, Dice.FIVE]

    def test_bid_reset(self, game):
        game.challenge_current_bid(2)
        assert game.current_bid == NO_BID


class TestChallengeRejected:
    """Rule violations leave the game untouched."""

    def test_not_started(self, alice, bob):
        game = BluffGame()
        game.add_player(alice)
        game.add_player(bob)
        with pytest.raises(NotStarted):
            game.challenge_current_bid(alice.id)

    def test_out_of_turn(self, three_player_game, alice, carl):
        three_player_game.bid(Bid(Dice.FIVE, 2, alice.id))
        hands = [list(p.hand) for p in three_player_game.players]
        with pytest.raises(WrongTurn):
            three_player_game.challenge_current_bid(carl.id)
        assert three_player_game.turn_idx == 1
        assert three_player_game.current_bid == Bid(Dice.FIVE, 2, alice.id)
        assert [list(p.hand) for p in three_player_game.players] == hands

    def test_no_bid_yet(self, started_game, alice):
        with pytest.raises(NoBidYet):
            started_game.challenge_current_bid(alice.id)
        assert started_game.state == GameState.STARTED
        assert started_game.turn_idx == 0
