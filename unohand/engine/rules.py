"""UNO rules for one hand: dealing, legal plays and state transitions."""

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple, Union

from unohand.engine.card import ACTION_TYPES, Card, CardType, Color
from unohand.engine.deck import (
    Pile,
    create_initial_deck,
    deal_cards,
    shuffle_deck,
)
from unohand.engine.errors import (
    CardNotFound,
    GameEnded,
    IllegalColorAssignment,
    IllegalPlay,
    InvalidCardsPerPlayer,
    InvalidPlayerCount,
    NotEnoughCards,
    PlayerIndexOutOfBounds,
)
from unohand.engine.hand import Hand
from unohand.engine.randomness import Shuffler, standard_shuffler

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2
MAX_PLAYERS = 10
DEFAULT_CARDS_PER_PLAYER = 7
UNO_PENALTY = 4


@dataclass(frozen=True)
class PlayCard:
    """Action: play the card at ``card_index``. For wilds, color is required."""

    card_index: int
    color: Optional[Color] = None


@dataclass(frozen=True)
class DrawCard:
    """Action: draw a card."""

    pass


Action = Union[PlayCard, DrawCard]


def _step(index: int, steps: int, count: int) -> int:
    return (index + steps) % count


def _check_player_index(hand: Hand, index: int) -> None:
    if not 0 <= index < hand.player_count:
        raise PlayerIndexOutOfBounds(
            f"Player index {index} out of bounds for {hand.player_count} players"
        )


def _give(
    hands: Tuple[Tuple[Card, ...], ...], index: int, cards: Sequence[Card]
) -> Tuple[Tuple[Card, ...], ...]:
    return hands[:index] + (hands[index] + tuple(cards),) + hands[index + 1:]


def _draw_cards(
    draw_pile: Pile, discard_pile: Pile, count: int, shuffler: Shuffler
) -> Tuple[Pile, Pile, Pile]:
    """Take ``count`` cards off the draw pile, recycling the discard pile when it runs out.

    Returns (drawn, draw_pile, discard_pile). Fewer cards are returned only
    when both piles are exhausted.
    """
    drawn: List[Card] = []
    while len(drawn) < count:
        if not draw_pile:
            if len(discard_pile) <= 1:
                logger.debug("No cards left to draw (%d of %d drawn)", len(drawn), count)
                break
            top, rest = discard_pile[0], discard_pile[1:]
            draw_pile = shuffle_deck(tuple(card.reset() for card in rest), shuffler)
            discard_pile = (top,)
            logger.debug("Recycled %d discarded cards into the draw pile", len(draw_pile))
        cards, draw_pile = deal_cards(draw_pile, count - len(drawn))
        drawn.extend(cards)
    return tuple(drawn), draw_pile, discard_pile


def _reveal_top_card(pile: Pile, shuffler: Shuffler) -> Tuple[Card, Pile]:
    """Turn up the first discard, reshuffling until it is not a wild card.

    Wild cards turned up are set aside and go under the draw pile at the end.
    """
    set_aside: List[Card] = []
    while True:
        if not any(not card.is_wild for card in pile):
            raise NotEnoughCards("Not enough cards to reveal a starting card")
        card, rest = pile[0], pile[1:]
        if not card.is_wild:
            return card, rest + tuple(set_aside)
        logger.debug("Turned up %s, reshuffling the draw pile", card)
        set_aside.append(card)
        pile = shuffle_deck(rest, shuffler)


def create_hand(
    players: Sequence[str],
    dealer: int,
    shuffler: Shuffler = standard_shuffler,
    cards_per_player: int = DEFAULT_CARDS_PER_PLAYER,
) -> Hand:
    """Shuffle, deal ``cards_per_player`` cards to each seat and turn up the first discard.

    The starting card takes effect before anyone acts: a reverse makes the
    dealer's right-hand neighbour start, a skip passes over the dealer's
    left-hand neighbour and a draw makes that neighbour draw two and lose
    the turn.
    """
    players = tuple(players)
    count = len(players)
    if not MIN_PLAYERS <= count <= MAX_PLAYERS:
        raise InvalidPlayerCount(
            f"A hand needs {MIN_PLAYERS} to {MAX_PLAYERS} players, got {count}"
        )
    if not 0 <= dealer < count:
        raise PlayerIndexOutOfBounds(f"Dealer {dealer} out of bounds for {count} players")
    if cards_per_player < 1:
        raise InvalidCardsPerPlayer(f"Each player needs at least one card, got {cards_per_player}")

    pile = shuffle_deck(create_initial_deck(), shuffler)
    hands = []
    for _ in players:
        cards, pile = deal_cards(pile, cards_per_player)
        hands.append(cards)
    top, pile = _reveal_top_card(pile, shuffler)

    hand = Hand(
        players=players,
        dealer=dealer,
        player_in_turn=_step(dealer, 1, count),
        hands=tuple(hands),
        draw_pile=pile,
        discard_pile=(top,),
        direction=1,
        current_color=top.color,
        uno_calls=(False,) * count,
        shuffler=shuffler,
        history=(f"{players[dealer]} dealt, {top} turned up",),
    )

    if top.type is CardType.REVERSE:
        hand = replace(hand, direction=-1, player_in_turn=_step(dealer, -1, count))
    elif top.type is CardType.SKIP:
        hand = replace(hand, player_in_turn=_step(dealer, 2, count))
    elif top.type is CardType.DRAW:
        victim = _step(dealer, 1, count)
        drawn, draw_pile, discard_pile = _draw_cards(
            hand.draw_pile, hand.discard_pile, 2, shuffler
        )
        hand = replace(
            hand,
            hands=_give(hand.hands, victim, drawn),
            draw_pile=draw_pile,
            discard_pile=discard_pile,
            player_in_turn=_step(dealer, 2, count),
            history=hand.history + (f"{players[victim]} drew {len(drawn)} cards",),
        )

    logger.debug(
        "Dealt %d cards to %d players, %s on top, %s starts",
        cards_per_player,
        count,
        top,
        players[hand.player_in_turn],
    )
    return hand


def has_ended(hand: Hand) -> bool:
    return hand.player_in_turn is None or any(len(cards) == 0 for cards in hand.hands)


def winner(hand: Hand) -> Optional[int]:
    """Index of the seat that emptied its hand, or None while the hand is running."""
    if not has_ended(hand):
        return None
    for index, cards in enumerate(hand.hands):
        if not cards:
            return index
    return None


def card_score(card: Card) -> int:
    if card.is_wild:
        return 50
    if card.type is not CardType.NUMBERED:
        return 20
    return card.number


def score(hand: Hand) -> Optional[int]:
    """Points for the winner: the value of every card left in the other hands."""
    won_by = winner(hand)
    if won_by is None:
        return None
    return sum(
        card_score(card)
        for index, cards in enumerate(hand.hands)
        if index != won_by
        for card in cards
    )


def top_of_discard(hand: Hand) -> Card:
    return hand.top_discard()


def _card_matches(card: Card, held: Sequence[Card], hand: Hand) -> bool:
    """Check if a card can be played on the current discard pile."""
    top = hand.top_discard()
    if card.type is CardType.WILD:
        return True
    if card.type is CardType.WILD_DRAW:
        # Only legal when nothing else in hand matches the color
        return not any(c.color == hand.current_color for c in held)
    if card.type in ACTION_TYPES and card.type is top.type:
        return True
    if card.color == hand.current_color:
        return True
    return (
        card.type is CardType.NUMBERED
        and top.type is CardType.NUMBERED
        and card.number == top.number
    )


def can_play(hand: Hand, card_index: int) -> bool:
    """Whether the player in turn may play the card at ``card_index``."""
    if has_ended(hand):
        return False
    held = hand.hands[hand.player_in_turn]
    if not 0 <= card_index < len(held):
        return False
    return _card_matches(held[card_index], held, hand)


def can_play_any(hand: Hand) -> bool:
    if has_ended(hand):
        return False
    return any(can_play(hand, index) for index in range(len(hand.hands[hand.player_in_turn])))


def get_legal_actions(hand: Hand) -> List[Action]:
    """Return all legal actions for the player in turn."""
    if has_ended(hand):
        return []

    actions: List[Action] = []
    for index, card in enumerate(hand.hands[hand.player_in_turn]):
        if not can_play(hand, index):
            continue
        if card.is_wild:
            actions.extend(PlayCard(card_index=index, color=color) for color in Color)
        else:
            actions.append(PlayCard(card_index=index))

    # Drawing is always allowed
    actions.append(DrawCard())
    return actions


def play(hand: Hand, card_index: int, color: Optional[Color] = None) -> Hand:
    """Play a card for the player in turn and return the new hand."""
    if has_ended(hand):
        raise GameEnded("Hand has ended")

    player = hand.player_in_turn
    held = hand.hands[player]
    if not 0 <= card_index < len(held):
        raise CardNotFound(f"No card at index {card_index}, hand has {len(held)} cards")
    card = held[card_index]
    if card.is_wild and color is None:
        raise IllegalColorAssignment(f"{card} requires a chosen color")
    if not card.is_wild and color is not None:
        raise IllegalColorAssignment(f"Cannot choose a color for {card}")
    if not can_play(hand, card_index):
        raise IllegalPlay(
            f"Cannot play {card} on {hand.top_discard()} (color {hand.current_color.value})"
        )

    count = hand.player_count
    name = hand.players[player]
    played = card.with_color(color) if card.is_wild else card
    hands = (
        hand.hands[:player]
        + (held[:card_index] + held[card_index + 1:],)
        + hand.hands[player + 1:]
    )
    draw_pile = hand.draw_pile
    discard_pile = (played,) + hand.discard_pile
    direction = hand.direction
    history = list(hand.history)
    history.append(
        f"{name} played {card}" + (f" (chose {color.value})" if color else "")
    )

    next_player = _step(player, direction, count)
    if card.type is CardType.REVERSE:
        if count == 2:
            # Two players: reverse gives the same player another turn
            next_player = player
        else:
            direction = -direction
            next_player = _step(player, direction, count)
    elif card.type is CardType.SKIP:
        next_player = _step(player, 2 * direction, count)
    elif card.type is CardType.DRAW or card.type is CardType.WILD_DRAW:
        penalty = 2 if card.type is CardType.DRAW else 4
        victim = next_player
        drawn, draw_pile, discard_pile = _draw_cards(
            draw_pile, discard_pile, penalty, hand.shuffler
        )
        hands = _give(hands, victim, drawn)
        history.append(f"{hand.players[victim]} drew {len(drawn)} cards")
        logger.debug("%s forced to draw %d", hand.players[victim], len(drawn))
        next_player = _step(player, 2 * direction, count)
    elif card.type is CardType.NUMBERED or card.type is CardType.WILD:
        pass
    else:
        raise AssertionError(f"Unhandled card type {card.type}")

    if not hands[player]:
        history.append(f"{name} went out")
        logger.debug("%s won the hand", name)
        return replace(
            hand,
            hands=hands,
            draw_pile=draw_pile,
            discard_pile=discard_pile,
            direction=direction,
            current_color=played.color,
            player_in_turn=None,
            previous_player=player,
            is_accusation_window_open=False,
            uno_calls=tuple(
                called and index == player for index, called in enumerate(hand.uno_calls)
            ),
            history=tuple(history),
        )

    return replace(
        hand,
        hands=hands,
        draw_pile=draw_pile,
        discard_pile=discard_pile,
        direction=direction,
        current_color=played.color,
        player_in_turn=next_player,
        previous_player=player,
        is_accusation_window_open=True,
        uno_calls=tuple(
            called and index in (player, next_player)
            for index, called in enumerate(hand.uno_calls)
        ),
        history=tuple(history),
    )


def draw(hand: Hand) -> Hand:
    """The player in turn draws one card.

    The turn stays with that player when the drawn card can be played right
    away, and passes on otherwise.
    """
    if has_ended(hand):
        raise GameEnded("Hand has ended")

    player = hand.player_in_turn
    drawn, draw_pile, discard_pile = _draw_cards(
        hand.draw_pile, hand.discard_pile, 1, hand.shuffler
    )
    hands = _give(hand.hands, player, drawn)
    after = replace(
        hand,
        hands=hands,
        draw_pile=draw_pile,
        discard_pile=discard_pile,
        is_accusation_window_open=False,
        uno_calls=hand.uno_calls[:player] + (False,) + hand.uno_calls[player + 1:],
        history=hand.history + (f"{hand.players[player]} drew a card",),
    )
    if drawn and can_play(after, len(hands[player]) - 1):
        return after
    return replace(after, player_in_turn=_step(player, hand.direction, hand.player_count))


def say_uno(hand: Hand, player_index: int) -> Hand:
    """Record an UNO call. Calls made while holding more than two cards are ignored."""
    if has_ended(hand):
        raise GameEnded("Hand has ended")
    _check_player_index(hand, player_index)

    if len(hand.hands[player_index]) > 2:
        return hand

    logger.debug("%s says UNO", hand.players[player_index])
    return replace(
        hand,
        uno_calls=hand.uno_calls[:player_index] + (True,) + hand.uno_calls[player_index + 1:],
        history=hand.history + (f"{hand.players[player_index]} said UNO",),
    )


def check_uno_failure(hand: Hand, accuser: int, accused: int) -> bool:
    """Whether accusing ``accused`` of a missed UNO call would succeed right now."""
    _check_player_index(hand, accused)

    # Only the player who just played can be caught, and only before the next action
    if not hand.is_accusation_window_open or accused != hand.previous_player:
        return False
    return len(hand.hands[accused]) == 1 and not hand.uno_calls[accused]


def catch_uno_failure(hand: Hand, accuser: int, accused: int) -> Hand:
    """Make ``accused`` draw four if they were caught without calling UNO.

    A false accusation returns ``hand`` unchanged.
    """
    if not check_uno_failure(hand, accuser, accused):
        return hand

    drawn, draw_pile, discard_pile = _draw_cards(
        hand.draw_pile, hand.discard_pile, UNO_PENALTY, hand.shuffler
    )
    logger.debug(
        "Player %d caught %s without UNO", accuser, hand.players[accused]
    )
    return replace(
        hand,
        hands=_give(hand.hands, accused, drawn),
        draw_pile=draw_pile,
        discard_pile=discard_pile,
        is_accusation_window_open=False,
        history=hand.history
        + (f"{hand.players[accused]} was caught without UNO and drew {len(drawn)} cards",),
    )
