from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from . import config
from .cards import SUIT_SYMBOLS
from .engine import FensterGame
from .errors import FensterError
from .state import CORRECT_CONTINUE, FINISHED, WRONG, GameEvent
from .topology import CELL_IDS

HELP = """Commands:
  start <cell>          choose a face-up card to compare against
  guess <cell> <token>  higher/lower, inside/outside, red/black or a suit
  hint                  list the cells you may guess right now
  next                  pass to the next player (after 2 correct guesses)
  quit"""


def describe(event: GameEvent) -> str:
    if event.kind == WRONG:
        return f"Wrong! {event.card} - drink {event.drink_count} sips!"
    if event.kind == CORRECT_CONTINUE:
        return f"Correct! {event.card}. Continue or pass."
    if event.kind == FINISHED:
        return f"{event.card} - the game is finished. Everyone go home now!"
    if event.card is not None:
        return f"Starting with {event.card}"
    return "Choose a card."


def render(game: FensterGame) -> str:
    snap = game.snapshot()
    lines = [
        game.board.pretty(anchor_id=snap.anchor_id, show_ids=True),
        "",
        f"Current player: {snap.current_player}   streak: {snap.correct_streak}   deck: {snap.deck_size}",
    ]
    return "\n".join(lines)


def hints(game: FensterGame) -> List[str]:
    out = []
    for cid in CELL_IDS:
        tokens = game.available_guesses(cid)
        if tokens:
            out.append(f"  {cid:>2}: {' / '.join(tokens)}")
    return out


def run_command(game: FensterGame, text: str) -> Optional[str]:
    """Applies one command line to the game and returns the text to show (None to quit)."""
    parts = text.split()
    if not parts:
        return ""
    cmd, args = parts[0].lower(), parts[1:]
    if cmd in ("quit", "exit", "q"):
        return None
    if cmd in ("help", "?"):
        return HELP
    if cmd == "hint":
        found = hints(game)
        return "\n".join(found) if found else "Nothing to guess yet - choose a start card."
    if cmd == "next":
        return f"{game.next_player()}'s turn. Choose a card."
    if cmd == "start" and len(args) == 1:
        return describe(game.select_start_card(int(args[0])))
    if cmd == "guess" and len(args) == 2:
        token = args[1].lower()
        # Accept suit symbols too.
        token = {sym: suit for suit, sym in SUIT_SYMBOLS.items()}.get(token, token)
        return describe(game.evaluate_guess(int(args[0]), token))
    return f"Could not parse {text!r}. Type 'help'."


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Play Fenster in the terminal')
    parser.add_argument('players', nargs='+', help='Player names, in turn order')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal')
    parser.add_argument('--delay', type=float, default=config.PENALTY_DELAY, help='Penalty delay in seconds')
    parser.add_argument('--strict-start', action='store_true', default=config.STRICT_START,
                        help='Only allow face-up start cards')
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format='%(levelname)s %(name)s: %(message)s')

    try:
        game = FensterGame(args.players, seed=args.seed, penalty_delay=args.delay, strict_start=args.strict_start)
    except FensterError as e:
        parser.error(str(e))
        return

    with game:
        print(HELP)
        while not game.finished:
            print()
            print(render(game))
            try:
                text = input('> ').strip()
            except EOFError:
                break
            try:
                out = run_command(game, text)
            except (FensterError, ValueError) as e:
                print(f"error: {e}")
                continue
            if out is None:
                break
            if out:
                print(out)
            if game.locked:
                game.wait_for_penalty()
                print("Cards reshuffled. Choose a card.")
        else:
            print(render(game))
