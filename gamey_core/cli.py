from __future__ import annotations

import argparse
import logging
import os
from typing import Optional

from .bots import default_registry
from .coords import Coordinates
from .errors import GameYError
from .game import Action, GameAction, GameY, Movement, Placement, other_player
from .render import RenderOptions, render
from .yen import load_from_file, save_to_file


def debug_enabled() -> bool:
    return os.getenv('GAMEY_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug_enabled() else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def parse_movement(text: str, game: GameY, player: int) -> Movement:
    """Reads 'resign', 'swap', a cell index, or 'x,y,z'."""
    word = text.strip().lower()
    if word == 'resign':
        return Action(player, GameAction.RESIGN)
    if word == 'swap':
        return Action(player, GameAction.SWAP)
    parts = [t for t in word.replace(' ', ',').split(',') if t != '']
    if len(parts) == 1:
        return Placement(player, game.coords_of(int(parts[0])))
    if len(parts) == 3:
        x, y, z = (int(p) for p in parts)
        return Placement(player, Coordinates(x, y, z))
    raise ValueError(f'Could not parse move: {text!r}')


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description='Play the connection game Y against a bot')
    parser.add_argument('--size', type=int, default=7, help='Board size (cells per side)')
    parser.add_argument('--load', default=None, help='Start from a YEN JSON file')
    parser.add_argument('--save', default=None, help='Write the final position to a YEN JSON file')
    parser.add_argument('--bot', default='random_bot', help='Bot to play against')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the bot')
    parser.add_argument('--human-player', type=int, choices=[0, 1], default=0, help='Which side you play')
    parser.add_argument('--show-coords', action='store_true', help='Show (x,y,z) of every cell')
    parser.add_argument('--show-idx', action='store_true', help='Show the index of every cell')
    parser.add_argument('--colors', action='store_true', help='Color pieces with ANSI escapes')
    args = parser.parse_args(argv)

    configure_logging()
    game = load_from_file(args.load) if args.load else GameY(args.size)
    bot = default_registry(args.seed).find(args.bot)
    if bot is None:
        parser.error(f'unknown bot {args.bot!r}')
    options = RenderOptions(show_3d_coords=args.show_coords, show_idx=args.show_idx, show_colors=args.colors)
    human = args.human_player
    ai = other_player(human)

    print(render(game, options))
    print(f"You are player {human}. Enter a cell index, x,y,z, 'swap' or 'resign'.")
    while not game.check_game_over():
        if game.next_player() == ai:
            coords = bot.choose_move(game)
            if coords is None:
                print('Bot has no move; board is full.')
                break
            game.add_move(Placement(ai, coords))
            print(f"{bot.name} plays {coords}")
        else:
            try:
                text = input('Your move: ')
            except EOFError:
                print()
                break
            try:
                game.add_move(parse_movement(text, game, human))
            except (ValueError, GameYError) as e:
                print(f'Illegal move: {e}')
                continue
        print(render(game, options))

    winner = game.winner()
    if winner is not None:
        print(f"Player {winner} wins!")
    if args.save:
        save_to_file(game, args.save)
        print(f"Saved position to {args.save}")
