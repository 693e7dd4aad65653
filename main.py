# -*- coding: utf-8 -*-
"""
Card Game Simulator - terminal edition
Program entry point

Usage:
    python main.py
    python main.py --enemy typhoon
    python main.py --deck my_deck.json --enemy-file my_enemy.json --verbose

Requires:
    - Python 3.11+
    - rich, pydantic
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from pydantic import ValidationError
from rich.markup import escape

from card_sim.catalog import ENEMIES, get_enemy, new_game, starter_hand
from card_sim.config import GameConfig, get_config
from card_sim.engine import Game
from card_sim.exceptions import GameError
from card_sim.player import Player
from card_sim.schema import load_enemy, load_player
from logging_config import setup_logging
from ui.rich_ui import RichTerminalUI

logger = logging.getLogger(__name__)


class CardGameApp:
    """
    Terminal game driver.
    Builds the match from the catalog or from JSON files, then alternates
    player and enemy turns until the match is decided or the player quits.
    """

    def __init__(
        self,
        ui: Optional[RichTerminalUI] = None,
        config: Optional[GameConfig] = None,
        enemy_slug: Optional[str] = None,
        enemy_file: Optional[str] = None,
        deck_file: Optional[str] = None,
    ):
        self.ui = ui or RichTerminalUI()
        self.config = config or get_config()
        self.enemy_slug = enemy_slug
        self.enemy_file = enemy_file
        self.deck_file = deck_file

    def build_game(self) -> Game:
        """Create the starting snapshot."""
        if self.enemy_file:
            enemy = load_enemy(self.enemy_file)
        else:
            slug = self.enemy_slug or self.ui.show_enemy_menu(ENEMIES)
            if not self.deck_file:
                return new_game(slug, config=self.config)
            enemy = get_enemy(slug)

        if self.deck_file:
            player = load_player(self.deck_file, self.config.starting_hit_points)
        else:
            player = Player(
                hit_points=self.config.starting_hit_points, cards=tuple(starter_hand())
            )

        logger.info("New game against %s with %d cards", enemy.name, len(player.cards))
        return Game.start(enemy, player, power_per_turn=self.config.power_per_turn)

    def run(self) -> Game:
        """Run the game loop; returns the last snapshot."""
        self.ui.clear_screen()
        self.ui.show_title()
        game = self.build_game()

        while not game.is_over:
            self.ui.show_game_state(game)
            cards = self.ui.ask_cards(game)
            if cards is None:
                logger.info("Player quit on turn %d", game.turn_number)
                return game

            before = game
            game = game.take_player_turn(cards)
            self.ui.show_turn_summary(before, game, "Your turn")
            if game.is_over:
                break

            before = game
            game = game.take_enemy_turn()
            self.ui.show_turn_summary(before, game, f"{game.enemy.name}'s turn")

        self.ui.show_game_over(game)
        return game


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Card game simulator")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--enemy", choices=sorted(ENEMIES), help="catalog enemy to fight")
    source.add_argument("--enemy-file", help="JSON enemy definition")
    parser.add_argument("--deck", help="JSON deck definition")
    parser.add_argument("--log-level", default=None, help="file log level (default from config)")
    parser.add_argument("--verbose", action="store_true", help="also log to the terminal")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Program entry"""
    args = parse_args(argv)
    config = get_config()
    if args.log_level:
        config = replace(config, log_level=args.log_level)

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"Config error: {error}", file=sys.stderr)
        sys.exit(2)

    ui = RichTerminalUI()
    setup_logging(config, verbose=args.verbose, console=ui.console)

    try:
        app = CardGameApp(
            ui=ui,
            config=config,
            enemy_slug=args.enemy,
            enemy_file=args.enemy_file,
            deck_file=args.deck,
        )
        app.run()
    except (GameError, ValidationError) as e:
        logger.error("Cannot start game: %s", e)
        ui.console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt - exiting")
        ui.console.print("\nGame interrupted, bye!")
        sys.exit(0)
    except Exception as e:
        logger.exception("Unhandled exception")
        ui.console.print(f"\n[red]Unexpected error: {escape(str(e))}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
