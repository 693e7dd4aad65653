# -*- coding: utf-8 -*-
"""
Rich TUI Module
Uses the 'rich' library to render match snapshots and read card choices.
The UI makes no rules decisions: it only reads snapshots and forwards the
cards the player picked.
"""

from collections.abc import Callable, Mapping
from typing import List, Optional, Tuple, TYPE_CHECKING

from rich.align import Align
from rich.box import DOUBLE, ROUNDED
from rich.columns import Columns
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from card_sim.win_checker import WinResult
from ui.input_safety import safe_input

if TYPE_CHECKING:
    from card_sim.card import PlayerCard
    from card_sim.enemy import Enemy
    from card_sim.engine import Game
    from card_sim.player import Player

QUIT_COMMANDS = ("x", "q", "quit", "exit")

TITLE = r"""
  ___  _                 _             ___                  _
 |   \(_)___ __ _ _ __| |_ ___ _ _  | _ \___ ____ __  ___ _ _  ___ ___
 | |) | (_-</ _` (_-<  _/ -_) '_| |   / -_|_-< '_ \/ _ \ ' \(_-</ -_)
 |___/|_/__/\__,_/__/\__\___|_|   |_|_\___/__/ .__/\___/_||_/__/\___|
                                             |_|
"""


def parse_card_numbers(text: str, hand_size: int) -> Tuple[Optional[List[int]], List[str]]:
    """Parse a comma separated list of 1-based card numbers.

    Args:
        text: raw user input
        hand_size: number of cards in hand

    Returns:
        (zero-based indices or None when the user quits, rejected tokens)
    """
    command = text.strip().lower()
    if command in QUIT_COMMANDS:
        return None, []

    indices: List[int] = []
    rejected: List[str] = []
    for token in command.split(","):
        token = token.strip()
        if not token:
            continue
        if token.isdigit() and 1 <= int(token) <= hand_size:
            indices.append(int(token) - 1)
        else:
            rejected.append(token)
    return indices, rejected


class RichTerminalUI:
    """
    Rich TUI Class
    Renders the match and prompts for the cards to play each turn.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        input_fn: Callable[[str, str], str] = safe_input,
    ):
        self.console = console or Console(highlight=False)
        self.input_fn = input_fn

    def clear_screen(self) -> None:
        self.console.clear()

    # --- Menus ---

    def show_title(self) -> None:
        title_text = Text(TITLE, style="bold red")
        self.console.print(Panel(title_text, box=DOUBLE, title="Card Game Simulator"))

    def show_enemy_menu(self, enemies: Mapping[str, Callable[[], "Enemy"]]) -> str:
        """List the catalog enemies and return the chosen slug.

        Raises SystemExit when the player quits or input runs out.
        """
        slugs = list(enemies)
        table = Table(box=ROUNDED, title="Choose your disaster")
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Enemy", style="bold")
        table.add_column("HP", justify="right", style="green")
        table.add_column("Attack", justify="right", style="red")

        for i, slug in enumerate(slugs, 1):
            enemy = enemies[slug]()
            table.add_row(
                str(i), Text(enemy.name), str(enemy.hit_points), Text(self._attack_text(enemy))
            )

        self.console.print(Align.center(table))

        while True:
            # end of input reads as quit
            prompt = f"Select enemy [1-{len(slugs)}]: "
            choice = self.input_fn(prompt, QUIT_COMMANDS[0]).strip()
            if choice.lower() in QUIT_COMMANDS:
                self.console.print("[yellow]Quitting[/yellow]")
                raise SystemExit(0)
            if choice.isdigit() and 1 <= int(choice) <= len(slugs):
                return slugs[int(choice) - 1]
            self.console.print("[red]Invalid selection, please try again[/red]")

    # --- Game State Rendering ---

    @staticmethod
    def _attack_text(enemy: "Enemy") -> str:
        return ", ".join(e.trigger.description for e in enemy.end_turn_effects) or "-"

    def render_hand(self, player: "Player") -> Table:
        table = Table(box=ROUNDED, title="Your Cards", expand=True)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Card", style="bold")
        table.add_column("Element")
        table.add_column("Cost", justify="right")
        table.add_column("Description")

        for i, card in enumerate(player.cards, 1):
            name = Text(card.name)
            if not card.can_play:
                name.append(" (CAN'T PLAY)", style="dim")
            element = Text(card.element.description, style=card.element.color)
            table.add_row(str(i), name, element, str(card.power_cost), Text(card.description))
        return table

    def render_player(self, game: "Game") -> Panel:
        player = game.player
        hp_color = "green" if player.hit_points > 5 else "red"
        text = Text()
        text.append(f"HP: {player.hit_points}\n", style=f"bold {hp_color}")
        text.append(f"Power reserve: {player.power_reserve}\n", style="yellow")
        text.append(
            f"Power next turn: {player.power_for_turn(game.power_per_turn)}\n",
            style="yellow",
        )
        if player.activated:
            text.append("Enchantments:\n", style="bold")
            for ench in player.activated:
                text.append(f"  • {ench.description}\n")
        return Panel(text, title="Player", box=ROUNDED)

    def render_enemy(self, enemy: "Enemy") -> Panel:
        text = Text()
        text.append(f"{enemy.name}\n", style="bold red")
        text.append(f"HP: {enemy.hit_points}\n", style="bold")
        text.append(f"Defense: {enemy.defense_props.description}\n")
        text.append(f"Attack: {self._attack_text(enemy)}\n")
        for eff in enemy.player_play_card_effects:
            text.append(f"  ⚡ {eff.trigger.description}\n", style="magenta")
        for ench in enemy.activated:
            text.append(f"  • {ench.description}\n")
        if enemy.skip_next_turn:
            text.append("Skipping next turn\n", style="italic green")
        return Panel(text, title="Enemy", box=ROUNDED)

    def show_game_state(self, game: "Game") -> None:
        self.console.rule(Text(f"Turn {game.turn_number}"))
        self.console.print(Columns([self.render_player(game), self.render_enemy(game.enemy)]))
        self.console.print(self.render_hand(game.player))

    # --- Input ---

    def ask_cards(self, game: "Game") -> Optional[List["PlayerCard"]]:
        """Prompt for the cards to play; None means quit."""
        hand = game.player.cards
        text = self.input_fn(
            "Enter card #s to play with ',' between (or x to quit): ", QUIT_COMMANDS[0]
        )
        indices, rejected = parse_card_numbers(text, len(hand))
        if indices is None:
            self.console.print("[yellow]Quitting[/yellow]")
            return None
        for token in rejected:
            self.console.print(f"[red]Invalid card: {escape(token)}[/red]")
        return [hand[i] for i in indices]

    # --- Summaries ---

    def show_turn_summary(self, before: "Game", after: "Game", label: str) -> None:
        """Print HP/power deltas between two snapshots."""
        table = Table(box=ROUNDED, title=Text(label), show_header=True)
        table.add_column("")
        table.add_column("Now", justify="right")
        table.add_column("Change", justify="right")

        rows = [
            ("Player HP", before.player.hit_points, after.player.hit_points),
            ("Player power", before.player.power_reserve, after.player.power_reserve),
            (f"{after.enemy.name} HP", before.enemy.hit_points, after.enemy.hit_points),
        ]
        for name, old, new in rows:
            delta = new - old
            style = "green" if delta > 0 else "red" if delta < 0 else "dim"
            table.add_row(Text(name), str(new), Text(f"{delta:+d}", style=style))

        self.console.print(table)
        discarded = len(before.player.cards) - len(after.player.cards)
        if discarded > 0:
            self.console.print(f"[dim]{discarded} card(s) discarded[/dim]")

    def show_game_over(self, game: "Game") -> None:
        outcome = game.outcome
        if outcome.result is WinResult.PLAYER_WINS:
            style = "bold green"
        elif outcome.result is WinResult.ENEMY_WINS:
            style = "bold red"
        else:
            style = "bold yellow"
        self.console.print(
            Panel(Text(f"Game finished. {outcome.message}", style=style), box=DOUBLE)
        )
