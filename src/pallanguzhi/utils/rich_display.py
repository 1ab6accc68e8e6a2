"""
Rich-based terminal display for games.

Provides clean, formatted output with:
- Board table with both sides and scores
- Colored status / explanation lines
- Match summary table
"""

import logging
from typing import Dict, Optional
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core import GameState, PITS_PER_SIDE, Side, get_game_result

console = Console()
logger = logging.getLogger(__name__)


class GameDisplay:
    """
    Rich-based display for a game session.

    Shows:
    - The board, AI row on top (pits 13-7), player row below (pits 0-6)
    - Scores and whose turn it is
    - AI explanations and hints
    """

    def __init__(self, console: Console = console):
        self.console = console

    def log(self, message: str, style: str = ""):
        """Log a message using rich console."""
        self.console.print(message, style=style)

    def log_info(self, message: str):
        """Log info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        """Log success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def log_warning(self, message: str):
        """Log warning message."""
        self.console.print(f"[yellow]⚠[/yellow]  {message}")

    def log_error(self, message: str):
        """Log error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str, difficulty: str):
        """Show game header."""
        self.console.rule(f"[bold blue]{title}[/bold blue]")
        self.console.print(f"Difficulty: {difficulty}")
        self.console.print("Keys: [bold]1-7[/bold] play pit, [bold]h[/bold] hint, "
                           "[bold]e[/bold] toggle explanations, [bold]n[/bold] new game, "
                           "[bold]q[/bold] quit")
        self.console.print()

    def board_table(self, state: GameState, highlight: Optional[int] = None) -> Table:
        """Create board table."""
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Side", style="cyan")
        for _ in range(PITS_PER_SIDE):
            table.add_column(justify="right")
        table.add_column("Score", style="bold")

        def cell(pit: int) -> str:
            stones = state.board[pit]
            if pit == highlight:
                return f"[reverse]{stones}[/reverse]"
            if pit in (Side.PLAYER.middle_pit, Side.AI.middle_pit):
                return f"[magenta]{stones}[/magenta]"
            return str(stones)

        ai_pits = list(reversed(Side.AI.pits))
        table.add_row("", *[f"[dim]{p % PITS_PER_SIDE + 1}[/dim]" for p in ai_pits], "")
        table.add_row("AI", *[cell(p) for p in ai_pits], str(state.score_ai))
        table.add_row("Player", *[cell(p) for p in Side.PLAYER.pits], str(state.score_player))
        table.add_row("", *[f"[dim]{p + 1}[/dim]" for p in Side.PLAYER.pits], "")

        return table

    def show_board(self, state: GameState, highlight: Optional[int] = None):
        """Show the board with a status line."""
        if state.finished:
            subtitle = f"[bold]{get_game_result(state)}[/bold]"
        else:
            subtitle = f"{state.turn.label}'s turn"
        self.console.print(
            Panel(self.board_table(state, highlight), title="Pallanguzhi", subtitle=subtitle)
        )

    def show_explanation(self, text: str):
        """Show an AI explanation."""
        self.console.print(f"[italic cyan]🤖 {text}[/italic cyan]")

    def show_hint(self, text: str):
        """Show a hint for the player."""
        self.console.print(f"[italic yellow]💡 {text}[/italic yellow]")

    def show_match_results(self, results: Dict[str, float], games: int):
        """Show AI vs AI match summary."""
        table = Table(title=f"Match results ({games} games)")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Player wins", f"{results['player_wins']:,}")
        table.add_row("AI wins", f"{results['ai_wins']:,}")
        table.add_row("Ties", f"{results['ties']:,}")
        table.add_row("Unfinished", f"{results.get('unfinished', 0):,}")
        table.add_row("Avg player score", f"{results['avg_player_score']:.1f}")
        table.add_row("Avg AI score", f"{results['avg_ai_score']:.1f}")
        table.add_row("Avg moves", f"{results['avg_moves']:.1f}")

        self.console.print(table)


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Add rich handler
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
