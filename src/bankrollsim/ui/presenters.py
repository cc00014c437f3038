from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..analysis.batch import BatchResult
from ..core.catalog import ROULETTE_BETS, SLOT_PROFILE_LABELS
from ..core.models import SlotSettings


def _money(value: float) -> str:
    sign = "+" if value >= 0 else "−"
    return f"{sign}${abs(value):.2f}"


def _money_style(value: float) -> str:
    return "green" if value >= 0 else "red"


class RichBatchPresenter:
    def __init__(self, *, no_color: bool = False, console: Console | None = None):
        if console is not None:
            self.console = console
        elif no_color:
            self.console = Console(force_terminal=False, color_system=None)
        else:
            self.console = Console(force_terminal=True, color_system="auto")

    def _headline(self, result: BatchResult) -> str:
        settings = result.settings
        if isinstance(settings, SlotSettings):
            game = f"Slot · {SLOT_PROFILE_LABELS[settings.profile]}"
        else:
            game = f"Roulette · {ROULETTE_BETS[settings.bet].label}"
        return f"{game} · {settings.spins} spins @ ${settings.bet_size:.2f}"

    def show(self, result: BatchResult) -> None:
        runs_label = "run" if result.total_runs == 1 else "runs"
        header = Table.grid(padding=(0, 1))
        header.add_column(style="bold cyan", justify="right")
        header.add_column(justify="left")
        header.add_row("Game", self._headline(result))
        header.add_row("Runs", f"{result.total_runs:,} {runs_label}")
        header.add_row("Base seed", str(result.base_seed))
        total = result.total_final_net
        header.add_row("Total", f"[{_money_style(total)}]{_money(total)}[/]")
        mean_final = result.mean_points[-1] if result.mean_points else 0.0
        header.add_row("Mean final", f"[{_money_style(mean_final)}]{_money(mean_final)}[/]")
        self.console.print(Panel(header, title="Bankroll Simulator", border_style="bold cyan", expand=False))

        table = Table(show_header=True, header_style="bold blue", box=box.SIMPLE_HEAVY)
        table.add_column("Run", justify="left")
        table.add_column("Seed", justify="right")
        table.add_column("Final", justify="right")
        table.add_column("Wins", justify="right")
        table.add_column("Loss", justify="right")
        table.add_column("Peak", justify="right")
        table.add_column("DD", justify="right")
        table.add_column("σ", justify="right")
        for run in result.display_runs:
            summary = run.summary
            table.add_row(
                run.name,
                str(run.seed),
                f"[{_money_style(summary.final_net)}]{_money(summary.final_net)}[/]",
                f"{run.win_rate:.1f}%",
                f"{run.loss_rate:.1f}%",
                f"${summary.peak:.2f}",
                f"−${abs(summary.trough):.2f}",
                f"{summary.volatility:.2f}",
            )
        if result.display_runs:
            self.console.print(table)

        tail = result.tail
        if tail is not None:
            self.console.print(
                f"[dim]+{tail.count:,} more runs[/] · Total "
                f"[{_money_style(tail.total_final)}]{_money(tail.total_final)}[/] · "
                f"Wins {tail.win_rate:.1f}% · Loss {tail.loss_rate:.1f}%"
            )
