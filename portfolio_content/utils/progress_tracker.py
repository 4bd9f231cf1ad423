"""
Colored logging setup and build summaries.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

import colorlog
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..models.emit_result import EmitResult


@dataclass
class BuildTracker:
    """Collects emitter results and prints build and content summaries."""

    console: Console = field(default_factory=Console)
    results: List[EmitResult] = field(default_factory=list)

    def setup_colored_logging(self, level: int = logging.INFO) -> None:
        """Setup colorlog for colored console output."""
        formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)-8s%(reset)s %(blue)s%(name)s%(reset)s: %(message)s",
            datefmt=None,
            reset=True,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
            secondary_log_colors={},
            style="%",
        )

        logger = logging.getLogger()

        # Remove existing handlers to avoid duplicates
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        handler = colorlog.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(level)

    def add_results(self, results: List[EmitResult]) -> None:
        self.results.extend(results)

    @property
    def failed(self) -> List[EmitResult]:
        return [r for r in self.results if not r.success]

    def print_summary(self) -> None:
        """Print a table of emitter results and an overall status panel."""
        if not self.results:
            self.console.print("[yellow]No build steps were run.[/yellow]")
            return

        table = Table(title="Build Summary", show_header=True, header_style="bold magenta")
        table.add_column("Step", style="cyan", no_wrap=True)
        table.add_column("Status", no_wrap=True)
        table.add_column("Files", justify="right", style="green")
        table.add_column("Details", style="dim", no_wrap=False, max_width=50)

        for result in self.results:
            if not result.success:
                status = "[red]failed[/red]"
                details = result.error_message or "Unknown error"
            elif result.skipped:
                status = "[yellow]skipped[/yellow]"
                details = result.output_path or "-"
            else:
                status = "[green]ok[/green]"
                details = result.output_path or "-"
            table.add_row(result.emitter, status, str(result.files_written), details)

        self.console.print(table)
        self.console.print()

        failed = self.failed
        if failed:
            color = "red"
            text = f"Completed with {len(failed)} failed step(s)"
        else:
            color = "green"
            text = "All build steps completed successfully"

        self.console.print(
            Panel(f"[{color}]{text}[/{color}]", title="Final Status", border_style=color)
        )

    def print_content_counts(self, counts: Dict[str, Dict[str, int]]) -> None:
        """
        Print loaded content counts per locale.

        Args:
            counts: Mapping of locale -> {content kind -> count}
        """
        table = Table(title="Content", show_header=True, header_style="bold magenta")
        table.add_column("Locale", style="cyan", no_wrap=True)
        kinds = sorted({kind for per_locale in counts.values() for kind in per_locale})
        for kind in kinds:
            table.add_column(kind, justify="right", style="green")

        for locale, per_locale in counts.items():
            table.add_row(locale, *[str(per_locale.get(kind, 0)) for kind in kinds])

        self.console.print(table)
