"""
Console rendering of link check results.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from rich.console import Console
from rich.text import Text

from markdown_link_checker.url_validator import ProbeOutcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunSummary:
    """Aggregate counts over the outcomes of one run."""
    ok: int
    broken: int

    @property
    def total(self) -> int:
        return self.ok + self.broken

    @classmethod
    def from_outcomes(cls, outcomes: Sequence[ProbeOutcome]) -> 'RunSummary':
        ok = sum(1 for outcome in outcomes if outcome.succeeded)
        return cls(ok=ok, broken=len(outcomes) - ok)


def make_console(
    no_color: bool = False,
    stderr: bool = False,
    force_terminal: Optional[bool] = None,
) -> Console:
    """Create a console that prints text as-is.

    Markup, emoji codes and highlighting are off since URLs routinely contain
    brackets and colons; soft wrapping keeps each link on one line. Styling
    is emitted only when the stream is a terminal unless ``force_terminal``
    says otherwise.
    """
    return Console(
        stderr=stderr,
        no_color=no_color,
        force_terminal=force_terminal,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def status_tag(succeeded: bool) -> Text:
    """Return the OK/BROKEN tag for an outcome, styled for its status."""
    if succeeded:
        return Text("[OK]", style="green")
    return Text("[BROKEN]", style="red")


def format_outcome(outcome: ProbeOutcome) -> Text:
    """Build the report line for a single outcome."""
    if outcome.succeeded:
        detail = Text(f"({outcome.status_code})", style="dim")
    else:
        detail = Text(f"({outcome.status_code} {outcome.status_text})", style="yellow")
    return Text.assemble(status_tag(outcome.succeeded), " ", detail, f" - {outcome.url}")


class Renderer:
    """Writes the per-link report and the summary to standard output."""

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize the renderer.

        Args:
            console: Console to write to; defaults to a plain stdout console
        """
        self.console = console or make_console()

    def render(self, outcomes: Sequence[ProbeOutcome]) -> RunSummary:
        """
        Print one line per outcome followed by the summary block.

        Args:
            outcomes: Resolved outcomes, in extraction order

        Returns:
            Counts of working and broken links
        """
        summary = RunSummary.from_outcomes(outcomes)

        self.console.print()
        self.console.print("--- Link Check Results ---")
        for outcome in outcomes:
            self.console.print(format_outcome(outcome))

        self.render_summary(summary)

        logger.info(
            f"Report complete: {summary.ok} working, {summary.broken} broken",
            extra={"ok": summary.ok, "broken": summary.broken, "total": summary.total},
        )
        return summary

    def render_summary(self, summary: RunSummary) -> None:
        self.console.print()
        self.console.print("--- Summary ---")
        self.console.print(Text(f"Working links: {summary.ok}", style="green"))
        self.console.print(Text(f"Broken links: {summary.broken}", style="red"))
        self.console.print(f"Total unique links checked: {summary.total}")
