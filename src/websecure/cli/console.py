# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Shared Rich console for CLI output."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

from websecure.analysis.analyzer import IssueLevel, SecurityReport
from websecure.config.presets import SecurityTemplate

WEBSECURE_THEME = Theme({
    "info": "cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "websecure": "bold blue",
    "dim": "dim",
})

console = Console(theme=WEBSECURE_THEME)

_LEVEL_STYLES = {
    IssueLevel.ERROR: "error",
    IssueLevel.WARNING: "warning",
    IssueLevel.INFO: "info",
}

_GRADE_STYLES = {"A": "success", "B": "success", "C": "warning", "D": "warning", "F": "error"}


def print_banner() -> None:
    """Print the websecure banner."""
    from websecure import __version__

    console.print("[websecure]websecure[/websecure] [dim]:: web security headers toolkit ::[/dim]")
    console.print(f"  [dim](v{__version__}) | Apache 2.0 License[/dim]\n")


def print_templates_table(templates: Iterable[SecurityTemplate]) -> None:
    """Print a Rich table of the built-in templates."""
    table = Table(title="[websecure]Security Templates[/websecure]", border_style="dim", show_lines=True)
    table.add_column("Key", style="bold", min_width=10)
    table.add_column("Name", min_width=20)
    table.add_column("Description", min_width=30)
    table.add_column("Use Case", style="dim", min_width=20)

    for template in templates:
        table.add_row(template.key, template.name, template.description, template.use_case)

    console.print(table)
    console.print()


def print_headers_table(headers: Mapping[str, str], title: str) -> None:
    """Print response headers as a two-column table."""
    table = Table(title=f"[websecure]{title}[/websecure]", border_style="dim")
    table.add_column("Header", style="bold", no_wrap=True)
    table.add_column("Value", overflow="fold")

    for name, value in headers.items():
        table.add_row(name, value)

    console.print(table)


def print_report(report: SecurityReport) -> None:
    """Print an analyzer report: score panel followed by the findings."""
    grade_style = _GRADE_STYLES[report.grade]
    console.print(Panel(
        f"[{grade_style}]{report.score}/100 (grade {report.grade})[/{grade_style}]\n{report.summary}",
        title="[websecure]Security Score[/websecure]",
        border_style="cyan",
    ))
    if not report.issues:
        console.print("  [success]No issues found.[/success]\n")
        return

    table = Table(border_style="dim", show_lines=True)
    table.add_column("Level", no_wrap=True)
    table.add_column("Issue", style="bold")
    table.add_column("Fix", min_width=30)
    table.add_column("Penalty", justify="right", style="dim")

    for issue in report.issues:
        style = _LEVEL_STYLES[issue.level]
        table.add_row(f"[{style}]{issue.level}[/{style}]", issue.title, issue.fix, f"-{issue.penalty}")

    console.print(table)
    console.print()
