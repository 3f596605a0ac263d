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
"""'websecure console': terminal wizard for building a configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import click
import questionary
from questionary import Choice, Separator, Style
from rich.panel import Panel
from rich.syntax import Syntax

from websecure.analysis.analyzer import analyze_config
from websecure.cli.common import FRAMEWORKS, customize_overrides, write_output
from websecure.cli.console import console, print_report
from websecure.codegen.generator import generate_middleware_code
from websecure.config.defaults import DEFAULT_CONFIG
from websecure.config.merge import merge_config
from websecure.config.presets import get_preset, get_template, list_templates, preset_names

WEBSECURE_STYLE = Style([
    ("qmark", "fg:#4fc3f7 bold"),
    ("question", "bold"),
    ("answer", "fg:#66bb6a bold"),
    ("pointer", "fg:#4fc3f7 bold"),
    ("highlighted", "fg:#4fc3f7 bold"),
    ("selected", "fg:#66bb6a bold"),
    ("separator", "fg:#757575"),
    ("instruction", "fg:#757575"),
    ("text", ""),
    ("disabled", "fg:#858585 italic"),
])

_TOTAL_STEPS = 4


@dataclass
class WizardResult:
    title: str
    description: str | None
    framework: str
    overrides: dict[str, Any] = field(default_factory=dict)


def _step(step: int, title: str) -> None:
    console.print(f"\n  [websecure]Step {step} of {_TOTAL_STEPS}[/websecure]: [info]{title}[/info]\n")


def _starting_point_choices() -> list[Choice | Separator]:
    choices: list[Choice | Separator] = [Choice(title="defaults      Library defaults", value="")]
    choices.append(Separator("-- presets --"))
    for key in preset_names():
        preset = get_preset(key)
        choices.append(Choice(title=f"{key:13s} {preset.description}", value=f"preset:{key}"))
    choices.append(Separator("-- templates --"))
    for template in list_templates():
        choices.append(Choice(title=f"{template.key:13s} {template.name}", value=f"template:{template.key}"))
    return choices


def _prompt_interactive() -> WizardResult:
    """Ask for a starting point, CSP, HSTS and framework choices."""
    try:
        console.print(Panel("[websecure]  websecure Configuration Wizard  [/websecure]", border_style="blue"))

        _step(1, "Starting Point")
        selection = questionary.select(
            "Start from:",
            choices=_starting_point_choices(),
            style=WEBSECURE_STYLE,
            instruction="(use arrow keys)",
        ).unsafe_ask()

        if selection:
            kind, key = selection.split(":", 1)
            chosen = get_preset(key) if kind == "preset" else get_template(key)
            title = f"{chosen.name} security configuration"
            description: str | None = chosen.description
            base: dict[str, Any] = chosen.config
        else:
            title, description, base = "Secured application", None, {}

        _step(2, "Content Security Policy")
        report_only = questionary.confirm(
            "Start CSP in report-only mode (recommended while testing)?",
            default=False,
            style=WEBSECURE_STYLE,
        ).unsafe_ask()
        api_domain = questionary.text(
            "Extra connect-src origin (e.g. https://api.example.com), blank to skip:",
            style=WEBSECURE_STYLE,
        ).unsafe_ask()

        _step(3, "Strict Transport Security")
        include_sub_domains = questionary.confirm(
            "Include subdomains in HSTS?",
            default=True,
            style=WEBSECURE_STYLE,
        ).unsafe_ask()

        _step(4, "Framework")
        framework = questionary.select(
            "Generate code for:",
            choices=list(FRAMEWORKS),
            style=WEBSECURE_STYLE,
        ).unsafe_ask()

        overrides = customize_overrides(
            base,
            report_only=report_only,
            connect_src=[api_domain] if api_domain else [],
            include_sub_domains=include_sub_domains,
        )
        return WizardResult(title=title, description=description, framework=framework, overrides=overrides)

    except (KeyboardInterrupt, EOFError):
        console.print("\n[warning]Cancelled.[/warning]")
        raise SystemExit(0) from None


def _save(code: str, output: str) -> None:
    path = Path(output)
    try:
        if not questionary.confirm(f"Save this code to {path}?", default=True, style=WEBSECURE_STYLE).unsafe_ask():
            console.print(f"[dim]Copy the code above into {path} when ready.[/dim]")
            return
        force = False
        if path.exists():
            force = questionary.confirm(
                f"{path} already exists. Overwrite it?",
                default=False,
                style=WEBSECURE_STYLE,
            ).unsafe_ask()
            if not force:
                console.print(f"[success]Keeping the existing {path}.[/success]")
                return
    except (KeyboardInterrupt, EOFError):
        console.print("\n[warning]Cancelled.[/warning]")
        raise SystemExit(0) from None

    write_output(path, code, force=force)
    console.print(f"[success]Saved to {path}[/success]")


@click.command()
@click.option("--output", "-o", default="app.py", show_default=True, help="File to offer saving the code to.")
def console_command(output: str) -> None:
    """Build a configuration interactively in the terminal."""
    result = _prompt_interactive()
    code = generate_middleware_code(
        result.overrides,
        framework=result.framework,
        title=result.title,
        description=result.description,
    )

    console.print(Panel(Syntax(code, "python"), title="[websecure]Generated Code[/websecure]", border_style="cyan"))
    print_report(analyze_config(merge_config(DEFAULT_CONFIG, result.overrides)))
    _save(code, output)

    if result.overrides.get("contentSecurityPolicy", {}).get("reportOnly"):
        console.print("  [warning]Note:[/warning] CSP is in report-only mode. Check the browser console for violations.")
