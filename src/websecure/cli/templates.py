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
"""'websecure templates' and 'websecure template NAME' commands."""

from __future__ import annotations

import click
from rich.panel import Panel

from websecure.cli.common import FRAMEWORKS, customize_overrides, write_output
from websecure.cli.console import console, print_templates_table
from websecure.codegen.generator import generate_middleware_code
from websecure.config.presets import list_templates, preset_names, resolve_template


@click.command()
def templates_command() -> None:
    """List the built-in industry templates."""
    print_templates_table(list_templates())
    console.print(f"  [dim]Presets: {', '.join(preset_names())}[/dim]")
    console.print("  [info]Usage:[/info] websecure template <name> [--output app.py]\n")


@click.command()
@click.argument("name")
@click.option(
    "--framework",
    type=click.Choice(FRAMEWORKS),
    default="starlette",
    show_default=True,
    help="Web framework of the generated application.",
)
@click.option("--output", "-o", default=None, help="Write the code to this file instead of stdout.")
@click.option("--report-only", is_flag=True, help="Put the Content Security Policy in report-only mode.")
@click.option(
    "--connect-src",
    multiple=True,
    help="Extra connect-src source, e.g. https://api.example.com (repeatable).",
)
@click.option("--force", is_flag=True, help="Overwrite the output file if it exists.")
def template_command(
    name: str,
    framework: str,
    output: str | None,
    report_only: bool,
    connect_src: tuple[str, ...],
    force: bool,
) -> None:
    """Generate an application module from template or preset NAME."""
    template = resolve_template(name)
    overrides = customize_overrides(template.config, report_only=report_only, connect_src=connect_src)
    code = generate_middleware_code(
        overrides,
        framework=framework,
        title=f"{template.name} security configuration",
        description=template.description,
    )

    if output is None:
        click.echo(code, nl=False)
        return

    target = write_output(output, code, force=force)
    summary = (
        f"  [info]Template:[/info]    {template.name}\n"
        f"  [info]Description:[/info] {template.description}\n"
        f"  [info]Use case:[/info]    {template.use_case}\n"
        f"  [info]Framework:[/info]   {framework}"
    )
    console.print(Panel(summary, title=f"[success]Created {target}[/success]", border_style="green"))
    if report_only:
        console.print("  [warning]CSP is in report-only mode.[/warning] Review violations, then enforce it.\n")
