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
"""Commands that inspect an effective configuration: headers, analyze, export."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import click

from websecure.analysis.analyzer import analyze_config
from websecure.cli.common import resolve_cli_config, write_output
from websecure.cli.console import console, print_headers_table, print_report
from websecure.config.io import EXPORT_FORMATS, dump_config
from websecure.config.properties import WebSecureProperties
from websecure.core.config import Config
from websecure.headers.synthesizer import synthesize_headers
from websecure.utils.cookies import apply_cookie_defaults


def config_source_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the shared ``--config`` and ``--template`` options."""
    func = click.option(
        "--template",
        "-t",
        default=None,
        help="Template or preset layered over the defaults.",
    )(func)
    func = click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="Partial configuration file (JSON, YAML or TOML).",
    )(func)
    return func


@click.command()
@config_source_options
@click.option("--https/--http", "secure", default=True, help="Transport to synthesize headers for.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "text", "json"]),
    default="table",
    show_default=True,
)
def headers_command(config_path: str | None, template: str | None, secure: bool, output_format: str) -> None:
    """Show the response headers the configuration produces."""
    config = resolve_cli_config(config_path, template)
    headers = synthesize_headers(config, is_secure_transport=secure)

    if output_format == "json":
        click.echo(json.dumps(headers, indent=2))
        return
    if output_format == "text":
        for name, value in headers.items():
            click.echo(f"{name}: {value}")
        return

    transport = "HTTPS" if secure else "HTTP"
    print_headers_table(headers, f"Security Headers ({transport})")
    cookies = config.secure_cookies
    if cookies is not None and cookies.enabled:
        props = Config.discover().bind(WebSecureProperties)
        defaults = apply_cookie_defaults(is_production=props.is_production)
        console.print(
            f"  [dim]Cookie defaults ({props.environment}):[/dim] "
            + ", ".join(f"{key}={value}" for key, value in defaults.items())
        )
    console.print()


@click.command()
@config_source_options
@click.option(
    "--min-score",
    type=click.IntRange(0, 100),
    default=None,
    help="Exit with status 1 when the score is below this value.",
)
def analyze_command(config_path: str | None, template: str | None, min_score: int | None) -> None:
    """Score the configuration and list recommended improvements."""
    report = analyze_config(resolve_cli_config(config_path, template))
    print_report(report)
    if min_score is not None and report.score < min_score:
        console.print(f"[error]Score {report.score} is below the required {min_score}.[/error]")
        raise SystemExit(1)


@click.command()
@config_source_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice(EXPORT_FORMATS),
    default="json",
    show_default=True,
)
@click.option("--output", "-o", default=None, help="Write to this file instead of stdout.")
@click.option("--force", is_flag=True, help="Overwrite the output file if it exists.")
def export_command(
    config_path: str | None,
    template: str | None,
    output_format: str,
    output: str | None,
    force: bool,
) -> None:
    """Export the full effective configuration."""
    content = dump_config(resolve_cli_config(config_path, template), output_format)
    if output is None:
        click.echo(content, nl=False)
        return
    target = write_output(output, content, force=force)
    console.print(f"[success]Exported configuration to {target}[/success]")
