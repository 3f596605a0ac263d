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
"""websecure CLI: security header configuration, analysis and code generation."""

from __future__ import annotations

from typing import Any

import click
from rich.markup import escape

from websecure.cli.console import console, print_banner
from websecure.core.config import Config
from websecure.kernel.exceptions import WebSecureException
from websecure.logging.port import LoggingPort
from websecure.logging.structlog_adapter import StructlogAdapter


def configure_logging(config: Config, verbose: bool = False, adapter: LoggingPort | None = None) -> LoggingPort:
    """Configure *adapter* (structlog by default) from the project settings."""
    adapter = adapter or StructlogAdapter()
    adapter.configure(config)
    if verbose:
        adapter.set_level("websecure", "DEBUG")
    return adapter


class WebSecureCLI(click.Group):
    """Custom Click group that shows the banner on help and reports library errors."""

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        print_banner()
        super().format_help(ctx, formatter)

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except WebSecureException as exc:
            console.print(f"[error]Error:[/error] {escape(str(exc))}")
            raise SystemExit(1) from exc


@click.group(cls=WebSecureCLI)
@click.version_option(package_name="websecure")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """websecure: web security headers toolkit."""
    configure_logging(Config.discover(), verbose=verbose)


# Import and register commands
from websecure.cli.init import init_command  # noqa: E402
from websecure.cli.report import analyze_command, export_command, headers_command  # noqa: E402
from websecure.cli.templates import template_command, templates_command  # noqa: E402
from websecure.cli.wizard import console_command  # noqa: E402

cli.add_command(templates_command, name="templates")
cli.add_command(template_command, name="template")
cli.add_command(init_command, name="init")
cli.add_command(headers_command, name="headers")
cli.add_command(analyze_command, name="analyze")
cli.add_command(export_command, name="export")
cli.add_command(console_command, name="console")
