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
"""'websecure init' command: quick setup with the default configuration."""

from __future__ import annotations

import click

from websecure.cli.common import FRAMEWORKS, write_output
from websecure.cli.console import console
from websecure.codegen.generator import generate_middleware_code

_FEATURES = (
    "Content Security Policy (XSS protection)",
    "Clickjacking protection",
    "HTTPS enforcement (HSTS)",
    "MIME sniffing prevention",
    "Referrer and permissions policies",
)


@click.command()
@click.option(
    "--framework",
    type=click.Choice(FRAMEWORKS),
    default="starlette",
    show_default=True,
    help="Web framework of the generated application.",
)
@click.option("--output", "-o", default="app.py", show_default=True, help="File to create.")
@click.option("--force", is_flag=True, help="Overwrite the output file if it exists.")
def init_command(framework: str, output: str, force: bool) -> None:
    """Create an application module secured with the default headers."""
    code = generate_middleware_code({}, framework=framework)
    target = write_output(output, code, force=force)

    console.print(f"[success]Created {target}[/success]\n")
    console.print("  [info]Security features:[/info]")
    for feature in _FEATURES:
        console.print(f"    - {feature}")
    console.print("\n  [info]Next steps:[/info]")
    console.print(f"    uvicorn {target.stem}:app")
    console.print("    websecure console    [dim]# customize interactively[/dim]")
    console.print("    websecure templates  [dim]# browse templates[/dim]\n")
