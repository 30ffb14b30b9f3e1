"""
GitHub Templates CLI - Install issue and pull request templates into a repository

Usage:
    github-templates install
    github-templates install --all --claude
    github-templates install --type bug,feature
    github-templates remove --type bug
    github-templates update
    github-templates list

Or install globally:
    uv tool install github-templates
"""

import sys
from typing import Optional

import typer
from rich.align import Align
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from typer.core import TyperGroup

from .models import InstallOptions, RemoveOptions, UpdateOptions
from .registry import CLAUDE_TEMPLATES, ISSUE_TEMPLATES, OTHER_TEMPLATES
from .sync import install_templates, remove_templates, update_templates
from .ui import console

__version__ = "1.0.0"

# ASCII Art Banner
BANNER = """
╔═╗╦ ╦  ╔╦╗╔═╗╔╦╗╔═╗╦  ╔═╗╔╦╗╔═╗╔═╗
║ ╦╠═╣   ║ ║╣ ║║║╠═╝║  ╠═╣ ║ ║╣ ╚═╗
╚═╝╩ ╩   ╩ ╚═╝╩ ╩╩  ╩═╝╩ ╩ ╩ ╚═╝╚═╝
"""

TAGLINE = "Issue and pull request templates for your GitHub repository"

LIST_GROUPS = [
    ("Issue templates", ISSUE_TEMPLATES),
    ("Other templates", OTHER_TEMPLATES),
    ("Claude Code integration", CLAUDE_TEMPLATES),
]

USAGE_EXAMPLES = [
    ("github-templates install --all", "Install every template"),
    ("github-templates install --type bug,feature", "Install selected types only"),
    ("github-templates install --claude", "Include the Claude Code guide"),
    ("github-templates remove --type bug", "Remove selected types"),
    ("github-templates update", "Refresh installed templates"),
]


class BannerGroup(TyperGroup):
    """Custom group that shows banner before help."""

    def format_help(self, ctx, formatter):
        show_banner()
        super().format_help(ctx, formatter)


app = typer.Typer(
    name="github-templates",
    help="Manage GitHub issue and pull request templates in the current repository",
    add_completion=False,
    invoke_without_command=True,
    cls=BannerGroup,
)


def show_banner():
    """Display the ASCII art banner."""
    banner_lines = BANNER.strip().split('\n')
    colors = ["bright_blue", "blue", "cyan"]

    styled_banner = Text()
    for i, line in enumerate(banner_lines):
        color = colors[i % len(colors)]
        styled_banner.append(line + "\n", style=color)

    console.print(Align.center(styled_banner))
    console.print(Align.center(Text(TAGLINE, style="italic bright_yellow")))
    console.print()


def _version_callback(value: bool):
    if value:
        console.print(f"github-templates {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-V", help="Show the version and exit", callback=_version_callback, is_eager=True
    ),
):
    """Show banner when no subcommand is provided."""
    if ctx.invoked_subcommand is None and "--help" not in sys.argv and "-h" not in sys.argv:
        show_banner()
        console.print(Align.center("[dim]Run 'github-templates --help' for usage information[/dim]"))
        console.print()


def parse_types(value: Optional[str]) -> Optional[list[str]]:
    """Split a comma-separated --type value, dropping blanks."""
    if value is None:
        return None
    return [part.strip() for part in value.split(",") if part.strip()]


def run_operation(operation, options):
    """Run a sync operation and turn any failure into exit status 1."""
    try:
        operation(options)
    except (typer.Exit, typer.Abort):
        raise
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def install(
    all_templates: bool = typer.Option(False, "--all", "-a", help="Install every template"),
    types: Optional[str] = typer.Option(None, "--type", "-t", help="Only these types, comma separated (e.g. bug,feature,typo)"),
    claude: bool = typer.Option(False, "--claude", "-c", help="Also install the Claude Code guide"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing files without asking"),
):
    """
    Install templates into the current repository.

    Without --all or --type, asks which template groups and issue templates to install.

    Examples:
        github-templates install
        github-templates install --all
        github-templates install --all --claude
        github-templates install --type bug,feature --force
    """
    options = InstallOptions(all=all_templates, type=parse_types(types), claude=claude, force=force)
    run_operation(install_templates, options)


@app.command()
def remove(
    all_templates: bool = typer.Option(False, "--all", "-a", help="Remove every template"),
    types: Optional[str] = typer.Option(None, "--type", "-t", help="Only these types, comma separated (e.g. bug,feature,typo)"),
    force: bool = typer.Option(False, "--force", "-f", help="Delete without asking"),
):
    """
    Remove installed templates from the current repository.

    Without --all or --type, offers the templates that are currently installed.
    """
    options = RemoveOptions(all=all_templates, type=parse_types(types), force=force)
    run_operation(remove_templates, options)


@app.command(name="list")
def list_templates():
    """List the available templates."""
    console.print("[bold cyan]Available templates[/bold cyan]")

    for title, templates in LIST_GROUPS:
        table = Table(title=f"[yellow]{title}[/yellow]", title_justify="left", show_header=True, header_style="bold")
        table.add_column("Type", style="cyan", no_wrap=True)
        table.add_column("Name", style="white")
        table.add_column("File", style="green", no_wrap=True)
        table.add_column("Description", style="bright_black")
        for template in templates:
            table.add_row(template.type, template.name, template.file, template.description)
        console.print()
        console.print(table)

    examples = Table.grid(padding=(0, 2))
    examples.add_column(style="cyan")
    examples.add_column(style="dim")
    for command, description in USAGE_EXAMPLES:
        examples.add_row(command, description)
    console.print()
    console.print(Panel(examples, title="Usage", border_style="cyan", padding=(1, 2)))


@app.command()
def update(
    force: bool = typer.Option(False, "--force", "-f", help="Update without asking"),
):
    """Refresh installed templates whose content differs from the packaged version."""
    run_operation(update_templates, UpdateOptions(force=force))


def main():
    app()
