"""Decide which templates a command acts on: all, by type, or interactively."""

from .models import InstallOptions, RemoveOptions, TemplateInfo
from .registry import (
    CLAUDE_TEMPLATES,
    ISSUE_TEMPLATES,
    OTHER_TEMPLATES,
    get_all_templates,
    get_installed_templates,
    get_templates_by_type,
)
from .ui import console, multi_select_with_arrows

TEMPLATE_GROUPS = {
    "issues": "Issue templates",
    "pr": "Pull request template",
    "claude": "Claude Code integration",
}
DEFAULT_GROUPS = ["issues", "pr"]


def report_no_match():
    valid = ", ".join(t.type for t in get_all_templates())
    console.print("[red]No templates match the requested types[/red]")
    console.print(f"[dim]Available types: {valid}[/dim]")


def select_install_interactively() -> list[TemplateInfo]:
    groups = multi_select_with_arrows(
        TEMPLATE_GROUPS,
        "Choose the templates to install",
        DEFAULT_GROUPS,
        empty_message="Select at least one template group",
    )

    selected: list[TemplateInfo] = []
    if "issues" in groups:
        issue_choices = {t.type: f"{t.name} - {t.description}" for t in ISSUE_TEMPLATES}
        chosen = multi_select_with_arrows(
            issue_choices,
            "Choose the issue templates",
            list(issue_choices),
            empty_message="Select at least one issue template",
        )
        selected.extend(get_templates_by_type(chosen))

    if "pr" in groups:
        selected.extend(t for t in OTHER_TEMPLATES if t.type == "pr")

    if "claude" in groups:
        selected.extend(CLAUDE_TEMPLATES)

    return selected


def select_for_install(options: InstallOptions) -> list[TemplateInfo]:
    """Resolve the install set. An empty list means there is nothing to do."""
    if options.all:
        templates = get_all_templates()
        if not options.claude:
            templates = [t for t in templates if t.type != "claude"]
    elif options.type is not None:
        templates = get_templates_by_type(options.type)
        if not templates:
            report_no_match()
            return []
    else:
        templates = select_install_interactively()

    if options.claude and not any(t.type == "claude" for t in templates):
        templates = templates + CLAUDE_TEMPLATES

    return templates


def select_remove_interactively() -> list[TemplateInfo]:
    existing = get_installed_templates()
    if not existing:
        console.print("[yellow]No installed templates were found to remove[/yellow]")
        return []

    choices = {t.type: f"{t.name} ({t.file})" for t in existing}
    chosen = multi_select_with_arrows(
        choices,
        "Choose the templates to remove",
        [],
        empty_message="Select at least one template",
    )
    return get_templates_by_type(chosen)


def select_for_remove(options: RemoveOptions) -> list[TemplateInfo]:
    if options.all:
        return get_all_templates()
    if options.type is not None:
        templates = get_templates_by_type(options.type)
        if not templates:
            report_no_match()
        return templates
    return select_remove_interactively()


def select_for_update() -> list[TemplateInfo]:
    installed = get_installed_templates()
    if not installed:
        console.print("[yellow]No installed templates were found to update[/yellow]")
        console.print("[dim]Install templates first with: github-templates install[/dim]")
    return installed
