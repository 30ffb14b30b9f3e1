"""Install, update and remove templates in the current project."""

import shutil
from pathlib import Path

from rich.panel import Panel

from .errors import CopyFailed, DeleteFailed, ReadFailed, TemplateOperationError
from .models import InstallOptions, RemoveOptions, SyncSummary, TemplateInfo, UpdateOptions
from .registry import (
    get_source_file,
    get_target_file,
    get_target_path,
    get_template_category,
    has_project_marker,
)
from .selection import select_for_install, select_for_remove, select_for_update
from .ui import StepTracker, confirm, console

# Categories whose target directory is deleted once it holds no files
PRUNABLE_CATEGORIES = {"issue", "claude"}


def _display(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


def _is_empty_dir(path: Path) -> bool:
    """True when ``path`` is a directory with no entries; unreadable counts as not empty."""
    try:
        return not any(path.iterdir())
    except OSError:
        return False


def _prune_empty_dir(path: Path):
    """Remove ``path`` if it is empty. A failure leaves the directory in place."""
    if not _is_empty_dir(path):
        return
    try:
        path.rmdir()
    except OSError:
        return
    console.print(f"[dim]Removed empty directory {_display(path)}[/dim]")


def _copy(template: TemplateInfo, source: Path, target: Path):
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, target)
    except OSError as e:
        raise CopyFailed(template.name, e) from e


def install_template(template: TemplateInfo, force: bool = False) -> tuple[str, str]:
    """Copy one template into the project. Returns (outcome, detail)."""
    source = get_source_file(template)
    target = get_target_file(template)

    if target.exists() and not force:
        if not confirm(f"{_display(target)} already exists. Overwrite it?", default=False):
            return "skipped", "kept existing file"

    _copy(template, source, target)
    return "done", _display(target)


def update_template(template: TemplateInfo, force: bool = False) -> tuple[str, str]:
    """Refresh one installed template when its content differs from the packaged copy."""
    source = get_source_file(template)
    target = get_target_file(template)

    if not target.exists():
        return "skipped", "not installed"

    try:
        # Raw bytes: a line-ending difference counts as a change
        packaged = source.read_bytes()
        installed = target.read_bytes()
    except OSError as e:
        raise ReadFailed(template.name, e) from e

    if packaged == installed:
        return "current", "already up to date"

    if not force and not confirm(f"Update {template.name} ({_display(target)})?", default=True):
        return "skipped", "update declined"

    _copy(template, source, target)
    return "done", "updated"


def remove_template(template: TemplateInfo, force: bool = False) -> tuple[str, str]:
    """Delete one template from the project, pruning its directory when left empty."""
    category = get_template_category(template.type)
    target = get_target_file(template)

    if not target.exists():
        return "skipped", "not present"

    if not force and not confirm(f"Delete {_display(target)}?", default=False):
        return "skipped", "kept"

    try:
        target.unlink()
    except OSError as e:
        raise DeleteFailed(template.name, e) from e

    if category in PRUNABLE_CATEGORIES:
        _prune_empty_dir(get_target_path(category))

    return "done", "removed"


def apply_to_templates(title: str, templates: list[TemplateInfo], action, force: bool = False) -> SyncSummary:
    """Run ``action`` on each template in order and render the outcome tree.

    With ``force`` a failing template is reported and the batch continues;
    otherwise the first failure is re-raised after the tree is printed.
    """
    tracker = StepTracker(title)
    for template in templates:
        tracker.add(template.type, template.name)

    summary = SyncSummary()
    buckets = {"done": summary.done, "skipped": summary.skipped, "current": summary.current}

    for template in templates:
        try:
            outcome, detail = action(template, force)
        except TemplateOperationError as e:
            tracker.error(template.type, str(e.cause))
            summary.failed.append(template)
            console.print(f"[red]Error:[/red] {e}")
            if not force:
                console.print(tracker.render())
                raise
            continue

        buckets[outcome].append(template)
        if outcome == "done":
            tracker.complete(template.type, detail)
        else:
            tracker.skip(template.type, detail)

    console.print()
    console.print(tracker.render())
    return summary


def confirm_batch(templates: list[TemplateInfo], heading: str, question: str, default: bool) -> bool:
    console.print(f"\n[yellow]{heading}[/yellow]")
    for template in templates:
        console.print(f"[dim]  - {template.name} ({template.file})[/dim]")
    return confirm(question, default=default)


def install_templates(options: InstallOptions) -> SyncSummary:
    console.print("[bold cyan]Installing GitHub issue/PR templates[/bold cyan]\n")

    if not has_project_marker():
        console.print(
            "[yellow]Warning:[/yellow] no project marker (package.json, pyproject.toml, .git, ...) "
            "found here. Make sure you are running from the repository root."
        )

    templates = select_for_install(options)
    if not templates:
        return SyncSummary()

    console.print(f"\n[cyan]Installing {len(templates)} template(s)...[/cyan]")
    summary = apply_to_templates("Install templates", templates, install_template, options.force)

    console.print(f"\n[bold green]Installed {summary.count} template(s).[/bold green]")
    _print_install_notes(summary.done)
    return summary


def _print_install_notes(installed: list[TemplateInfo]):
    categories = {get_template_category(t.type) for t in installed}
    if not categories:
        return

    lines = []
    if "issue" in categories:
        lines.append("Issue templates: [cyan].github/ISSUE_TEMPLATE/[/cyan]")
    if "pr" in categories:
        lines.append("PR template: [cyan].github/pull_request_template.md[/cyan]")
    if "other" in categories:
        lines.append("Contributing guide: [cyan]contributing.md[/cyan]")
    if "claude" in categories:
        lines.append("Claude Code guide: [cyan].claude/templates.md[/cyan]")

    lines.append("")
    lines.append("1. Commit and push the new files")
    lines.append("2. New issues and pull requests on GitHub will offer the templates")
    if "claude" in categories:
        lines.append("3. Point Claude Code at [cyan].claude/templates.md[/cyan] when drafting issues and PRs")

    console.print()
    console.print(Panel("\n".join(lines), title="Next Steps", border_style="cyan", padding=(1, 2)))


def remove_templates(options: RemoveOptions) -> SyncSummary:
    console.print("[bold cyan]Removing GitHub issue/PR templates[/bold cyan]\n")

    templates = select_for_remove(options)
    if not templates:
        return SyncSummary()

    if not options.force:
        if not confirm_batch(templates, "These templates will be removed:", "Remove them?", default=False):
            console.print("[yellow]Removal cancelled[/yellow]")
            return SyncSummary()

    console.print(f"\n[cyan]Removing {len(templates)} template(s)...[/cyan]")
    summary = apply_to_templates("Remove templates", templates, remove_template, options.force)

    console.print(f"\n[bold green]Removed {summary.count} template(s).[/bold green]")
    if summary.count:
        console.print("[dim]Commit and push to apply the change on GitHub[/dim]")
    return summary


def update_templates(options: UpdateOptions) -> SyncSummary:
    console.print("[bold cyan]Updating GitHub issue/PR templates[/bold cyan]\n")

    templates = select_for_update()
    if not templates:
        return SyncSummary()

    console.print(f"[cyan]Found {len(templates)} installed template(s)[/cyan]")
    if not options.force:
        if not confirm_batch(templates, "These templates will be checked for updates:", "Update them?", default=True):
            console.print("[yellow]Update cancelled[/yellow]")
            return SyncSummary()

    summary = apply_to_templates("Update templates", templates, update_template, options.force)

    if summary.count:
        console.print(f"\n[bold green]Updated {summary.count} template(s).[/bold green]")
        console.print("[dim]Review the changes, then commit and push them[/dim]")
    elif len(summary.current) == len(templates):
        console.print("\n[bold green]All templates are already up to date.[/bold green]")
    else:
        console.print("\n[yellow]No templates were updated.[/yellow]")
    return summary
