"""Terminal helpers: shared console, step tree, arrow-key multi-select and confirmations."""

import readchar
import typer
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

console = Console()

STATUS_SYMBOLS = {
    "done": "[green]●[/green]",
    "pending": "[green dim]○[/green dim]",
    "error": "[red]●[/red]",
    "skipped": "[yellow]○[/yellow]",
}


class StepTracker:
    """Track per-template steps and render them as a Rich tree without emojis."""

    def __init__(self, title: str):
        self.title = title
        self.steps = []  # list of dicts: {key, label, status, detail}

    def add(self, key: str, label: str):
        if key not in [s["key"] for s in self.steps]:
            self.steps.append({"key": key, "label": label, "status": "pending", "detail": ""})

    def complete(self, key: str, detail: str = ""):
        self._update(key, status="done", detail=detail)

    def error(self, key: str, detail: str = ""):
        self._update(key, status="error", detail=detail)

    def skip(self, key: str, detail: str = ""):
        self._update(key, status="skipped", detail=detail)

    def _update(self, key: str, status: str, detail: str):
        for s in self.steps:
            if s["key"] == key:
                s["status"] = status
                if detail:
                    s["detail"] = detail
                break

    def render(self) -> Tree:
        tree = Tree(f"[cyan]{self.title}[/cyan]", guide_style="grey50")
        for step in self.steps:
            label = step["label"]
            detail_text = step["detail"].strip() if step["detail"] else ""
            status = step["status"]
            symbol = STATUS_SYMBOLS.get(status, " ")

            if status == "pending":
                if detail_text:
                    line = f"{symbol} [bright_black]{label} ({detail_text})[/bright_black]"
                else:
                    line = f"{symbol} [bright_black]{label}[/bright_black]"
            else:
                if detail_text:
                    line = f"{symbol} [white]{label}[/white] [bright_black]({detail_text})[/bright_black]"
                else:
                    line = f"{symbol} [white]{label}[/white]"

            tree.add(line)
        return tree


def get_key() -> str:
    """Get a single keypress in a cross-platform way using readchar."""
    key = readchar.readkey()

    if key == readchar.key.UP or key == readchar.key.CTRL_P:
        return "up"
    if key == readchar.key.DOWN or key == readchar.key.CTRL_N:
        return "down"

    if key == readchar.key.ENTER:
        return "enter"

    if key == readchar.key.ESC:
        return "escape"

    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt

    return key


def multi_select_with_arrows(
    options: dict[str, str],
    prompt_text: str = "Select options",
    default_keys: list[str] | None = None,
    empty_message: str = "Select at least one option",
) -> list[str]:
    """
    Checkbox selection using arrow keys and Space with a Rich Live panel.

    Args:
        options: Dict with option keys mapped to their display labels
        prompt_text: Title of the selection panel
        default_keys: Keys that start out checked
        empty_message: Shown when Enter is pressed with nothing checked

    Returns:
        Checked keys in option order (never empty)
    """
    option_keys = list(options.keys())
    selected_indices = {option_keys.index(k) for k in default_keys or [] if k in option_keys}
    cursor_index = 0
    warning = ""

    def build_panel():
        table = Table.grid(padding=(0, 2))
        table.add_column(style="cyan", justify="left", width=3)
        table.add_column(style="white", justify="left")

        for i, key in enumerate(option_keys):
            indicator = "[cyan]☑" if i in selected_indices else "[bright_black]☐"
            pointer = "▶" if i == cursor_index else " "
            table.add_row(pointer, f"{indicator} [white]{options[key]}[/white]")

        table.add_row("", "")
        if warning:
            table.add_row("", f"[yellow]{warning}[/yellow]")
        table.add_row("", "[dim]Use ↑/↓ to move, Space to toggle, Enter to confirm, Esc to cancel[/dim]")

        return Panel(table, title=f"[bold]{prompt_text}[/bold]", border_style="cyan", padding=(1, 2))

    console.print()

    with Live(build_panel(), console=console, transient=True, auto_refresh=False) as live:
        while True:
            try:
                key = get_key()
                if key == "up":
                    cursor_index = (cursor_index - 1) % len(option_keys)
                elif key == "down":
                    cursor_index = (cursor_index + 1) % len(option_keys)
                elif key == readchar.key.SPACE:
                    selected_indices ^= {cursor_index}
                    warning = ""
                elif key == "enter":
                    if selected_indices:
                        return [option_keys[i] for i in sorted(selected_indices)]
                    warning = empty_message
                elif key == "escape":
                    console.print("\n[yellow]Selection cancelled[/yellow]")
                    raise typer.Exit(1)

                live.update(build_panel(), refresh=True)

            except KeyboardInterrupt:
                console.print("\n[yellow]Selection cancelled[/yellow]")
                raise typer.Exit(1)


def confirm(message: str, default: bool = False) -> bool:
    """Ask a yes/no question on the terminal."""
    return typer.confirm(message, default=default)
