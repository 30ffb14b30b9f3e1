"""Template catalog and the mapping from templates to source and target paths."""

from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from .models import Category, TemplateInfo

# Constants
ISSUE_TEMPLATES = [
    TemplateInfo(
        name="Bug report",
        file="bug_report.md",
        type="bug",
        description="Report a bug or unexpected behaviour",
    ),
    TemplateInfo(
        name="Feature request",
        file="feature_request.md",
        type="feature",
        description="Propose a new feature or idea",
    ),
    TemplateInfo(
        name="Typo fix",
        file="typo_fix.md",
        type="typo",
        description="Report typos or inconsistent wording",
    ),
    TemplateInfo(
        name="Question",
        file="question.md",
        type="question",
        description="Ask about usage or expected behaviour",
    ),
    TemplateInfo(
        name="Documentation",
        file="documentation.md",
        type="documentation",
        description="Suggest improvements or additions to the docs",
    ),
    TemplateInfo(
        name="Performance",
        file="performance.md",
        type="performance",
        description="Report performance problems or propose optimizations",
    ),
]

OTHER_TEMPLATES = [
    TemplateInfo(
        name="Pull request",
        file="pull_request_template.md",
        type="pr",
        description="Default body for new pull requests",
    ),
    TemplateInfo(
        name="Contributing guide",
        file="contributing.md",
        type="contributing",
        description="Explains how to contribute to the project",
    ),
]

CLAUDE_TEMPLATES = [
    TemplateInfo(
        name="Claude Code guide",
        file="templates.md",
        type="claude",
        description="Tells Claude Code how to use the issue and PR templates",
    ),
]

ISSUE_TYPES = {"bug", "feature", "typo", "question", "documentation", "performance"}

TEMPLATES_DIRNAME = "templates"
ISSUE_SOURCE_DIRNAME = "ISSUE_TEMPLATE"
CLAUDE_SOURCE_DIRNAME = "claude"

# Files whose presence marks the cwd as a project root
PROJECT_MARKERS = {
    ".git",
    "package.json",
    "pyproject.toml",
    "setup.py",
    "requirements.txt",
    "composer.json",
    "Gemfile",
    "Cargo.toml",
    "go.mod",
    "pom.xml",
    "build.gradle",
}


def get_all_templates() -> list[TemplateInfo]:
    return [*ISSUE_TEMPLATES, *OTHER_TEMPLATES, *CLAUDE_TEMPLATES]


def get_templates_by_type(types: Optional[Iterable[str]]) -> list[TemplateInfo]:
    """Return registered templates whose type is in ``types``, in registry order."""
    wanted = set(types or ())
    return [t for t in get_all_templates() if t.type in wanted]


def is_valid_template_type(template_type: str) -> bool:
    return any(t.type == template_type for t in get_all_templates())


def get_template_category(template_type: str) -> Category:
    if template_type in ISSUE_TYPES:
        return "issue"
    if template_type == "pr":
        return "pr"
    if template_type == "claude":
        return "claude"
    return "other"


def get_templates_path() -> Path:
    """Location of the Markdown payloads shipped inside this package."""
    return Path(__file__).resolve().parent / TEMPLATES_DIRNAME


def get_target_path(category: str) -> Path:
    """Directory under the current working directory that receives ``category`` templates."""
    cwd = Path.cwd()
    if category == "issue":
        return cwd / ".github" / "ISSUE_TEMPLATE"
    if category == "pr":
        return cwd / ".github"
    if category == "claude":
        return cwd / ".claude"
    return cwd


def get_source_file(template: TemplateInfo) -> Path:
    category = get_template_category(template.type)
    root = get_templates_path()
    if category == "issue":
        return root / ISSUE_SOURCE_DIRNAME / template.file
    if category == "claude":
        return root / CLAUDE_SOURCE_DIRNAME / template.file
    return root / template.file


def get_target_file(template: TemplateInfo) -> Path:
    return get_target_path(get_template_category(template.type)) / template.file


def get_installed_templates() -> list[TemplateInfo]:
    """Registered templates whose target file currently exists."""
    return [t for t in get_all_templates() if get_target_file(t).exists()]


def has_project_marker(path: Path | None = None) -> bool:
    if path is None:
        path = Path.cwd()
    return any((path / marker).exists() for marker in PROJECT_MARKERS)
