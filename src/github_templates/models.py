"""Plain records shared by the registry, the selection engine and the sync operations."""

from dataclasses import dataclass, field
from typing import Literal, Optional

Category = Literal["issue", "pr", "claude", "other"]


@dataclass(frozen=True)
class TemplateInfo:
    name: str
    file: str
    type: str
    description: str


@dataclass
class InstallOptions:
    all: bool = False
    type: Optional[list[str]] = None
    claude: bool = False
    force: bool = False


@dataclass
class RemoveOptions:
    all: bool = False
    type: Optional[list[str]] = None
    force: bool = False


@dataclass
class UpdateOptions:
    force: bool = False


@dataclass
class SyncSummary:
    """Outcome of one install/update/remove run, in processing order."""
    done: list[TemplateInfo] = field(default_factory=list)
    skipped: list[TemplateInfo] = field(default_factory=list)
    current: list[TemplateInfo] = field(default_factory=list)
    failed: list[TemplateInfo] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.done)
