"""Value objects for GitHub Projects (V2) boards and their items."""

from dataclasses import dataclass, field
from typing import List, Optional

STATUS_FIELD_NAME = "Status"

TODO = "Todo"
IN_PROGRESS = "In Progress"
DONE = "Done"
BACKLOG = "Backlog"


@dataclass(frozen=True)
class ProjectRef:
    """Either a project number or an opaque project node ID."""

    number: Optional[int] = None
    node_id: Optional[str] = None

    @classmethod
    def parse(cls, value: str) -> "ProjectRef":
        """Build a ref from a configured value: digits are a number, anything else a node ID.

        Raises ValueError for an empty value.
        """
        value = value.strip()
        if not value:
            msg = "Project identifier is empty"
            raise ValueError(msg)
        if value.isdigit():
            return cls(number=int(value))
        return cls(node_id=value)

    def __str__(self):
        if self.number is not None:
            return f"#{self.number}"
        return self.node_id


@dataclass(frozen=True)
class StatusOption:
    id: str
    name: str
    color: str = "GRAY"
    description: str = ""


@dataclass(frozen=True)
class StatusField:
    id: str
    options: List[StatusOption] = field(default_factory=list)

    def option(self, name: str) -> Optional[StatusOption]:
        for opt in self.options:
            if opt.name == name:
                return opt
        return None


@dataclass(frozen=True)
class Project:
    id: str
    number: int
    title: str
    url: str = ""
    status_field: Optional[StatusField] = None


@dataclass(frozen=True)
class ProjectSummary:
    """A row of the owner's project listing."""

    id: str
    number: int
    title: str


@dataclass(frozen=True)
class ItemContent:
    kind: str  # "Issue" or "DraftIssue"
    id: str
    title: str
    body: str = ""
    number: Optional[int] = None

    @property
    def label(self) -> str:
        if self.kind == "Issue" and self.number is not None:
            return f"issue #{self.number}"
        return f'draft "{self.title}"'


@dataclass(frozen=True)
class ProjectItem:
    id: str
    status: Optional[str]
    content: Optional[ItemContent]
