"""ProjectsApi: Projects (V2) reads and mutations over a GraphQLClient."""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from github_workflow.errors import GitHubApiError, ProjectNotFoundError
from github_workflow.log import get_logger
from github_workflow.projects import queries
from github_workflow.projects.models import (
    ItemContent,
    Project,
    ProjectItem,
    ProjectRef,
    ProjectSummary,
    StatusField,
    StatusOption,
)

DEFAULT_ITEM_LIMIT = 50
UNRESOLVED_PROJECT = "Could not resolve to a ProjectV2"

logger = get_logger("projects")


def _status_field_from(node: Optional[Dict[str, Any]]) -> Optional[StatusField]:
    if not node or "id" not in node:
        return None
    options = [
        StatusOption(
            id=opt["id"],
            name=opt["name"],
            color=opt.get("color") or "GRAY",
            description=opt.get("description") or "",
        )
        for opt in node.get("options") or []
    ]
    return StatusField(id=node["id"], options=options)


def _project_from(node: Dict[str, Any]) -> Project:
    return Project(
        id=node["id"],
        number=node["number"],
        title=node.get("title", ""),
        url=node.get("url", ""),
        status_field=_status_field_from(node.get("field")),
    )


def _item_from(node: Dict[str, Any]) -> ProjectItem:
    status_value = node.get("fieldValueByName") or {}
    content_node = node.get("content")
    content = None
    if content_node and content_node.get("id"):
        content = ItemContent(
            kind=content_node.get("__typename", ""),
            id=content_node["id"],
            title=content_node.get("title", ""),
            body=content_node.get("body") or "",
            number=content_node.get("number"),
        )
    return ProjectItem(id=node["id"], status=status_value.get("name"), content=content)


def _option_inputs(options: Sequence[StatusOption]) -> List[Dict[str, str]]:
    return [
        {"name": opt.name, "color": opt.color, "description": opt.description}
        for opt in options
    ]


class ProjectsApi:
    """GitHub Projects (V2) operations used by the workflow commands.

    Args:
        graphql: A GraphQLClient (or anything with an `execute(query, variables)` method).
    """

    def __init__(self, graphql):
        self._graphql = graphql

    def list_open_projects(self, owner: str) -> List[ProjectSummary]:
        """Return the owner's projects that are not closed, in API order."""
        data = self._graphql.execute(queries.LIST_OWNER_PROJECTS, {"owner": owner})
        owner_node = data.get("repositoryOwner") or {}
        nodes = (owner_node.get("projectsV2") or {}).get("nodes") or []
        return [
            ProjectSummary(id=n["id"], number=n["number"], title=n.get("title", ""))
            for n in nodes
            if n and not n.get("closed")
        ]

    def get_project(self, owner: str, ref: ProjectRef) -> Project:
        """Load a project, its Status field and options by number or node ID.

        Raises ProjectNotFoundError if the project is not visible to the token.
        """
        if ref.number is not None:
            try:
                data = self._graphql.execute(
                    queries.PROJECT_BY_NUMBER, {"owner": owner, "number": ref.number}
                )
            except GitHubApiError as exc:
                if UNRESOLVED_PROJECT in str(exc):
                    raise ProjectNotFoundError(f"Could not find project {ref} for {owner}.") from exc
                raise
            node = (data.get("repositoryOwner") or {}).get("projectV2")
        else:
            data = self._graphql.execute(queries.PROJECT_BY_ID, {"id": ref.node_id})
            node = data.get("node")
        if not node or "id" not in node:
            raise ProjectNotFoundError(f"Could not find project {ref} for {owner}.")
        return _project_from(node)

    def list_items(self, project_id: str, first: int = DEFAULT_ITEM_LIMIT) -> List[ProjectItem]:
        """Return up to `first` items ordered by board position ascending."""
        data = self._graphql.execute(
            queries.PROJECT_ITEMS, {"projectId": project_id, "first": first}
        )
        nodes = ((data.get("node") or {}).get("items") or {}).get("nodes") or []
        return [_item_from(n) for n in nodes if n]

    def repository_ids(self, owner: str, repo: str) -> Tuple[str, str]:
        """Return the node IDs of the repository owner and the repository."""
        data = self._graphql.execute(queries.REPOSITORY_IDS, {"owner": owner, "repo": repo})
        return data["repositoryOwner"]["id"], data["repository"]["id"]

    def add_draft_issue(self, project_id: str, title: str, body: Optional[str] = None) -> str:
        variables = {"projectId": project_id, "title": title}
        if body:
            variables["body"] = body
        data = self._graphql.execute(queries.ADD_DRAFT_ISSUE, variables)
        return data["addProjectV2DraftIssue"]["projectItem"]["id"]

    def add_item(self, project_id: str, content_id: str) -> str:
        data = self._graphql.execute(
            queries.ADD_ITEM, {"projectId": project_id, "contentId": content_id}
        )
        return data["addProjectV2ItemById"]["item"]["id"]

    def set_status(self, project_id: str, item_id: str, field_id: str, option_id: str) -> None:
        logger.debug("Setting item %s status option to %s", item_id, option_id)
        self._graphql.execute(
            queries.SET_STATUS,
            {
                "projectId": project_id,
                "itemId": item_id,
                "fieldId": field_id,
                "optionId": option_id,
            },
        )

    def create_project(self, owner_id: str, repo_id: str, title: str) -> Project:
        data = self._graphql.execute(
            queries.CREATE_PROJECT, {"ownerId": owner_id, "title": title, "repoId": repo_id}
        )
        return _project_from(data["createProjectV2"]["projectV2"])

    def create_status_field(self, project_id: str, options: Sequence[StatusOption]) -> StatusField:
        data = self._graphql.execute(
            queries.CREATE_STATUS_FIELD,
            {"projectId": project_id, "options": _option_inputs(options)},
        )
        return _status_field_from(data["createProjectV2Field"]["projectV2Field"])

    def update_status_field(self, field_id: str, options: Sequence[StatusOption]) -> StatusField:
        """Replace the field's options with `options` (existing ones must be included to keep them)."""
        data = self._graphql.execute(
            queries.UPDATE_STATUS_FIELD,
            {"fieldId": field_id, "options": _option_inputs(options)},
        )
        return _status_field_from(data["updateProjectV2Field"]["projectV2Field"])
