"""Tests for ProjectsApi against a recording GraphQL double."""

import pytest

from fake_projects_api import FakeProjectsApi
from github_workflow.errors import GitHubApiError, ProjectNotFoundError
from github_workflow.projects import queries
from github_workflow.projects.models import ProjectRef, StatusOption
from github_workflow.projects.projects_api import ProjectsApi

STATUS_FIELD = {
    "id": "PVTSSF_status",
    "options": [
        {"id": "f75ad846", "name": "Todo", "color": "GREEN", "description": ""},
        {"id": "47fc9ee4", "name": "In Progress", "color": "YELLOW", "description": ""},
        {"id": "98236657", "name": "Done", "color": "PURPLE", "description": None},
    ],
}

PROJECT_NODE = {
    "id": "PVT_kwHO",
    "number": 3,
    "title": "Roadmap",
    "url": "https://github.com/users/octo/projects/3",
    "field": STATUS_FIELD,
}


class RecordingGraphQL:
    """Returns queued responses and records (query, variables) pairs."""

    def __init__(self, *responses):
        self._responses = list(responses)
        self.calls = []

    def execute(self, query, variables=None):
        self.calls.append((query, variables))
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.mark.unit
class TestFakeProjectsApiConformance:

    def test_fake_has_same_methods_as_real(self):
        methods = {
            "list_open_projects", "get_project", "list_items", "repository_ids",
            "add_draft_issue", "add_item", "set_status", "create_project",
            "create_status_field", "update_status_field",
        }
        for method in methods:
            assert hasattr(ProjectsApi, method), f"ProjectsApi missing {method}"
            assert hasattr(FakeProjectsApi, method), f"FakeProjectsApi missing {method}"


@pytest.mark.unit
class TestListOpenProjects:

    def test_filters_closed_projects(self):
        graphql = RecordingGraphQL({"repositoryOwner": {"projectsV2": {"nodes": [
            {"id": "P1", "number": 1, "title": "Old", "closed": True},
            {"id": "P2", "number": 2, "title": "Current", "closed": False},
        ]}}})

        projects = ProjectsApi(graphql).list_open_projects("octo")

        assert [(p.number, p.title) for p in projects] == [(2, "Current")]
        assert graphql.calls[0][1] == {"owner": "octo"}

    def test_unknown_owner_gives_empty_list(self):
        assert ProjectsApi(RecordingGraphQL({"repositoryOwner": None})).list_open_projects("x") == []


@pytest.mark.unit
class TestGetProject:

    def test_by_number(self):
        graphql = RecordingGraphQL({"repositoryOwner": {"projectV2": PROJECT_NODE}})

        project = ProjectsApi(graphql).get_project("octo", ProjectRef(number=3))

        assert graphql.calls[0] == (queries.PROJECT_BY_NUMBER, {"owner": "octo", "number": 3})
        assert project.id == "PVT_kwHO"
        assert project.status_field.id == "PVTSSF_status"
        assert project.status_field.option("In Progress").id == "47fc9ee4"
        assert project.status_field.option("Done").description == ""
        assert project.status_field.option("Backlog") is None

    def test_by_node_id(self):
        graphql = RecordingGraphQL({"node": PROJECT_NODE})

        project = ProjectsApi(graphql).get_project("octo", ProjectRef(node_id="PVT_kwHO"))

        assert graphql.calls[0] == (queries.PROJECT_BY_ID, {"id": "PVT_kwHO"})
        assert project.number == 3

    def test_project_without_status_field(self):
        node = dict(PROJECT_NODE, field=None)
        project = ProjectsApi(RecordingGraphQL({"node": node})).get_project("o", ProjectRef(node_id="x"))
        assert project.status_field is None

    def test_missing_project_raises(self):
        graphql = RecordingGraphQL({"repositoryOwner": {"projectV2": None}})
        with pytest.raises(ProjectNotFoundError, match="#3"):
            ProjectsApi(graphql).get_project("octo", ProjectRef(number=3))

    def test_unresolvable_number_raises_not_found(self):
        graphql = RecordingGraphQL(GitHubApiError(
            "GraphQL errors: Could not resolve to a ProjectV2 with the number 99."
        ))
        with pytest.raises(ProjectNotFoundError, match="Could not find project #99 for octo"):
            ProjectsApi(graphql).get_project("octo", ProjectRef(number=99))

    def test_other_api_errors_propagate(self):
        graphql = RecordingGraphQL(GitHubApiError("GraphQL errors: Something went wrong"))
        with pytest.raises(GitHubApiError, match="Something went wrong"):
            ProjectsApi(graphql).get_project("octo", ProjectRef(number=3))


@pytest.mark.unit
class TestListItems:

    def test_parses_issues_drafts_and_empty_content(self):
        graphql = RecordingGraphQL({"node": {"items": {"nodes": [
            {
                "id": "PVTI_1",
                "fieldValueByName": {"name": "Todo", "optionId": "f75ad846"},
                "content": {"__typename": "Issue", "id": "I_1", "number": 12,
                            "title": "Fix bug", "body": "Steps"},
            },
            {
                "id": "PVTI_2",
                "fieldValueByName": None,
                "content": {"__typename": "DraftIssue", "id": "DI_2", "title": "Idea", "body": None},
            },
            {"id": "PVTI_3", "fieldValueByName": {"name": "Todo"}, "content": None},
        ]}}})

        items = ProjectsApi(graphql).list_items("PVT_kwHO")

        assert graphql.calls[0][1] == {"projectId": "PVT_kwHO", "first": 50}
        assert [i.status for i in items] == ["Todo", None, "Todo"]
        assert items[0].content.label == "issue #12"
        assert items[1].content.body == ""
        assert items[1].content.label == 'draft "Idea"'
        assert items[2].content is None


@pytest.mark.unit
class TestMutations:

    def test_add_draft_issue_returns_item_id(self):
        graphql = RecordingGraphQL({"addProjectV2DraftIssue": {"projectItem": {"id": "PVTI_9"}}})
        assert ProjectsApi(graphql).add_draft_issue("PVT", "Idea") == "PVTI_9"
        assert graphql.calls[0][1] == {"projectId": "PVT", "title": "Idea"}

    def test_add_item_returns_item_id(self):
        graphql = RecordingGraphQL({"addProjectV2ItemById": {"item": {"id": "PVTI_4"}}})
        assert ProjectsApi(graphql).add_item("PVT", "I_4") == "PVTI_4"

    def test_set_status_sends_option(self):
        graphql = RecordingGraphQL({"updateProjectV2ItemFieldValue": {"projectV2Item": {"id": "PVTI_4"}}})
        ProjectsApi(graphql).set_status("PVT", "PVTI_4", "F", "opt")
        assert graphql.calls[0] == (queries.SET_STATUS, {
            "projectId": "PVT", "itemId": "PVTI_4", "fieldId": "F", "optionId": "opt",
        })

    def test_update_status_field_sends_full_option_list(self):
        graphql = RecordingGraphQL({"updateProjectV2Field": {"projectV2Field": STATUS_FIELD}})
        options = [StatusOption(id="", name="Backlog", color="GRAY", description="Later")]

        ProjectsApi(graphql).update_status_field("PVTSSF_status", options)

        assert graphql.calls[0][1] == {
            "fieldId": "PVTSSF_status",
            "options": [{"name": "Backlog", "color": "GRAY", "description": "Later"}],
        }

    def test_repository_ids(self):
        graphql = RecordingGraphQL({"repositoryOwner": {"id": "U_1"}, "repository": {"id": "R_1"}})
        assert ProjectsApi(graphql).repository_ids("octo", "demo") == ("U_1", "R_1")
