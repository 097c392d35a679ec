"""GraphQL documents for GitHub Projects (V2)."""

STATUS_FIELD_FRAGMENT = """
fragment StatusFieldParts on ProjectV2 {
  id
  number
  title
  url
  field(name: "Status") {
    ... on ProjectV2SingleSelectField {
      id
      options { id name color description }
    }
  }
}
"""

LIST_OWNER_PROJECTS = """
query listOwnerProjects($owner: String!) {
  repositoryOwner(login: $owner) {
    ... on ProjectV2Owner {
      projectsV2(first: 100) {
        nodes { id number title closed }
      }
    }
  }
}
"""

PROJECT_BY_NUMBER = STATUS_FIELD_FRAGMENT + """
query projectByNumber($owner: String!, $number: Int!) {
  repositoryOwner(login: $owner) {
    ... on ProjectV2Owner {
      projectV2(number: $number) { ...StatusFieldParts }
    }
  }
}
"""

PROJECT_BY_ID = STATUS_FIELD_FRAGMENT + """
query projectById($id: ID!) {
  node(id: $id) {
    ... on ProjectV2 { ...StatusFieldParts }
  }
}
"""

PROJECT_ITEMS = """
query projectItems($projectId: ID!, $first: Int!) {
  node(id: $projectId) {
    ... on ProjectV2 {
      items(first: $first, orderBy: {field: POSITION, direction: ASC}) {
        nodes {
          id
          fieldValueByName(name: "Status") {
            ... on ProjectV2ItemFieldSingleSelectValue { name optionId }
          }
          content {
            __typename
            ... on Issue { id number title body }
            ... on DraftIssue { id title body }
          }
        }
      }
    }
  }
}
"""

REPOSITORY_IDS = """
query repositoryIds($owner: String!, $repo: String!) {
  repositoryOwner(login: $owner) { id }
  repository(owner: $owner, name: $repo) { id }
}
"""

ADD_DRAFT_ISSUE = """
mutation addDraftIssue($projectId: ID!, $title: String!, $body: String) {
  addProjectV2DraftIssue(input: {projectId: $projectId, title: $title, body: $body}) {
    projectItem { id }
  }
}
"""

ADD_ITEM = """
mutation addItem($projectId: ID!, $contentId: ID!) {
  addProjectV2ItemById(input: {projectId: $projectId, contentId: $contentId}) {
    item { id }
  }
}
"""

SET_STATUS = """
mutation setStatus($projectId: ID!, $itemId: ID!, $fieldId: ID!, $optionId: String!) {
  updateProjectV2ItemFieldValue(
    input: {
      projectId: $projectId
      itemId: $itemId
      fieldId: $fieldId
      value: {singleSelectOptionId: $optionId}
    }
  ) {
    projectV2Item { id }
  }
}
"""

CREATE_PROJECT = STATUS_FIELD_FRAGMENT + """
mutation createProject($ownerId: ID!, $title: String!, $repoId: ID!) {
  createProjectV2(input: {ownerId: $ownerId, title: $title, repositoryId: $repoId}) {
    projectV2 { ...StatusFieldParts }
  }
}
"""

CREATE_STATUS_FIELD = """
mutation createStatusField($projectId: ID!, $options: [ProjectV2SingleSelectFieldOptionInput!]!) {
  createProjectV2Field(
    input: {projectId: $projectId, dataType: SINGLE_SELECT, name: "Status", singleSelectOptions: $options}
  ) {
    projectV2Field {
      ... on ProjectV2SingleSelectField {
        id
        options { id name color description }
      }
    }
  }
}
"""

UPDATE_STATUS_FIELD = """
mutation updateStatusField($fieldId: ID!, $options: [ProjectV2SingleSelectFieldOptionInput!]!) {
  updateProjectV2Field(input: {fieldId: $fieldId, singleSelectOptions: $options}) {
    projectV2Field {
      ... on ProjectV2SingleSelectField {
        id
        options { id name color description }
      }
    }
  }
}
"""
