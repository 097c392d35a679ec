"""Title and branch-name helpers."""

import re


def join_title(words) -> str:
    """Join CLI words into a title and upper-case its first letter."""
    title = " ".join(w for w in words if w).strip()
    if not title:
        return ""
    return title[0].upper() + title[1:]


def branch_name_for(title: str) -> str:
    """Derive a branch name: lower-case, whitespace runs to '-', drop non-word/non-hyphen chars.

    Word characters are ASCII only, so accented letters are dropped too.

    >>> branch_name_for("Fix the Login Bug!!")
    'fix-the-login-bug'
    """
    name = title.lower()
    name = re.sub(r"\s+", "-", name, flags=re.ASCII)
    return re.sub(r"[^\w-]+", "", name, flags=re.ASCII)


def default_project_title(repo_name: str) -> str:
    """Turn a repository name like 'my-cool-repo' into 'My Cool Repo'."""
    return " ".join(word[:1].upper() + word[1:] for word in repo_name.split("-") if word)
