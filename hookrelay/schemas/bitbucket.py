"""Bitbucket Cloud webhook payloads.

Only the fields the relay displays are modelled. Every display field is
optional: a missing key or an explicit ``null`` falls back to an empty
value, so the transformers never guard against absent data. Unknown keys
are ignored. The structural fields that decide which event we are looking
at (``push.changes``, ``pullrequest``, ``fork``) are required, and a payload
without them fails validation.
"""

from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, Field


def _null_as(empty: Any):
    return BeforeValidator(lambda value: empty() if value is None else value)


Text = Annotated[str, _null_as(str)]


class Link(BaseModel):
    href: Text = ""


class Links(BaseModel):
    html: Annotated[Link, _null_as(dict)] = Field(default_factory=Link)


class Actor(BaseModel):
    display_name: Text = ""


class Repository(BaseModel):
    full_name: Text = ""
    links: Annotated[Links, _null_as(dict)] = Field(default_factory=Links)


class Commit(BaseModel):
    message: Optional[str] = None
    links: Annotated[Links, _null_as(dict)] = Field(default_factory=Links)

    @property
    def summary(self) -> str:
        """Trimmed commit message, ``-`` when absent or blank"""
        return (self.message or "").strip() or "-"


class Reference(BaseModel):
    name: Text = ""


class Change(BaseModel):
    # ``new`` is null when the push deleted the branch
    new: Optional[Reference] = None
    commits: Annotated[List[Commit], _null_as(list)] = Field(default_factory=list)

    @property
    def branch(self) -> str:
        return self.new.name if self.new is not None else ""


class Push(BaseModel):
    changes: List[Change] = Field(..., min_length=1)


class Branch(BaseModel):
    name: Text = ""


class Endpoint(BaseModel):
    """Source or destination side of a pull request"""

    branch: Optional[Branch] = None
    name: Text = ""

    @property
    def branch_name(self) -> str:
        # Bitbucket nests the name under ``branch``; some senders flatten it
        if self.branch is not None and self.branch.name:
            return self.branch.name
        return self.name


class PullRequest(BaseModel):
    title: Text = ""
    author: Annotated[Actor, _null_as(dict)] = Field(default_factory=Actor)
    links: Annotated[Links, _null_as(dict)] = Field(default_factory=Links)
    source: Annotated[Endpoint, _null_as(dict)] = Field(default_factory=Endpoint)
    destination: Annotated[Endpoint, _null_as(dict)] = Field(default_factory=Endpoint)


class PushEvent(BaseModel):
    push: Push
    repository: Annotated[Repository, _null_as(dict)] = Field(default_factory=Repository)
    actor: Annotated[Actor, _null_as(dict)] = Field(default_factory=Actor)


class PullRequestEvent(BaseModel):
    pullrequest: PullRequest
    repository: Annotated[Repository, _null_as(dict)] = Field(default_factory=Repository)
    actor: Annotated[Actor, _null_as(dict)] = Field(default_factory=Actor)


class ForkEvent(BaseModel):
    fork: Repository
    repository: Annotated[Repository, _null_as(dict)] = Field(default_factory=Repository)
    actor: Annotated[Actor, _null_as(dict)] = Field(default_factory=Actor)
