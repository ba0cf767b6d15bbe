"""Pure mappings from Bitbucket webhook payloads to Discord messages."""

from functools import partial
from typing import Any, Callable, Dict, Mapping

from hookrelay.schemas.bitbucket import ForkEvent, PullRequestEvent, PushEvent, Repository
from hookrelay.schemas.discord import DiscordMessage, Embed, EmbedField
from hookrelay.schemas.webhook import EventKind


def _markdown_link(text: str, href: str) -> str:
    return f"[{text}]({href})"


def _repository_link(repository: Repository) -> str:
    return _markdown_link(repository.full_name, repository.links.html.href)


def transform_push(payload: Mapping[str, Any]) -> DiscordMessage:
    event = PushEvent.model_validate(payload)
    change = event.push.changes[0]
    branch = change.branch
    commit_lines = "\n".join(
        f"- {_markdown_link(commit.summary, commit.links.html.href)}"
        for commit in change.commits
    )

    return DiscordMessage(
        content=f"New push event on branch **{branch}** in repository **{event.repository.full_name}**",
        embeds=[
            Embed(
                title="Push Event",
                description=f"Branch: {branch}\nCommits:\n{commit_lines}",
                fields=[
                    EmbedField(name="Repository", value=_repository_link(event.repository), inline=False),
                    EmbedField(name="Author", value=event.actor.display_name, inline=False),
                ],
            )
        ],
    )


def transform_pull_request(payload: Mapping[str, Any], action: str) -> DiscordMessage:
    event = PullRequestEvent.model_validate(payload)
    pr = event.pullrequest

    return DiscordMessage(
        content=f"Pull Request **{action}** in repository **{event.repository.full_name}**",
        embeds=[
            Embed(
                title=f"Pull Request: {pr.title}",
                description=(
                    f"Author: {pr.author.display_name}\n"
                    f"{_markdown_link('View Pull Request', pr.links.html.href)}"
                ),
                fields=[
                    EmbedField(name="Source Branch", value=pr.source.branch_name, inline=True),
                    EmbedField(name="Destination Branch", value=pr.destination.branch_name, inline=True),
                ],
            )
        ],
    )


def transform_fork(payload: Mapping[str, Any]) -> DiscordMessage:
    event = ForkEvent.model_validate(payload)

    return DiscordMessage(
        content=f"Repository **forked** by **{event.actor.display_name}**",
        embeds=[
            Embed(
                title="Repository Fork",
                description=_markdown_link("View Repository", event.repository.links.html.href),
                fields=[
                    EmbedField(name="Source Repository", value=_repository_link(event.repository), inline=True),
                    EmbedField(name="Forked Repository", value=_repository_link(event.fork), inline=True),
                ],
            )
        ],
    )


Transformer = Callable[[Mapping[str, Any]], DiscordMessage]

# Every kind except UNKNOWN must have an entry here
TRANSFORMERS: Dict[EventKind, Transformer] = {
    EventKind.REPOSITORY_PUSH: transform_push,
    EventKind.PULL_REQUEST_CREATED: partial(transform_pull_request, action="created"),
    EventKind.PULL_REQUEST_MERGED: partial(transform_pull_request, action="merged"),
    EventKind.PULL_REQUEST_DECLINED: partial(transform_pull_request, action="declined"),
    EventKind.REPOSITORY_FORK: transform_fork,
}


def transform(kind: EventKind, payload: Mapping[str, Any]) -> DiscordMessage:
    """Dispatch a classified payload to its transformer"""
    try:
        transformer = TRANSFORMERS[kind]
    except KeyError:
        raise ValueError(f"No transformer registered for event kind: {kind}") from None
    return transformer(payload)
