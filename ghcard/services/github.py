"""Card content for GitHub repository events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

from ghcard.schemas import EventEnvelope, MarkdownElement
from ghcard.services.markdown import sanitize_markdown

ABSENT = "无"
DEFAULT_ACTION_TEXT = "编辑"
NO_HEAD_COMMIT_MESSAGE = "Create/Delete/Update Branch (No head commit)"

JSONDict = dict[str, Any]

ACTION_TEXTS: Mapping[str, str] = {
    "created": "创建",
    "opened": "创建",
    "submitted": "创建",
    "closed": "关闭",
    "reopened": "重新打开",
    "labeled": "添加标签",
    "unlabeled": "移除标签",
    "assigned": "指派",
    "unassigned": "取消指派",
    "edited": "编辑",
    "deleted": "删除",
    "synchronize": "更新",
    "review_requested": "请求审核",
}


@dataclass
class CardContent:
    title: str
    elements: list[JSONDict] = field(default_factory=list)


Handler = Callable[[EventEnvelope, str], CardContent]


def action_text(action: str | None) -> str:
    """Display verb for a webhook ``action``; unknown verbs pass through."""
    if not action:
        return DEFAULT_ACTION_TEXT
    return ACTION_TEXTS.get(action, action)


def link(url: str, text: str | None = None) -> str:
    return f"[{url if text is None else text}]({url})"


def user_link(user: Mapping[str, Any] | None) -> str:
    if not user:
        return ABSENT
    url = user.get("html_url") or ""
    return link(url, user.get("login") or url)


def label_names(labels: Iterable[Any] | None) -> str:
    names = []
    for label in labels or ():
        name = label.get("name") if isinstance(label, Mapping) else label
        if name:
            names.append(str(name))
    return ", ".join(names) or ABSENT


def content_item(label: str, value: str | None) -> str:
    """``**label** value`` with the value sanitized, or the absent marker."""
    return f"**{label}** {sanitize_markdown(value) if value else ABSENT}"


def _markdown(*lines: str) -> JSONDict:
    return MarkdownElement(content="\n".join(lines)).model_dump()


def _render_push(envelope: EventEnvelope, _action: str) -> CardContent:
    head_commit = envelope.payload.get("head_commit") or {}
    server_url = envelope.server_url
    repository = envelope.repository
    branch = envelope.branch or ""
    tree_url = f"{server_url}/{repository}/tree/{branch}"

    commit_url = head_commit.get("url") or tree_url
    commit_message = head_commit.get("message") or NO_HEAD_COMMIT_MESSAGE
    actor = envelope.actor

    return CardContent(
        title="GitHub 代码提交",
        elements=[
            _markdown(
                content_item("提交链接：", link(commit_url)),
                content_item("代码分支：", link(tree_url, branch)),
                content_item("提交作者：", link(f"{server_url}/{actor}", actor)),
                content_item("提交信息：", commit_message),
            )
        ],
    )


def _render_tracked_item(kind: str, item: Mapping[str, Any], action: str) -> CardContent:
    """Shared layout of issues and pull requests."""
    milestone = item.get("milestone") or {}
    return CardContent(
        title=f"GitHub {kind} {action}：{item.get('title') or ABSENT}",
        elements=[
            _markdown(
                content_item("链接：", link(item["html_url"])),
                content_item("作者：", user_link(item["user"])),
                content_item("指派：", user_link(item.get("assignee"))),
                content_item("标签：", label_names(item.get("labels"))),
                content_item("里程碑：", milestone.get("title") or ABSENT),
                content_item("描述：", item.get("body") or ABSENT),
            )
        ],
    )


def _render_issues(envelope: EventEnvelope, action: str) -> CardContent:
    return _render_tracked_item("issue", envelope.payload["issue"], action)


def _render_pull_request(envelope: EventEnvelope, action: str) -> CardContent:
    return _render_tracked_item("PR", envelope.payload["pull_request"], action)


def _render_discussion(envelope: EventEnvelope, action: str) -> CardContent:
    discussion = envelope.payload["discussion"]
    return CardContent(
        title=f"GitHub 讨论 {action}：{discussion.get('title') or ABSENT}",
        elements=[
            _markdown(
                content_item("链接：", link(discussion["html_url"])),
                content_item("作者：", user_link(discussion["user"])),
                content_item("描述：", discussion.get("body") or ABSENT),
            )
        ],
    )


def _comment_lines(comment: Mapping[str, Any]) -> tuple[str, str]:
    return (
        content_item("链接：", link(comment["html_url"])),
        content_item("作者：", user_link(comment["user"])),
    )


def _render_issue_comment(envelope: EventEnvelope, _action: str) -> CardContent:
    payload = envelope.payload
    comment = payload["comment"]
    issue = payload.get("issue") or {}
    return CardContent(
        title=f"GitHub issue 评论：{issue.get('title') or '未知 issue'}",
        elements=[
            _markdown(
                *_comment_lines(comment),
                content_item("描述：", comment.get("body") or ABSENT),
            )
        ],
    )


def _render_discussion_comment(envelope: EventEnvelope, _action: str) -> CardContent:
    payload = envelope.payload
    comment = payload["comment"]
    discussion = payload.get("discussion") or {}
    return CardContent(
        title=f"GitHub 讨论评论：{discussion.get('title') or ABSENT}",
        elements=[
            _markdown(
                *_comment_lines(comment),
                content_item("描述：", comment.get("body") or ABSENT),
            )
        ],
    )


def _render_release(envelope: EventEnvelope, _action: str) -> CardContent:
    release = envelope.payload["release"]
    name = release.get("name") or release.get("tag_name") or ABSENT
    return CardContent(
        title=f"GitHub Release 发布：{name}",
        elements=[
            _markdown(
                content_item("链接：", link(release["html_url"])),
                content_item("作者：", user_link(release["author"])),
                content_item("描述：", release.get("body") or ABSENT),
            )
        ],
    )


def _render_pull_request_review_comment(envelope: EventEnvelope, _action: str) -> CardContent:
    payload = envelope.payload
    comment = payload["comment"]
    pull_request = payload["pull_request"]
    return CardContent(
        title=f"GitHub PR 代码评论：{pull_request.get('title') or '未知 PR'}",
        elements=[
            _markdown(
                *_comment_lines(comment),
                content_item(
                    "PR：",
                    link(pull_request["html_url"], f"#{pull_request['number']}"),
                ),
                content_item("评论：", comment.get("body") or ABSENT),
            )
        ],
    )


HANDLERS: dict[str, Handler] = {
    "push": _render_push,
    "issues": _render_issues,
    "pull_request": _render_pull_request,
    "discussion": _render_discussion,
    "issue_comment": _render_issue_comment,
    "discussion_comment": _render_discussion_comment,
    "release": _render_release,
    "pull_request_review_comment": _render_pull_request_review_comment,
}
