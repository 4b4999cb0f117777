"""Catalog of GitHub event types.

See https://docs.github.com/en/rest/using-the-rest-api/github-event-types
"""

from enum import StrEnum


class EventType(StrEnum):
    """Event kinds reported by the GitHub events API."""

    COMMIT_COMMENT = "CommitCommentEvent"
    CREATE = "CreateEvent"
    DELETE = "DeleteEvent"
    FORK = "ForkEvent"
    GOLLUM = "GollumEvent"
    ISSUE_COMMENT = "IssueCommentEvent"
    ISSUES = "IssuesEvent"
    MEMBER = "MemberEvent"
    PUBLIC = "PublicEvent"
    PULL_REQUEST = "PullRequestEvent"
    PULL_REQUEST_REVIEW = "PullRequestReviewEvent"
    PULL_REQUEST_REVIEW_COMMENT = "PullRequestReviewCommentEvent"
    PULL_REQUEST_REVIEW_THREAD = "PullRequestReviewThreadEvent"
    PUSH = "PushEvent"
    RELEASE = "ReleaseEvent"
    SPONSORSHIP = "SponsorshipEvent"
    WATCH = "WatchEvent"


EVENT_DESCRIPTIONS: dict[EventType, str] = {
    EventType.COMMIT_COMMENT: "A commit comment is created.",
    EventType.CREATE: "A Git branch or tag is created.",
    EventType.DELETE: "A Git branch or tag is deleted.",
    EventType.FORK: "A user forks a repository.",
    EventType.GOLLUM: "A wiki page is created or updated.",
    EventType.ISSUE_COMMENT: "Activity related to an issue or pull request comment.",
    EventType.ISSUES: "Activity related to an issue.",
    EventType.MEMBER: "Activity related to repository collaborators.",
    EventType.PUBLIC: "When a private repository is made public.",
    EventType.PULL_REQUEST: "Activity related to pull requests.",
    EventType.PULL_REQUEST_REVIEW: "Activity related to pull request reviews.",
    EventType.PULL_REQUEST_REVIEW_COMMENT: (
        "Activity related to pull request review comments in the pull request's unified diff."
    ),
    EventType.PULL_REQUEST_REVIEW_THREAD: (
        "Activity related to a comment thread on a pull request being marked as resolved or unresolved."
    ),
    EventType.PUSH: "One or more commits are pushed to a repository branch or tag.",
    EventType.RELEASE: "Activity related to a release.",
    EventType.SPONSORSHIP: "Activity related to a sponsorship listing.",
    EventType.WATCH: "When someone stars a repository.",
}


def is_known_event_type(value: str) -> bool:
    """Check whether a string names one of the catalogued event kinds."""
    return value in EventType._value2member_map_
