"""Domain layer errors.

Every failure surfaced by the discussion engine is a DiscussionError
carrying an ErrorKind, so callers can tell them apart without parsing
messages. Storage exceptions never leave the domain services untranslated.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of discussion errors."""

    DISCUSSIONS_NOT_ENABLED = "discussions_not_enabled"
    THREAD_NOT_FOUND = "thread_not_found"
    THREAD_LOCKED = "thread_locked"
    COMMENT_NOT_FOUND = "comment_not_found"
    CONTENT_TOO_SHORT = "content_too_short"
    CONTENT_TOO_LONG = "content_too_long"
    MAX_NESTING_DEPTH = "max_nesting_depth"
    INSUFFICIENT_PERMISSION = "insufficient_permission"
    INVALID_VOTE_DIRECTION = "invalid_vote_direction"
    INTERNAL_FAILURE = "internal_failure"


class DomainError(Exception):
    """Base domain error."""

    pass


class DiscussionError(DomainError):
    """Base class for classified discussion errors."""

    kind: ErrorKind = ErrorKind.INTERNAL_FAILURE


class NotFoundError(DiscussionError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ThreadNotFoundError(NotFoundError):
    """Raised when an explicit thread lookup finds nothing."""

    kind = ErrorKind.THREAD_NOT_FOUND

    def __init__(self, identifier: str):
        super().__init__("thread", identifier)


class CommentNotFoundError(NotFoundError):
    """Raised when a referenced comment does not exist or is deleted."""

    kind = ErrorKind.COMMENT_NOT_FOUND

    def __init__(self, identifier: str):
        super().__init__("comment", identifier)


class DiscussionsNotEnabledError(DiscussionError):
    """Raised when the owning profile has discussions turned off."""

    kind = ErrorKind.DISCUSSIONS_NOT_ENABLED

    def __init__(self, profile_slug: str):
        self.profile_slug = profile_slug
        super().__init__(f"Discussions are not enabled for profile {profile_slug}")


class ThreadLockedError(DiscussionError):
    """Raised when creating a comment in a locked thread."""

    kind = ErrorKind.THREAD_LOCKED

    def __init__(self, thread_id: str):
        self.thread_id = thread_id
        super().__init__(f"Thread {thread_id} is locked")


class ContentTooShortError(DiscussionError):
    """Raised when comment content is below the minimum length."""

    kind = ErrorKind.CONTENT_TOO_SHORT

    def __init__(self, length: int, minimum: int):
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"Comment content is too short ({length} < {minimum} characters)"
        )


class ContentTooLongError(DiscussionError):
    """Raised when comment content exceeds the maximum length."""

    kind = ErrorKind.CONTENT_TOO_LONG

    def __init__(self, length: int, maximum: int):
        self.length = length
        self.maximum = maximum
        super().__init__(
            f"Comment content is too long ({length} > {maximum} characters)"
        )


class MaxNestingDepthError(DiscussionError):
    """Raised when a reply would exceed the maximum nesting depth."""

    kind = ErrorKind.MAX_NESTING_DEPTH

    def __init__(self, depth: int, maximum: int):
        self.depth = depth
        self.maximum = maximum
        super().__init__(f"Maximum nesting depth reached ({depth} > {maximum})")


class InsufficientPermissionError(DiscussionError):
    """Raised when the actor lacks author or moderator standing."""

    kind = ErrorKind.INSUFFICIENT_PERMISSION

    def __init__(self, action: str, resource_id: str, user_id: str):
        self.action = action
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(f"User {user_id} is not allowed to {action} {resource_id}")


class InvalidVoteDirectionError(DiscussionError):
    """Raised when a vote direction is not +1 or -1."""

    kind = ErrorKind.INVALID_VOTE_DIRECTION

    def __init__(self, direction: object):
        self.direction = direction
        super().__init__(f"Vote direction must be +1 or -1, got {direction!r}")


class InternalFailureError(DiscussionError):
    """Raised for unexpected storage or collaborator faults."""

    kind = ErrorKind.INTERNAL_FAILURE

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Internal failure during {operation}")
