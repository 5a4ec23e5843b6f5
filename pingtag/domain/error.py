"""Domain layer errors.

Every tag registry operation either returns a value or raises exactly one of
the errors below. Callers render them; the domain never formats replies.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidTagNameError(DomainError):
    """Raised when a tag name is empty or too long."""

    def __init__(self, name: str, max_length: int):
        self.name = name
        self.max_length = max_length
        super().__init__(f"Tag name must be 1-{max_length} characters: {name!r}")


class DescriptionTooLongError(DomainError):
    """Raised when a tag description exceeds the configured bound."""

    def __init__(self, length: int, max_length: int):
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"Tag description is {length} characters, limit is {max_length}"
        )


class DuplicateTagError(DomainError):
    """Raised when a tag with the same case-insensitive name exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Tag already exists: {name}")


class QuotaExceededError(DomainError):
    """Raised when a creator already owns the maximum number of tags."""

    def __init__(self, creator_id: int, limit: int):
        self.creator_id = creator_id
        self.limit = limit
        super().__init__(f"User {creator_id} already created {limit} tags")


class TagNotFoundError(DomainError):
    """Raised when no tag matches the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Tag not found: {name}")


class AlreadySubscribedError(DomainError):
    """Raised when the subscriber is already on the tag."""

    def __init__(self, name: str, subscriber_id: int):
        self.name = name
        self.subscriber_id = subscriber_id
        super().__init__(f"User {subscriber_id} is already subscribed to {name}")


class ForbiddenError(DomainError):
    """Raised when a user attempts to delete a tag they don't own."""

    def __init__(self, name: str, requester_id: int):
        self.name = name
        self.requester_id = requester_id
        super().__init__(f"User {requester_id} is not allowed to delete tag {name}")


class CorruptStateError(DomainError):
    """Raised when persisted state matches neither the current nor the legacy schema."""

    def __init__(self, location: str, detail: str):
        self.location = location
        self.detail = detail
        super().__init__(f"Corrupt tag state in {location}: {detail}")


class StorageError(DomainError):
    """Raised when the tag document cannot be read or written.

    When raised after a mutation the in-memory registry already holds the
    change; disk may be behind memory until the next successful save.
    """

    def __init__(self, location: str, detail: str):
        self.location = location
        self.detail = detail
        super().__init__(f"Tag storage failure at {location}: {detail}")
