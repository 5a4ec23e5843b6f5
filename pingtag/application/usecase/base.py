"""Base use case."""

from pingtag.domain.service import TagService


class BaseUseCase:
    """Base for use cases driving the tag service.

    Subclasses implement ``execute``. Operations with inputs take a pydantic
    request model; every use case returns a pydantic response model.
    """

    def __init__(self, tag_service: TagService) -> None:
        """Initialize use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service
