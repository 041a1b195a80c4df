"""Get comment thread use case."""

from pydantic import BaseModel, Field

from comet.domain.service import CommentNode, CommentService, CommentTreeBuilder
from comet.domain.value import AreaKey, Caller

from .get_comments import CommentItem


class CommentNodeResponse(BaseModel):
    """Comment node in the reply tree."""

    comment: CommentItem
    replies: list["CommentNodeResponse"]
    orphan: bool = False

    @classmethod
    def from_domain(cls, node: CommentNode) -> "CommentNodeResponse":
        return cls(
            comment=CommentItem.from_domain(node.comment),
            replies=[cls.from_domain(reply) for reply in node.replies],
            orphan=node.orphan,
        )


class GetThreadRequest(BaseModel):
    """Get thread request."""

    area_key: str
    caller: Caller = Field(default_factory=Caller.anonymous)


class GetThreadResponse(BaseModel):
    """Get thread response.

    ``orphans`` is only filled for the administrator, and only when
    exposing them is enabled.
    """

    area_key: str
    roots: list[CommentNodeResponse]
    orphans: list[CommentNodeResponse]
    total: int


class GetThreadUseCase:
    """Use case for reading an area's comments as reply trees."""

    def __init__(
        self,
        comment_service: CommentService,
        tree_builder: CommentTreeBuilder,
        expose_orphans_to_admin: bool = True,
    ) -> None:
        """Initialize get thread use case.

        Args:
            comment_service: Comment domain service
            tree_builder: Flat list to tree assembly
            expose_orphans_to_admin: Whether the admin sees orphaned comments
        """
        self.comment_service = comment_service
        self.tree_builder = tree_builder
        self.expose_orphans_to_admin = expose_orphans_to_admin

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Args:
            request: Get thread request with area key and caller

        Returns:
            Root threads in chronological order, replies nested below
        """
        area_key = AreaKey.parse(request.area_key)

        comments = await self.comment_service.list_by_area(area_key, request.caller)
        tree = self.tree_builder.build(comments)

        orphans = []
        if request.caller.is_admin and self.expose_orphans_to_admin:
            orphans = [CommentNodeResponse.from_domain(node) for node in tree.orphans]

        return GetThreadResponse(
            area_key=area_key.root,
            roots=[CommentNodeResponse.from_domain(node) for node in tree.roots],
            orphans=orphans,
            total=tree.total,
        )
