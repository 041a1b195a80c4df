"""Comment use cases."""

from .get_comments import (
    CommentItem,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from .get_thread import (
    CommentNodeResponse,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
)
from .like_comment import LikeCommentRequest, LikeCommentResponse, LikeCommentUseCase
from .post_comment import PostCommentRequest, PostCommentResponse, PostCommentUseCase
from .toggle_comment_flags import (
    ToggleCommentHiddenResponse,
    ToggleCommentHiddenUseCase,
    ToggleCommentPinResponse,
    ToggleCommentPinUseCase,
    ToggleCommentRequest,
)

__all__ = [
    "CommentItem",
    "CommentNodeResponse",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "LikeCommentRequest",
    "LikeCommentResponse",
    "LikeCommentUseCase",
    "PostCommentRequest",
    "PostCommentResponse",
    "PostCommentUseCase",
    "ToggleCommentHiddenResponse",
    "ToggleCommentHiddenUseCase",
    "ToggleCommentPinResponse",
    "ToggleCommentPinUseCase",
    "ToggleCommentRequest",
]
