"""Post and comment commands."""

from .create_post import CreatePostCommand, CreatePostHandler, ImageUpload
from .delete_post import DeletePostCommand, DeletePostHandler
from .create_comment import CreateCommentCommand, CreateCommentHandler

__all__ = [
    "ImageUpload",
    "CreatePostCommand",
    "CreatePostHandler",
    "DeletePostCommand",
    "DeletePostHandler",
    "CreateCommentCommand",
    "CreateCommentHandler",
]
