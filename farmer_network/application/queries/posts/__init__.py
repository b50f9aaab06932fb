"""Post and comment queries."""

from farmer_network.application.queries.posts.list_posts import (
    ListPostsQuery,
    ListPostsHandler,
    PostView,
)
from farmer_network.application.queries.posts.list_comments import (
    ListCommentsQuery,
    ListCommentsHandler,
    CommentView,
)

__all__ = [
    "ListPostsQuery",
    "ListPostsHandler",
    "PostView",
    "ListCommentsQuery",
    "ListCommentsHandler",
    "CommentView",
]
