"""Resource board commands."""

from .create_resource import CreateResourceCommand, CreateResourceHandler
from .update_resource import UpdateResourceCommand, UpdateResourceHandler
from .delete_resource import DeleteResourceCommand, DeleteResourceHandler

__all__ = [
    "CreateResourceCommand",
    "CreateResourceHandler",
    "UpdateResourceCommand",
    "UpdateResourceHandler",
    "DeleteResourceCommand",
    "DeleteResourceHandler",
]
