"""Use cases for the shared resource library."""

from .create_resource import create_resource
from .delete_resource import delete_resource
from .get_resource import get_owned_resource, get_resource, view_resource
from .list_resources import list_popular_resources, list_resources
from .update_resource import update_resource

__all__ = [
    "create_resource",
    "delete_resource",
    "get_owned_resource",
    "get_resource",
    "list_popular_resources",
    "list_resources",
    "update_resource",
    "view_resource",
]
