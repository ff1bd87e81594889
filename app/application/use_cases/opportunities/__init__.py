"""Use cases for opportunities and the applications they receive."""

from .applications import (
    list_my_applications,
    list_opportunity_applications,
    update_application_status,
)
from .apply_to_opportunity import apply_to_opportunity
from .create_opportunity import create_opportunity
from .delete_opportunity import delete_opportunity
from .get_opportunity import get_opportunity, get_owned_opportunity
from .list_opportunities import list_opportunities
from .update_opportunity import update_opportunity

__all__ = [
    "apply_to_opportunity",
    "create_opportunity",
    "delete_opportunity",
    "get_opportunity",
    "get_owned_opportunity",
    "list_my_applications",
    "list_opportunities",
    "list_opportunity_applications",
    "update_application_status",
    "update_opportunity",
]
