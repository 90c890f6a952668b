"""Resource clients, one per Pipedrive collection."""

from .activities import Activities
from .deal_fields import DealFields
from .deals import Deals
from .filters import Filters
from .notes import Notes
from .organizations import Organizations
from .persons import Persons
from .products import Products
from .search_results import SearchResults
from .stages import Stages

__all__ = [
    "Activities",
    "DealFields",
    "Deals",
    "Filters",
    "Notes",
    "Organizations",
    "Persons",
    "Products",
    "SearchResults",
    "Stages",
]
