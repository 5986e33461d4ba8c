# bookstore/core/use_cases/__init__.py
"""
Core Use Cases (Application Logic).

Each use case represents a specific business action and receives the
storage gateway (or other ports) it needs through its constructor:

- ``PlaceOrder``: the Order Engine (stock-checked, atomic order creation).
- ``ComputeStatistics``: the Statistics Aggregator.
- ``BrowseTransactions``: order list / detail views.
- ``ManageGenres`` / ``ManageBooks``: the catalog.
- ``Authenticate``: registration, login, identity lookup.
"""

from .authenticate import Authenticate
from .browse_transactions import BrowseTransactions
from .compute_statistics import ComputeStatistics
from .manage_books import ManageBooks
from .manage_genres import ManageGenres
from .place_order import PlaceOrder

__all__ = [
    "Authenticate",
    "BrowseTransactions",
    "ComputeStatistics",
    "ManageBooks",
    "ManageGenres",
    "PlaceOrder",
]
