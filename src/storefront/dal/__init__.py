"""
Data Access Layer (DAL) for the storefront.

This module provides the collaborator interfaces the logic layer depends on and
the factory that wires them to the store database.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Iterable, Protocol, Union, runtime_checkable

from storefront.handlers.models.db_configuration import DatabaseConfig
from storefront.models.product import Product


@runtime_checkable
class CatalogLookup(Protocol):
    """Resolves product identifiers to their current prices."""

    def get_prices(self, product_ids: Iterable[Union[int, str]]) -> list[Product]:
        """Return the known products among ``product_ids``; unknown ids are omitted."""
        ...

    def list_products(self) -> list[Product]:
        """Return the full catalog."""
        ...


@runtime_checkable
class OrderStore(Protocol):
    """Persists finalized orders."""

    def create_order_in_db(self, total_amount: Decimal) -> Union[int, str]:
        """Insert a new order and return its assigned identifier."""
        ...


class BaseDalHandler(ABC):
    """Abstract base class for a store backend serving both collaborators."""

    @abstractmethod
    def get_prices(self, product_ids: Iterable[Union[int, str]]) -> list[Product]:
        """Return the known products among ``product_ids``."""
        pass

    @abstractmethod
    def list_products(self) -> list[Product]:
        """Return the full catalog."""
        pass

    @abstractmethod
    def create_order_in_db(self, total_amount: Decimal) -> Union[int, str]:
        """Insert a new order and return its assigned identifier."""
        pass


def get_dal_handler(
    db_config: DatabaseConfig,
    drivername: str = 'mysql+pymysql',
    connection_limit: int = 5,
    pool_timeout_seconds: int = 900,
) -> BaseDalHandler:
    """
    Factory function to get the store DAL handler.

    Args:
        db_config: Database connection parameters
        drivername: SQLAlchemy drivername
        connection_limit: Connection pool capacity
        pool_timeout_seconds: How long a checkout waits for a free connection

    Returns:
        DAL handler bound to a freshly created connection pool
    """
    # Import here to avoid circular imports
    from storefront.dal.db_handler import SqlDalHandler, create_db_engine

    engine = create_db_engine(
        db_config,
        drivername=drivername,
        pool_size=connection_limit,
        pool_timeout=pool_timeout_seconds,
    )
    return SqlDalHandler(engine)


__all__ = [
    'BaseDalHandler',
    'CatalogLookup',
    'OrderStore',
    'get_dal_handler',
]
