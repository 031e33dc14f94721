"""
SQL implementation of the Data Access Layer (DAL).

This module implements the Catalog Lookup and the Order Store on top of a
SQLAlchemy engine whose connection pool is shared by every invocation of the
process. Each operation checks a connection out in a ``with`` block so it goes
back to the pool on every exit path.
"""

from decimal import Decimal
from typing import Iterable, Union

from sqlalchemy import insert, select
from sqlalchemy.engine import URL, Engine, create_engine
from sqlalchemy.exc import SQLAlchemyError

from storefront.dal import BaseDalHandler
from storefront.dal.schema import orders, products
from storefront.handlers.models.db_configuration import DatabaseConfig
from storefront.handlers.utils.observability import logger, tracer
from storefront.models.product import Product


def create_db_engine(
    db_config: DatabaseConfig,
    drivername: str = 'mysql+pymysql',
    pool_size: int = 5,
    pool_timeout: int = 900,
) -> Engine:
    """
    Create the process-wide engine and its bounded connection pool.

    No overflow connections are allowed; checkouts beyond ``pool_size`` queue
    until a connection is returned or ``pool_timeout`` elapses.
    """
    url = URL.create(
        drivername=drivername,
        username=db_config.user,
        password=db_config.password.get_secret_value(),
        host=db_config.host,
        port=db_config.port,
        database=db_config.database,
    )
    engine = create_engine(
        url,
        pool_size=pool_size,
        max_overflow=0,
        pool_timeout=pool_timeout,
        pool_pre_ping=True,
    )
    logger.debug('Database engine created', extra={
        'host': db_config.host,
        'database': db_config.database,
        'pool_size': pool_size,
    })
    return engine


class SqlDalHandler(BaseDalHandler):
    """SQLAlchemy implementation of the catalog and order store."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @tracer.capture_method
    def get_prices(self, product_ids: Iterable[Union[int, str]]) -> list[Product]:
        """
        Look up the current price of each known product.

        Args:
            product_ids: Distinct product identifiers referenced by a cart

        Returns:
            Products that exist; unknown ids are simply absent

        Raises:
            SQLAlchemyError: If the query fails
        """
        ids = list(product_ids)
        if not ids:
            return []

        statement = select(products.c.id, products.c.price).where(products.c.id.in_(ids))
        try:
            with self.engine.connect() as connection:
                rows = connection.execute(statement).all()
        except SQLAlchemyError as e:
            logger.error(f'Database error looking up prices: {type(e).__name__}', extra={
                'product_count': len(ids),
            })
            raise

        logger.debug(f'Resolved {len(rows)} of {len(ids)} products')
        return [Product(id=row.id, price=row.price) for row in rows]

    @tracer.capture_method
    def list_products(self) -> list[Product]:
        """
        Read the whole catalog.

        Raises:
            SQLAlchemyError: If the query fails
        """
        statement = select(products.c.id, products.c.name, products.c.price, products.c.image_url)
        try:
            with self.engine.connect() as connection:
                rows = connection.execute(statement).all()
        except SQLAlchemyError as e:
            logger.error(f'Database error listing products: {type(e).__name__}')
            raise

        tracer.put_annotation('products_listed', len(rows))
        return [
            Product(id=row.id, name=row.name, price=row.price, image_url=row.image_url)
            for row in rows
        ]

    @tracer.capture_method
    def create_order_in_db(self, total_amount: Decimal) -> Union[int, str]:
        """
        Insert a new order; the database assigns its id and creation timestamp.

        Args:
            total_amount: Computed order total

        Returns:
            Identifier of the inserted order

        Raises:
            SQLAlchemyError: If the insert fails
        """
        statement = insert(orders).values(total_amount=total_amount)
        try:
            with self.engine.begin() as connection:
                result = connection.execute(statement)
                order_id = result.inserted_primary_key[0]
        except SQLAlchemyError as e:
            logger.error(f'Database error creating order: {type(e).__name__}', extra={
                'total_amount': str(total_amount),
            })
            raise

        logger.info(f'Successfully created order in database: {order_id}')
        tracer.put_annotation('order_created', order_id)
        return order_id
