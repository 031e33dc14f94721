"""
Relational schema of the storefront database.
"""

from sqlalchemy import Column, DateTime, Integer, MetaData, Numeric, String, Table, func

metadata = MetaData()

products = Table(
    'products',
    metadata,
    Column('id', Integer, primary_key=True),
    Column('name', String(255)),
    Column('price', Numeric(10, 2), nullable=False),
    Column('image_url', String(1024)),
)

# created_at is assigned by the database, never by the caller
orders = Table(
    'orders',
    metadata,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('total_amount', Numeric(10, 2), nullable=False),
    Column('created_at', DateTime, nullable=False, server_default=func.now()),
)
