"""
Storefront Lambda Service Package.

This package contains the serverless storefront backend, following a
three-layer architecture:

- handlers: Lambda entry points and request/response handling
- logic: order intake and catalog operations
- dal: data access layer for the relational store
- models: data models and schemas
"""

__version__ = "1.0.0"
