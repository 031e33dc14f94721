"""
Database configuration model.

Built once per process from the credentials secret and read-only afterwards.
"""

from typing import Annotated, Any, Dict

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

DEFAULT_DATABASE = 'storedb'
DEFAULT_PORT = 3306


class DatabaseConfig(BaseModel):
    """Connection parameters for the store database."""

    model_config = ConfigDict(frozen=True)

    host: Annotated[str, Field(
        min_length=1,
        description='Database host name'
    )]

    user: Annotated[str, Field(
        min_length=1,
        description='Database user name'
    )]

    password: Annotated[SecretStr, Field(
        description='Database password'
    )]

    database: Annotated[str, Field(
        min_length=1,
        description='Schema holding the products and orders tables'
    )] = DEFAULT_DATABASE

    port: Annotated[int, Field(
        ge=1,
        le=65535,
        description='Database port'
    )] = DEFAULT_PORT

    @field_validator('password')
    @classmethod
    def validate_password_present(cls, v: SecretStr) -> SecretStr:
        """Reject an empty password."""
        if not v.get_secret_value():
            raise ValueError('password must not be empty')
        return v

    @classmethod
    def from_secret(cls, secret: Dict[str, Any]) -> 'DatabaseConfig':
        """
        Map an RDS-style credentials secret onto the configuration.

        ``username`` wins over ``user`` and ``dbname`` over ``database``.
        """
        values: Dict[str, Any] = {
            'host': secret.get('host'),
            'user': secret.get('username') or secret.get('user'),
            'password': secret.get('password'),
            'database': secret.get('dbname') or secret.get('database') or DEFAULT_DATABASE,
        }
        if secret.get('port'):
            values['port'] = secret['port']
        return cls.model_validate(values)
