"""
Unit tests for the secret-backed database configuration loader.
"""

import json
from unittest.mock import Mock

import boto3
import pytest
from aws_lambda_powertools.utilities.parameters import SecretsProvider
from aws_lambda_powertools.utilities.parameters.exceptions import GetParameterError, TransformParameterError
from moto import mock_aws

from storefront.handlers.utils.db_configuration import DatabaseConfigError, load_db_configuration

SECRET_NAME = "storefront/db"


def _provider_returning(value) -> Mock:
    provider = Mock(spec=SecretsProvider)
    provider.get.return_value = value
    return provider


class TestLoadDbConfiguration:
    """Test cases with a stubbed secrets provider."""

    def test_valid_secret(self, db_secret):
        provider = _provider_returning(db_secret)

        config = load_db_configuration(SECRET_NAME, provider=provider)

        provider.get.assert_called_once_with(SECRET_NAME, transform="json")
        assert config.host == db_secret["host"]
        assert config.user == "store_app"

    def test_missing_fields_are_fatal(self):
        provider = _provider_returning({"host": "db", "username": "app"})

        with pytest.raises(DatabaseConfigError) as exc_info:
            load_db_configuration(SECRET_NAME, provider=provider)

        assert "password" in str(exc_info.value)

    def test_unreadable_secret(self):
        provider = Mock(spec=SecretsProvider)
        provider.get.side_effect = GetParameterError("ResourceNotFoundException")

        with pytest.raises(DatabaseConfigError):
            load_db_configuration(SECRET_NAME, provider=provider)

    def test_secret_not_json(self):
        provider = Mock(spec=SecretsProvider)
        provider.get.side_effect = TransformParameterError("Expecting value")

        with pytest.raises(DatabaseConfigError):
            load_db_configuration(SECRET_NAME, provider=provider)

    def test_secret_not_an_object(self):
        provider = _provider_returning(["host", "user"])

        with pytest.raises(DatabaseConfigError):
            load_db_configuration(SECRET_NAME, provider=provider)


class TestLoadDbConfigurationFromSecretsManager:
    """Test cases against a mocked AWS Secrets Manager."""

    @pytest.fixture
    def secrets_client(self):
        with mock_aws():
            yield boto3.client("secretsmanager", region_name="us-east-1")

    def test_secret_string(self, secrets_client, db_secret):
        secrets_client.create_secret(Name=SECRET_NAME, SecretString=json.dumps(db_secret))

        config = load_db_configuration(SECRET_NAME, provider=SecretsProvider(boto3_client=secrets_client))

        assert config.host == db_secret["host"]
        assert config.database == "storedb"
        assert config.port == 3306

    def test_secret_binary(self, secrets_client):
        payload = {"host": "db.internal", "username": "app", "password": "pw", "port": "3307"}
        secrets_client.create_secret(Name=SECRET_NAME, SecretBinary=json.dumps(payload).encode("utf-8"))

        config = load_db_configuration(SECRET_NAME, provider=SecretsProvider(boto3_client=secrets_client))

        assert config.host == "db.internal"
        assert config.port == 3307

    def test_missing_secret(self, secrets_client):
        with pytest.raises(DatabaseConfigError):
            load_db_configuration("does-not-exist", provider=SecretsProvider(boto3_client=secrets_client))
