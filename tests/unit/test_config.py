import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from employee_directory.config import DirectoryConfig


class TestDirectoryConfig:
    """Test cases for DirectoryConfig."""

    def test_default_config(self):
        """Test default configuration values."""
        with patch.dict(os.environ, {"AWS_REGION": "us-west-2", "ENVIRONMENT": "dev"}):
            os.environ.pop("DIRECTORY_PAGE_SIZE", None)
            config = DirectoryConfig()

            assert config.region_name == "us-west-2"
            assert config.max_pool_connections == 50
            assert config.retries == 3
            assert config.timeout_seconds == 30.0
            assert config.environment == "dev"
            assert config.page_size == 20

    def test_config_from_env_vars(self):
        """Test configuration from environment variables."""
        env_vars = {
            "AWS_ACCESS_KEY_ID": "test_key",
            "AWS_SECRET_ACCESS_KEY": "test_secret",
            "AWS_REGION": "eu-west-1",
            "DYNAMODB_ENDPOINT_URL": "http://localhost:8000",
            "DYNAMODB_TABLE_PREFIX": "hr",
            "ENVIRONMENT": "staging",
            "DIRECTORY_PAGE_SIZE": "5"
        }

        with patch.dict(os.environ, env_vars):
            config = DirectoryConfig.from_env()

            assert config.aws_access_key_id == "test_key"
            assert config.aws_secret_access_key == "test_secret"
            assert config.region_name == "eu-west-1"
            assert config.endpoint_url == "http://localhost:8000"
            assert config.table_prefix == "hr"
            assert config.environment == "staging"
            assert config.page_size == 5

    def test_table_name_generation(self):
        """Test table name generation with prefix and environment."""
        config = DirectoryConfig(table_prefix="hr", environment="dev")

        assert config.get_table_name("employees") == "hr_dev_employees"

    def test_table_name_generation_prod(self):
        """Production tables carry no environment segment."""
        config = DirectoryConfig(table_prefix="hr", environment="prod")

        assert config.get_table_name("employees") == "hr_employees"

    def test_table_name_generation_no_prefix(self):
        config = DirectoryConfig(table_prefix="", environment="test")

        assert config.get_table_name("departments") == "test_departments"

    def test_invalid_environment(self):
        with pytest.raises(ValidationError, match="Environment must be one of"):
            DirectoryConfig(environment="qa")

    def test_invalid_page_size(self):
        with pytest.raises(ValidationError, match="Page size must be at least 1"):
            DirectoryConfig(page_size=0)

    def test_local_development_config(self):
        config = DirectoryConfig.for_local_development()

        assert config.endpoint_url == "http://localhost:8000"
        assert config.aws_access_key_id == "local"
        assert config.environment == "dev"
        assert config.enable_debug_logging is True
