import pytest
from pydantic import ValidationError

from user_data.config import Settings


class TestSettings:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.delenv("SERVICE_NAME", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("REGION", "eu-central-1")
        monkeypatch.setenv("TABLE_NAME", "user-data")

        settings = Settings(_env_file=None)

        assert settings.region == "eu-central-1"
        assert settings.table_name == "user-data"
        assert settings.aws_endpoint_url is None
        assert settings.service_name == "user-data-api"
        assert settings.log_level == "INFO"

    def test_endpoint_override(self, monkeypatch):
        monkeypatch.setenv("REGION", "us-east-1")
        monkeypatch.setenv("TABLE_NAME", "user-data")
        monkeypatch.setenv("AWS_ENDPOINT_URL", "http://localhost:4566")

        settings = Settings(_env_file=None)

        assert settings.aws_endpoint_url == "http://localhost:4566"

    @pytest.mark.parametrize("missing", ["REGION", "TABLE_NAME"])
    def test_missing_required_setting_raises_error(self, monkeypatch, missing):
        monkeypatch.setenv("REGION", "us-east-1")
        monkeypatch.setenv("TABLE_NAME", "user-data")
        monkeypatch.delenv(missing)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize("empty", ["REGION", "TABLE_NAME"])
    def test_empty_required_setting_raises_error(self, monkeypatch, empty):
        monkeypatch.setenv("REGION", "us-east-1")
        monkeypatch.setenv("TABLE_NAME", "user-data")
        monkeypatch.setenv(empty, "")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize("region", ["us-gov-west-1", "ap-southeast-2", "cn-north-1"])
    def test_accepts_region_names(self, monkeypatch, region):
        monkeypatch.setenv("REGION", region)
        monkeypatch.setenv("TABLE_NAME", "user-data")

        assert Settings(_env_file=None).region == region

    @pytest.mark.parametrize("region", ["not a region!", "US-EAST-1", "us-east", "localhost"])
    def test_invalid_region_raises_error(self, monkeypatch, region):
        monkeypatch.setenv("REGION", region)
        monkeypatch.setenv("TABLE_NAME", "user-data")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
