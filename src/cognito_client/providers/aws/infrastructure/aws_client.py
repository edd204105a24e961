"""AWS client wrapper with additional functionality."""

from typing import Any, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ProfileNotFound

from cognito_client.config.schemas.app_schema import AWSConfig
from cognito_client.domain.base.ports import ConfigurationPort, LoggingPort
from cognito_client.providers.aws.exceptions.aws_exceptions import AWSConfigurationError

DEFAULT_REGION = "us-east-1"


class AWSClient:
    """Wrapper for AWS service clients used by the plugin."""

    def __init__(self, config: ConfigurationPort, logger: LoggingPort) -> None:
        """
        Initialize AWS client wrapper.

        Args:
            config: Configuration port for accessing configuration
            logger: Logger for logging messages

        Raises:
            AWSConfigurationError: If the boto3 session cannot be created
        """
        self._config_manager = config
        self._logger = logger
        self._aws_config: AWSConfig = config.get_aws_config()

        self.region_name = self._aws_config.region or DEFAULT_REGION
        self.profile_name = self._aws_config.profile
        self.endpoint_url = self._aws_config.endpoint_url

        self._logger.debug("AWS client region determined: %s", self.region_name)

        # Retries are delegated to botocore
        self.boto_config = Config(
            region_name=self.region_name,
            retries={
                "max_attempts": self._aws_config.max_retries,
                "mode": self._aws_config.retry_mode,
            },
            connect_timeout=self._aws_config.connect_timeout,
            read_timeout=self._aws_config.read_timeout,
        )

        try:
            self.session = boto3.Session(
                region_name=self.region_name, profile_name=self.profile_name
            )
        except ProfileNotFound as e:
            raise AWSConfigurationError(f"AWS profile not found: {self.profile_name}") from e
        except BotoCoreError as e:
            raise AWSConfigurationError(f"AWS client initialization failed: {e}") from e

        self._cognito_idp_client: Optional[Any] = None

        self._logger.info(
            "AWS client initialized with region: %s, profile: %s, retries: %d (%s), timeouts: connect=%ds, read=%ds",
            self.region_name,
            self.profile_name or "default",
            self._aws_config.max_retries,
            self._aws_config.retry_mode,
            self._aws_config.connect_timeout,
            self._aws_config.read_timeout,
        )

    @property
    def cognito_idp_client(self):
        """Lazy initialization of Cognito Identity Provider client."""
        if self._cognito_idp_client is None:
            self._logger.debug("Initializing cognito-idp client on first use")
            kwargs: dict[str, Any] = {"config": self.boto_config}
            if self.endpoint_url:
                kwargs["endpoint_url"] = self.endpoint_url
            self._cognito_idp_client = self.session.client("cognito-idp", **kwargs)
        return self._cognito_idp_client
