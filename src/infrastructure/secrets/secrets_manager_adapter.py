"""
Infrastructure adapter: AWS Secrets Manager → ISecretStore.

load_into_env() is called once at startup, before ServiceConfig() is built and
reads OPENAI_API_KEY / TARGET_SITE_* / WEBHOOK_JWT_SECRET, so credentials can
live in a secret instead of the environment or source.
"""

import json
import os
from typing import Any, Optional

import boto3

from src.domain.ports.secret_store_port import ISecretStore


class SecretsManagerAdapter(ISecretStore):
    """Fetches and deserializes secrets from AWS Secrets Manager."""

    def __init__(self, region: Optional[str] = None, client: Any = None) -> None:
        self._client = client or boto3.client(
            "secretsmanager",
            region_name=region or os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
        )

    def get_secret(self, secret_id: str) -> dict:
        """Fetch and deserialize a JSON secret by name or ARN."""
        response = self._client.get_secret_value(SecretId=secret_id)
        return json.loads(response["SecretString"])

    def load_into_env(self, secret_id: str) -> None:
        """Inject all key-value pairs of a JSON secret into os.environ.

        Values already present in the environment are overwritten.
        """
        secrets = self.get_secret(secret_id)
        for key, value in secrets.items():
            os.environ[key] = str(value)
