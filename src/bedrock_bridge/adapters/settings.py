"""adapters.settings

Environment-driven configuration for the Bedrock adapter.

Values are read from the process environment after loading a ``.env`` file,
and turned into a configured ``bedrock-runtime`` client. Retries and timeouts
are left to botocore.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Literal

import boto3
from botocore.config import Config
from dotenv import load_dotenv
from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from bedrock_bridge.bedrockclient.client import ConverseTransport

DEFAULT_MODEL = 'amazon.titan-text-lite-v1'


class BedrockSettings(BaseModel):
    """Connection settings for the ``bedrock-runtime`` service."""

    region_name: str | None = Field(None, description='AWS region; boto3 default chain when unset')
    profile_name: str | None = Field(None, description='Named AWS profile')
    endpoint_url: str | None = Field(None, description='Override endpoint (VPC endpoints, local stubs)')
    model_id: str = Field(DEFAULT_MODEL, min_length=1)
    max_attempts: int = Field(3, ge=1, description='Total attempts, handled by botocore')
    retry_mode: Literal['legacy', 'standard', 'adaptive'] = 'standard'
    read_timeout: float = Field(60.0, gt=0.0, description='Socket read timeout (seconds)')

    model_config = {'frozen': True, 'protected_namespaces': ()}

    @classmethod
    def from_env(cls) -> BedrockSettings:
        """Build settings from ``BEDROCK_*`` / ``AWS_*`` environment variables."""
        load_dotenv()
        values: dict[str, str] = {}
        env_map = {
            'region_name': os.getenv('AWS_REGION') or os.getenv('AWS_DEFAULT_REGION'),
            'profile_name': os.getenv('AWS_PROFILE'),
            'endpoint_url': os.getenv('BEDROCK_ENDPOINT_URL'),
            'model_id': os.getenv('BEDROCK_MODEL_ID'),
            'max_attempts': os.getenv('BEDROCK_MAX_ATTEMPTS'),
            'retry_mode': os.getenv('BEDROCK_RETRY_MODE'),
            'read_timeout': os.getenv('BEDROCK_READ_TIMEOUT'),
        }
        for field, value in env_map.items():
            if value:
                values[field] = value
        return cls.model_validate(values)

    def make_client(self) -> ConverseTransport:
        """Create a ``bedrock-runtime`` client from these settings."""
        session = boto3.Session(profile_name=self.profile_name, region_name=self.region_name)
        return session.client(
            'bedrock-runtime',
            endpoint_url=self.endpoint_url,
            config=Config(
                retries={'total_max_attempts': self.max_attempts, 'mode': self.retry_mode},
                read_timeout=self.read_timeout,
            ),
        )
