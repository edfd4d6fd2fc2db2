"""
AWS Route53 provider implementation.

This module lists hosted zones and record sets through boto3. Retries are
left to botocore's own retry handling.
"""

import logging
from typing import Dict, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from .base_provider import DNSProvider
from ..core.exceptions import ApiError
from ..core.models import RecordCursor

logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-east-1"
DEFAULT_MAX_ATTEMPTS = 5


class Route53Provider(DNSProvider):
    """Route53 DNS provider implementation using boto3."""

    def __init__(self, config: Optional[Dict] = None, client=None):
        """
        Initialize Route53 provider.

        Args:
            config: Provider options (profile, region, max_attempts)
            client: Pre-built boto3 route53 client; built from config when None
        """
        self.config = config or {}
        self.profile = self.config.get("profile")
        self.region = self.config.get("region") or DEFAULT_REGION
        self.max_attempts = int(self.config.get("max_attempts", DEFAULT_MAX_ATTEMPTS))
        self.client = client if client is not None else self._create_client()

        logger.info(
            f"Route53 provider initialized (profile={self.profile or 'default'}, "
            f"region={self.region})"
        )

    def _create_client(self):
        """Create a route53 client for the configured profile and region."""
        try:
            session = boto3.Session(profile_name=self.profile, region_name=self.region)
            return session.client(
                "route53",
                config=Config(retries={"max_attempts": self.max_attempts, "mode": "standard"}),
            )
        except BotoCoreError as e:
            raise ApiError(f"Failed to create Route53 client: {e}") from e

    def list_hosted_zones(self, marker: Optional[str] = None) -> Dict:
        """List one page of hosted zones."""
        params = {}
        if marker:
            params["Marker"] = marker
        return self._call("list_hosted_zones", **params)

    def list_resource_record_sets(
        self, zone_id: str, start: Optional[RecordCursor] = None
    ) -> Dict:
        """List one page of record sets in a zone."""
        params = {"HostedZoneId": zone_id}
        if start is not None:
            params["StartRecordName"] = start.name
            if start.type:
                params["StartRecordType"] = start.type
            if start.identifier:
                params["StartRecordIdentifier"] = start.identifier
        return self._call("list_resource_record_sets", **params)

    def _call(self, operation: str, **params) -> Dict:
        """Invoke a client operation, raising ApiError on failure."""
        try:
            return getattr(self.client, operation)(**params)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            raise ApiError(f"Route53 {operation} failed: {e}", code=code) from e
        except BotoCoreError as e:
            raise ApiError(f"Route53 {operation} failed: {e}") from e
