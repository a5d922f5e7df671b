# ABOUTME: Developer-authenticated identity flow for Cognito Identity Pools
# ABOUTME: Exchanges an authoritative user property for temporary AWS credentials

"""
Cognito developer-authenticated identity client.

The handshake has two steps:

1. GetOpenIdTokenForDeveloperIdentity trades an authoritative property (a
   verified email, an account id) for an identity id and a short-lived token.
2. GetCredentialsForIdentity trades that token for temporary AWS credentials.

Remote errors from either step propagate unchanged; nothing is retried or
cached here.
"""

import asyncio
import logging
from typing import Any

import boto3

from cognito_developer_auth.config import ClientConfig
from cognito_developer_auth.exceptions import ArgumentError
from cognito_developer_auth.health import Readiness, ReadinessProbe, ping

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 10


class CognitoDeveloperAuth:
    def __init__(self, options, client=None, http_session=None, probe_on_init=True):
        """Validate options, create the Cognito Identity client, start the readiness probe.

        Args:
            options: ClientConfig or a dict of options accepted by ClientConfig.from_dict
            client: Optional pre-built cognito-identity client
            http_session: Optional requests.Session used for the liveness probe
            probe_on_init: Start the background readiness probe after construction
        """
        if isinstance(options, ClientConfig):
            options = options.to_dict()
        self.config = ClientConfig.from_dict(options)

        self._client = client if client is not None else self._create_client()
        self._http = http_session
        self._probe = ReadinessProbe()

        if probe_on_init:
            self._probe.start(self._ping)

    def _create_client(self):
        session = boto3.Session(**self.config.session_kwargs())
        return session.client("cognito-identity", endpoint_url=self.config.endpoint_url)

    @property
    def client(self):
        return self._client

    @property
    def endpoint_url(self) -> str:
        return self._client.meta.endpoint_url

    @property
    def readiness(self) -> Readiness:
        """State of the construction-time probe; UNKNOWN until it settles."""
        return self._probe.state

    @property
    def is_ready(self) -> bool:
        return self.readiness is Readiness.READY

    def wait_until_ready(self, timeout: float | None = None) -> Readiness:
        """Block until the construction-time probe settles and return its outcome."""
        return self._probe.wait(timeout)

    def _ping(self) -> str:
        return ping(self.endpoint_url, session=self._http)

    async def health_check(self) -> str:
        """Probe GET /ping on the Cognito Identity endpoint and return the body text."""
        return await asyncio.to_thread(self._ping)

    async def _call(self, operation: str, **params) -> dict[str, Any]:
        logger.debug("Calling %s for identity pool %s", operation, self.config.identity_pool_id)
        method = getattr(self._client, operation)
        return await asyncio.to_thread(method, **params)

    def exchange_identity_token(self, authoritative_property: str):
        """Get an OpenID token for a developer-authenticated identity.

        Raises ArgumentError immediately, before returning an awaitable, when
        authoritative_property is empty. The awaitable resolves to the service
        response: {"IdentityId": ..., "Token": ..., ...}.
        """
        if not authoritative_property:
            raise ArgumentError("authoritative_property", "Argument Error - Must have Authoritative Property")

        return self._call(
            "get_open_id_token_for_developer_identity",
            IdentityPoolId=self.config.identity_pool_id,
            Logins={self.config.developer_provider_name: authoritative_property},
            TokenDuration=self.config.token_duration_seconds,
        )

    async def exchange_credentials(
        self, identity: dict[str, Any], custom_role_arn: str | None = None
    ) -> dict[str, Any]:
        """Get temporary credentials for an identity returned by exchange_identity_token.

        Returns {"IdentityId": ..., "Credentials": {"AccessKeyId", "SecretKey",
        "SessionToken", "Expiration"}}.
        """
        params = {
            "IdentityId": identity.get("IdentityId"),
            "Logins": {self.config.federation_provider_name: identity.get("Token")},
        }
        role_arn = custom_role_arn or identity.get("CustomRoleArn")
        if role_arn:
            params["CustomRoleArn"] = role_arn

        return await self._call("get_credentials_for_identity", **params)

    async def authorize(self, authoritative_property: str, custom_role_arn: str | None = None) -> dict[str, Any]:
        """Run both steps and return the identity and credentials merged into one dict."""
        identity = await self.exchange_identity_token(authoritative_property)
        credentials = await self.exchange_credentials(identity, custom_role_arn)
        return {**identity, **credentials}

    async def list_identities(
        self, max_results: int = DEFAULT_MAX_RESULTS, next_token: str | None = None
    ) -> dict[str, Any]:
        """List one page of enabled identities in the pool."""
        params = {
            "IdentityPoolId": self.config.identity_pool_id,
            "MaxResults": max_results,
            "HideDisabled": True,
        }
        if next_token:
            params["NextToken"] = next_token

        return await self._call("list_identities", **params)

    async def iter_identities(self, page_size: int = DEFAULT_MAX_RESULTS):
        """Yield every enabled identity in the pool, following NextToken across pages."""
        next_token = None
        while True:
            page = await self.list_identities(page_size, next_token)
            for identity in page.get("Identities", []):
                yield identity

            next_token = page.get("NextToken")
            if not next_token:
                break


def format_credential_process(credentials: dict[str, Any]) -> dict[str, Any]:
    """Format a credentials response for the AWS CLI credential_process protocol."""
    creds = credentials["Credentials"]
    expiration = creds["Expiration"]
    return {
        "Version": 1,
        "AccessKeyId": creds["AccessKeyId"],
        "SecretAccessKey": creds["SecretKey"],
        "SessionToken": creds["SessionToken"],
        "Expiration": expiration.isoformat() if hasattr(expiration, "isoformat") else expiration,
    }
