"""
OAuth 1.0a request signing (HMAC-SHA256) for the NetSuite REST API.

NetSuite Token-Based Authentication expects a standard OAuth 1.0a header
with an extra ``realm`` parameter naming the account. The realm is appended
after signing and is not part of the signature.
"""
from typing import Optional

from oauthlib.oauth1 import SIGNATURE_HMAC_SHA256, Client
from pydantic import BaseModel, ConfigDict


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    account_id: str
    consumer_key: Optional[str] = None
    consumer_secret: Optional[str] = None
    token_key: Optional[str] = None
    token_secret: Optional[str] = None


class OAuthSigner:
    """Signs single requests with the process-wide credentials."""

    def __init__(self, credentials: Credentials):
        self.credentials = credentials

    def oauth_client(self, nonce: Optional[str] = None, timestamp: Optional[int] = None) -> Client:
        # missing keys sign as empty strings; NetSuite rejects the request later
        return Client(
            self.credentials.consumer_key or "",
            client_secret=self.credentials.consumer_secret or "",
            resource_owner_key=self.credentials.token_key or None,
            resource_owner_secret=self.credentials.token_secret or "",
            signature_method=SIGNATURE_HMAC_SHA256,
            nonce=nonce,
            timestamp=str(timestamp) if timestamp is not None else None,
        )

    def authorization_header(
        self,
        method: str,
        url: str,
        nonce: Optional[str] = None,
        timestamp: Optional[int] = None,
    ) -> str:
        """
        Returns the Authorization header value for one request.

        A fresh nonce and timestamp are generated on every call unless given
        explicitly, so two headers for the same request never match.
        """
        _, headers, _ = self.oauth_client(nonce, timestamp).sign(url, http_method=method.upper())
        return f'{headers["Authorization"]}, realm="{self.credentials.account_id}"'
