"""Tests for OAuth 1.0a HMAC-SHA256 signing."""

import base64
import hashlib
import hmac

from conftest import ACCOUNT_ID, BASE_URL, parse_auth_header
from servers.netsuite_auth import Credentials, OAuthSigner

NONCE = "abc123"
TIMESTAMP = 1700000000

GET_RECORD_BASE_STRING = (
    "GET&https%3A%2F%2F1234567.suitetalk.api.netsuite.com%2Fservices%2Frest%2Frecord%2Fv1%2Fcustomer%2F42"
    "&expandSubResources%3Dtrue%26oauth_consumer_key%3Dck%26oauth_nonce%3Dabc123"
    "%26oauth_signature_method%3DHMAC-SHA256%26oauth_timestamp%3D1700000000"
    "%26oauth_token%3Dtk%26oauth_version%3D1.0"
)

SUITEQL_BASE_STRING = (
    "POST&https%3A%2F%2F1234567.suitetalk.api.netsuite.com%2Fservices%2Frest%2Fquery%2Fv1%2Fsuiteql"
    "&limit%3D100%26oauth_consumer_key%3Dck%26oauth_nonce%3Dabc123"
    "%26oauth_signature_method%3DHMAC-SHA256%26oauth_timestamp%3D1700000000"
    "%26oauth_token%3Dtk%26oauth_version%3D1.0%26offset%3D0"
)


def expected_signature(base_string, key="cs&ts"):
    digest = hmac.new(key.encode(), base_string.encode(), hashlib.sha256).digest()
    return base64.b64encode(digest).decode()


def test_signature_over_query_parameters(credentials):
    url = f"{BASE_URL}/services/rest/record/v1/customer/42?expandSubResources=true"
    header = OAuthSigner(credentials).authorization_header("GET", url, nonce=NONCE, timestamp=TIMESTAMP)
    assert parse_auth_header(header)["oauth_signature"] == expected_signature(GET_RECORD_BASE_STRING)


def test_suiteql_signature_sorts_paging_around_oauth_params(credentials):
    url = f"{BASE_URL}/services/rest/query/v1/suiteql?limit=100&offset=0"
    header = OAuthSigner(credentials).authorization_header("post", url, nonce=NONCE, timestamp=TIMESTAMP)
    assert parse_auth_header(header)["oauth_signature"] == expected_signature(SUITEQL_BASE_STRING)


def test_header_is_deterministic_for_fixed_nonce_and_timestamp(credentials):
    signer = OAuthSigner(credentials)
    url = f"{BASE_URL}/services/rest/record/v1/customer/42"
    first = signer.authorization_header("GET", url, nonce=NONCE, timestamp=TIMESTAMP)
    second = signer.authorization_header("GET", url, nonce=NONCE, timestamp=TIMESTAMP)
    assert first == second


def test_header_layout(credentials):
    header = OAuthSigner(credentials).authorization_header("POST", f"{BASE_URL}/services/rest/record/v1/customer")
    assert header.startswith("OAuth ")
    assert header.endswith(f', realm="{ACCOUNT_ID}"')
    assert header.count("oauth_signature=") == 1
    assert header.count("realm=") == 1

    params = parse_auth_header(header)
    assert params["oauth_consumer_key"] == "ck"
    assert params["oauth_signature_method"] == "HMAC-SHA256"
    assert params["oauth_version"] == "1.0"
    assert params["oauth_token"] == "tk"
    assert params["realm"] == ACCOUNT_ID
    assert params["oauth_timestamp"].isdigit()


def test_fresh_nonce_per_call(credentials):
    signer = OAuthSigner(credentials)
    url = f"{BASE_URL}/services/rest/record/v1/metadata-catalog/"
    headers = [parse_auth_header(signer.authorization_header("GET", url)) for _ in range(5)]
    pairs = {(h["oauth_nonce"], h["oauth_timestamp"]) for h in headers}
    signatures = {h["oauth_signature"] for h in headers}
    assert len(pairs) == 5
    assert len(signatures) == 5


def test_missing_credentials_still_sign():
    header = OAuthSigner(Credentials(account_id="999")).authorization_header(
        "GET", "https://999.suitetalk.api.netsuite.com/x", nonce=NONCE, timestamp=TIMESTAMP
    )
    params = parse_auth_header(header)
    assert params["oauth_consumer_key"] == ""
    assert "oauth_token" not in params
    assert params["realm"] == "999"
    base = (
        "GET&https%3A%2F%2F999.suitetalk.api.netsuite.com%2Fx"
        "&oauth_consumer_key%3D%26oauth_nonce%3Dabc123%26oauth_signature_method%3DHMAC-SHA256"
        "%26oauth_timestamp%3D1700000000%26oauth_version%3D1.0"
    )
    assert params["oauth_signature"] == expected_signature(base, key="&")
