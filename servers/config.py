import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from servers.netsuite_auth import Credentials

load_dotenv()

DEFAULT_ACCOUNT_ID = "6736762"
DEFAULT_API_HOST = "suitetalk.api.netsuite.com"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _timeout_from_env(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logging.getLogger("netsuite_mcp").warning("Ignoring NS_TIMEOUT=%r, not a number", value)
        return None


def _log_level_from_env(value: Optional[str]) -> str:
    level = (value or "INFO").upper()
    return level if level in LOG_LEVELS else "INFO"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    account_id: str = Field(DEFAULT_ACCOUNT_ID, description="NetSuite account identifier")
    consumer_key: Optional[str] = Field(None, description="Integration consumer key")
    consumer_secret: Optional[str] = Field(None, description="Integration consumer secret")
    token_id: Optional[str] = Field(None, description="Access token id")
    token_secret: Optional[str] = Field(None, description="Access token secret")
    api_host: str = Field(DEFAULT_API_HOST, description="REST host appended to the account id")
    timeout: Optional[float] = Field(None, description="Request timeout in seconds")
    log_level: str = Field("INFO", description="Logging level name")

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            account_id=os.getenv("NS_ACCOUNT_ID") or DEFAULT_ACCOUNT_ID,
            consumer_key=os.getenv("NS_CONSUMER_KEY"),
            consumer_secret=os.getenv("NS_CONSUMER_SECRET"),
            token_id=os.getenv("NS_TOKEN_ID"),
            token_secret=os.getenv("NS_TOKEN_SECRET"),
            api_host=os.getenv("NS_API_HOST") or DEFAULT_API_HOST,
            timeout=_timeout_from_env(os.getenv("NS_TIMEOUT")),
            log_level=_log_level_from_env(os.getenv("LOG_LEVEL")),
        )

    @property
    def base_url(self) -> str:
        return f"https://{self.account_id}.{self.api_host}"

    def credentials(self) -> Credentials:
        return Credentials(
            account_id=self.account_id,
            consumer_key=self.consumer_key,
            consumer_secret=self.consumer_secret,
            token_key=self.token_id,
            token_secret=self.token_secret,
        )


settings = Settings.from_env()
