from pydantic_settings import BaseSettings
from typing import Dict, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_ADDR = "http://localhost:8001"
ADMIN_TOKEN_HEADER = "x-admin-token"


class Settings(BaseSettings):
    KONG_ADMIN_ADDR: str = ""
    X_ADMIN_TOKEN: str = ""

    LOG_LEVEL: str = "INFO"


def get_settings() -> Settings:
    """Read settings from the current environment"""
    return Settings()


def resolve_admin_addr(flag_value: Optional[str], settings: Settings) -> str:
    """Pick the admin address: --kong-addr, then KONG_ADMIN_ADDR, then the default"""
    addr = flag_value or settings.KONG_ADMIN_ADDR or DEFAULT_ADMIN_ADDR
    return addr.rstrip("/")


def parse_header_flag(value: Optional[str]) -> Optional[Tuple[str, str]]:
    """
    Parse a single "key:value" header string.

    Only the first colon separates key from value, so values such as
    "Bearer a:b" survive. Returns None for empty or malformed input.
    """
    if not value:
        return None

    key, sep, header_value = value.partition(":")
    key = key.strip()
    if not sep or not key:
        logger.warning(f"Ignoring malformed header {value!r}, expected 'key:value'")
        return None

    return key, header_value.strip()


def build_request_headers(header_flag: Optional[str], settings: Settings) -> Dict[str, str]:
    """Headers attached to every metadata request"""
    headers: Dict[str, str] = {}

    parsed = parse_header_flag(header_flag)
    if parsed:
        key, value = parsed
        headers[key] = value

    if settings.X_ADMIN_TOKEN:
        # Header names are case-insensitive, drop any flag variant first
        for key in [k for k in headers if k.lower() == ADMIN_TOKEN_HEADER]:
            del headers[key]
        headers[ADMIN_TOKEN_HEADER] = settings.X_ADMIN_TOKEN

    return headers
