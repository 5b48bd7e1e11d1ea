from __future__ import annotations

import os
from dataclasses import dataclass, field

# --------------------------------
# SES Query API

# エンドポイント (us-east-1)
DEFAULT_BASE_URL = "https://email.us-east-1.amazonaws.com"

# API バージョン
DEFAULT_API_VERSION = "2010-12-01"

SEND_EMAIL_ACTION = "SendEmail"
DEFAULT_CHARSET = "UTF-8"

# httpx に渡すタイムアウト（秒）
DEFAULT_TIMEOUT = 20.0

SIGNATURE_ALGORITHM = "HmacSHA256"
AUTHORIZATION_HEADER = "X-Amzn-Authorization"
# --------------------------------


@dataclass(frozen=True)
class Settings:
    access_key: str
    secret_key: str = field(repr=False)
    version: str = DEFAULT_API_VERSION
    default_sender: str = ""
    default_sender_name: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @staticmethod
    def from_env(env: dict[str, str] | None = None) -> "Settings":
        e = env if env is not None else os.environ

        def require(name: str) -> str:
            value = e.get(name)
            if value is None or not value.strip():
                raise ValueError(f"Environment variable {name} is required.")
            return value.strip()

        def optional_with_default(name: str, default: str) -> str:
            value = e.get(name)
            if value is None or not value.strip():
                return default
            return value.strip()

        raw_timeout = optional_with_default("SES_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ValueError(f"Environment variable SES_TIMEOUT must be a number: {raw_timeout!r}") from exc

        return Settings(
            access_key=require("SES_ACCESS_KEY"),
            secret_key=require("SES_SECRET_KEY"),
            version=optional_with_default("SES_API_VERSION", DEFAULT_API_VERSION),
            default_sender=optional_with_default("SES_SENDER", ""),
            default_sender_name=optional_with_default("SES_SENDER_NAME", ""),
            base_url=optional_with_default("SES_BASE_URL", DEFAULT_BASE_URL),
            timeout=timeout,
        )
