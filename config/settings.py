import os
from dataclasses import dataclass, field

from utils.retry_utils import RetryConfig

MESSAGE_MATCH_EXACT = "exact"
MESSAGE_MATCH_CONTAINS = "contains"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    headless: bool = True
    default_timeout_ms: int = 10_000
    message_match: str = MESSAGE_MATCH_EXACT  # 提示文案比较方式：exact(默认) / contains(宽松)
    storage_state_path: str = "storage/login.json"
    click_retry: RetryConfig = field(default_factory=RetryConfig)

    def __post_init__(self):
        if self.message_match not in (MESSAGE_MATCH_EXACT, MESSAGE_MATCH_CONTAINS):
            raise ValueError(f"MESSAGE_MATCH 只支持 exact/contains：{self.message_match}")
        if self.default_timeout_ms <= 0:
            raise ValueError(f"DEFAULT_TIMEOUT_MS 必须 > 0：{self.default_timeout_ms}")

    @classmethod
    def from_env(cls) -> "Settings":
        """读取环境变量；CI 环境默认无头"""
        return cls(
            headless=_env_bool("HEADLESS", True) or _env_bool("CI", False),
            default_timeout_ms=int(os.getenv("DEFAULT_TIMEOUT_MS", "10000")),
            message_match=(os.getenv("MESSAGE_MATCH") or "").strip().lower() or MESSAGE_MATCH_EXACT,
            storage_state_path=os.getenv("STORAGE_STATE", "storage/login.json"),
            click_retry=RetryConfig(
                max_attempts=int(os.getenv("CLICK_RETRY_ATTEMPTS", "3")),
                initial_delay_ms=int(os.getenv("CLICK_RETRY_INITIAL_MS", "100")),
                max_delay_ms=int(os.getenv("CLICK_RETRY_MAX_MS", "1000"))),
        )


SETTINGS = Settings.from_env()
