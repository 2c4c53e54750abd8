from __future__ import annotations

import os
from dataclasses import dataclass, field

from data_browser.clients.browser_sdk.config import ConfigError, SDKConfig

DEFAULT_PAGE_SIZE_OPTIONS = (5, 10, 20, 50)


@dataclass(frozen=True)
class AppConfig:
    sdk: SDKConfig = field(default_factory=SDKConfig)
    page_size_options: tuple[int, ...] = DEFAULT_PAGE_SIZE_OPTIONS
    default_page_size: int = 5

    @classmethod
    def from_env(cls, env_file: str | None = ".env") -> "AppConfig":
        sdk = SDKConfig.from_env(env_file)
        config = cls(
            sdk=sdk,
            page_size_options=_parse_page_sizes(os.getenv("DATA_BROWSER_PAGE_SIZE_OPTIONS", "5,10,20,50")),
            default_page_size=_parse_int("DATA_BROWSER_DEFAULT_PAGE_SIZE", os.getenv("DATA_BROWSER_DEFAULT_PAGE_SIZE", "5")),
        )
        config.validate()
        return config

    def validate(self) -> None:
        if not self.page_size_options:
            raise ConfigError("DATA_BROWSER_PAGE_SIZE_OPTIONS cannot be empty")
        if any(size < 1 for size in self.page_size_options):
            raise ConfigError("DATA_BROWSER_PAGE_SIZE_OPTIONS must only contain sizes >= 1")
        if self.default_page_size not in self.page_size_options:
            raise ConfigError(
                f"DATA_BROWSER_DEFAULT_PAGE_SIZE={self.default_page_size} is not one of {list(self.page_size_options)}"
            )


def _parse_page_sizes(raw: str) -> tuple[int, ...]:
    sizes: list[int] = []
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        size = _parse_int("DATA_BROWSER_PAGE_SIZE_OPTIONS", chunk)
        if size not in sizes:
            sizes.append(size)
    return tuple(sizes)


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected an integer, got {raw!r}") from exc
