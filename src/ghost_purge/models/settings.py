from __future__ import annotations

import json

import dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from ghost_purge.models.purge_request import PurgePaths

SECRET_FIELDS = ("cloudflare_zone_id", "cloudflare_api_token", "slack_webhook_url")


class EnvSettings(BaseSettings):
    # apis
    cloudflare_zone_id: str | None = None
    cloudflare_api_token: str | None = None
    slack_webhook_url: str | None = None

    # resolve relative purge paths against the public site, if set
    site_url: str | None = None
    http_timeout: float = 10.0

    # server
    server_host: str = "0.0.0.0"
    server_port: int = 8787
    webhook_path: str = "/"

    # purge paths
    purge_home_path: str = "/"
    purge_rss_path: str = "/rss/"
    purge_sitemap_path: str = "/sitemap.xml"
    purge_robots_path: str = "/robots.txt"
    purge_tag_path: str = "/tag/{slug}/"
    purge_author_path: str = "/author/{slug}/"

    # debug
    log_level: str = "INFO"
    verbose: bool = False

    model_config = SettingsConfigDict(
        env_file=dotenv.find_dotenv(usecwd=True) or None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def has_cloudflare_credentials(self) -> bool:
        return bool(self.cloudflare_zone_id and self.cloudflare_api_token)

    @property
    def purge_paths(self) -> PurgePaths:
        return PurgePaths(
            home=self.purge_home_path,
            rss=self.purge_rss_path,
            sitemap=self.purge_sitemap_path,
            robots=self.purge_robots_path,
            tag=self.purge_tag_path,
            author=self.purge_author_path,
        )

    def to_masked_json(self) -> str:
        """Dump the settings as json, hiding credentials."""
        result = self.model_dump(mode="json")
        for key in SECRET_FIELDS:
            if result[key]:
                # valid key
                result[key] = "********"
            elif result[key] is None:
                # missing key
                result[key] = "(not set)"

        return json.dumps(result, indent=2)


def load_settings(**overrides) -> EnvSettings:
    """Load settings from the environment and any .env file."""
    return EnvSettings(**overrides)
