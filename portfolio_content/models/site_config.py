"""
Site configuration shared by the build emitters.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv

from ..utils.error_handler import ConfigurationError

AVAILABILITY_STATUSES = ("available", "limited", "booked")
DEFAULT_LOCALES = ("en", "ko")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SocialLinks:
    github: str = "https://github.com/zzoo"
    linkedin: str = "https://linkedin.com/in/zzoo"


@dataclass(frozen=True)
class SiteConfig:
    """
    Immutable site settings, built once per process and passed explicitly
    to whatever needs them.
    """

    name: str = "zzoo.dev"
    url: str = "https://zzoo.dev"
    email: str = "hello@zzoo.dev"
    availability: str = "available"
    booked_until: Optional[str] = None
    social: SocialLinks = field(default_factory=SocialLinks)
    cal_link: str = "https://cal.com/zzoo"
    content_dir: str = "content"
    public_dir: str = "public"
    locales: Tuple[str, ...] = DEFAULT_LOCALES

    def __post_init__(self):
        if self.availability not in AVAILABILITY_STATUSES:
            raise ConfigurationError(
                f"Invalid availability '{self.availability}'. "
                f"Expected one of: {', '.join(AVAILABILITY_STATUSES)}"
            )
        if not self.locales:
            raise ConfigurationError("At least one locale must be configured")

    @property
    def default_locale(self) -> str:
        return self.locales[0]

    @classmethod
    def from_environment(cls, env_file: Optional[str] = None) -> "SiteConfig":
        """
        Load configuration from environment variables (and a .env file).

        Args:
            env_file: Optional path to a .env file. If None, python-dotenv
                searches for one from the current directory.

        Returns:
            SiteConfig instance

        Raises:
            ConfigurationError: If a value is invalid
        """
        load_dotenv(env_file)

        locales = tuple(
            loc.strip()
            for loc in os.environ.get("SITE_LOCALES", ",".join(DEFAULT_LOCALES)).split(",")
            if loc.strip()
        )

        config = cls(
            name=os.environ.get("SITE_NAME", cls.name),
            url=os.environ.get("SITE_URL", cls.url).rstrip("/"),
            email=os.environ.get("SITE_EMAIL", cls.email),
            availability=os.environ.get("SITE_AVAILABILITY", cls.availability),
            booked_until=os.environ.get("SITE_BOOKED_UNTIL") or None,
            social=SocialLinks(
                github=os.environ.get("SITE_GITHUB_URL", SocialLinks.github),
                linkedin=os.environ.get("SITE_LINKEDIN_URL", SocialLinks.linkedin),
            ),
            cal_link=os.environ.get("SITE_CAL_LINK", cls.cal_link),
            content_dir=os.environ.get("CONTENT_DIR", cls.content_dir),
            public_dir=os.environ.get("PUBLIC_DIR", cls.public_dir),
            locales=locales,
        )

        logger.info(f"Configuration loaded: {config.name} ({config.url})")
        return config
