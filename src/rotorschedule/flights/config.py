"""Configuration for the upstream schedule sources.

Values can be overridden through environment variables:

  ROTOR_HTTP_TIMEOUT   request timeout in seconds (default 30)
  BRISTOW_BASE_ID      Bristow base identifier (default "1", Aberdeen)
  NHV_BASE             NHV base code (default "ABZ")
  CHC_BASE             CHC portal base code (default "ABZ")
  CHC_COUNTRY          CHC portal country code (default "EG")
  CHC_VIEWSTATE        CHC portal __VIEWSTATE token (percent-encoded)
  CHC_EVENTVALIDATION  CHC portal __EVENTVALIDATION token (percent-encoded)

The CHC tokens are captured from a browser session on the portal and are not
renewed by this package.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

BRISTOW_URL = "https://www.bristowgroup.com/api/v1/flight-tracker/flights"
NHV_URL_TEMPLATE = "https://flights.nhv.be/api/public/schedule/{base}"
CHC_URL = "https://aims-scheduler.chc.ca/FlightDisplay.aspx"

DEFAULT_TIMEOUT = 30


@dataclass(frozen=True)
class ChcPortalConfig:
    """Form settings for the CHC scheduling portal."""

    url: str = CHC_URL
    base: str = "ABZ"
    country: str = "EG"
    viewstate: str = ""
    event_validation: str = ""

    @property
    def has_tokens(self) -> bool:
        return bool(self.viewstate and self.event_validation)


@dataclass(frozen=True)
class ScheduleConfig:
    """Settings shared by all schedule sources."""

    timeout: int = DEFAULT_TIMEOUT
    bristow_url: str = BRISTOW_URL
    bristow_base_id: str = "1"
    nhv_url_template: str = NHV_URL_TEMPLATE
    nhv_base: str = "ABZ"
    chc: ChcPortalConfig = field(default_factory=ChcPortalConfig)

    @property
    def nhv_url(self) -> str:
        return self.nhv_url_template.format(base=self.nhv_base)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ScheduleConfig":
        """Build config from environment variables, keeping defaults for unset values."""
        env = os.environ if environ is None else environ
        defaults = cls()
        chc_defaults = defaults.chc

        timeout = defaults.timeout
        raw_timeout = env.get("ROTOR_HTTP_TIMEOUT", "").strip()
        if raw_timeout:
            try:
                timeout = int(raw_timeout)
            except ValueError:
                raise ValueError(
                    f"ROTOR_HTTP_TIMEOUT must be an integer number of seconds, got {raw_timeout!r}"
                ) from None
            if timeout <= 0:
                raise ValueError(
                    f"ROTOR_HTTP_TIMEOUT must be a positive number of seconds, got {raw_timeout!r}"
                )

        chc = ChcPortalConfig(
            url=chc_defaults.url,
            base=env.get("CHC_BASE") or chc_defaults.base,
            country=env.get("CHC_COUNTRY") or chc_defaults.country,
            viewstate=env.get("CHC_VIEWSTATE", chc_defaults.viewstate),
            event_validation=env.get("CHC_EVENTVALIDATION", chc_defaults.event_validation),
        )
        return cls(
            timeout=timeout,
            bristow_base_id=env.get("BRISTOW_BASE_ID") or defaults.bristow_base_id,
            nhv_base=env.get("NHV_BASE") or defaults.nhv_base,
            chc=chc,
        )
