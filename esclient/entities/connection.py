"""Connection settings entity."""

from typing import Literal, Self
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PORTS = {"http": 80, "https": 443}


class ConnectionSettings(BaseModel):
    """Where and how to reach the engine.

    Settings are immutable once the client is built.
    """

    model_config = ConfigDict(frozen=True)

    scheme: Literal["http", "https"] = "http"
    host: str = Field(default="localhost", min_length=1)
    port: int = Field(default=9200, ge=1, le=65535)
    url_prefix: str = ""
    timeout: float = Field(default=10, gt=0)

    @property
    def base_url(self) -> str:
        """Return the URL every request path is appended to."""
        host = f"[{self.host}]" if ":" in self.host else self.host
        prefix = f"/{self.url_prefix.strip('/')}" if self.url_prefix.strip("/") else ""
        return f"{self.scheme}://{host}:{self.port}{prefix}"

    @classmethod
    def from_url(cls, url: str, *, timeout: float = 10) -> Self:
        """Build settings from a URL such as ``https://search.local:9200/es``.

        A URL without an explicit port uses the scheme's default port.

        Raises:
            ValueError: If the URL cannot be parsed or has no host
        """
        parts = urlsplit(url)
        if not parts.hostname:
            raise ValueError(f"Invalid engine URL {url!r}: missing host")

        scheme = parts.scheme.lower() or "http"
        if scheme not in DEFAULT_PORTS:
            raise ValueError(f"Invalid engine URL {url!r}: unsupported scheme {parts.scheme!r}")

        # urlsplit raises ValueError itself for out-of-range ports
        port = parts.port if parts.port is not None else DEFAULT_PORTS[scheme]

        return cls(
            scheme=scheme,
            host=parts.hostname,
            port=port,
            url_prefix=parts.path,
            timeout=timeout,
        )
