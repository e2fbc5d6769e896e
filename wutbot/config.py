"""Configuration loaded from the environment (and .env)."""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv

from wutbot.domain.gate import DEFAULT_CAPACITY
from wutbot.domain.models import BotIdentity
from wutbot.domain.router import parse_channels

load_dotenv()

ENV_PREFIX = "WUTBOT_"
DEFAULT_PORT = 6697
DEFAULT_VERSION = "github.com/jaraco/irc"


class ConfigError(ValueError):
    """Missing or malformed configuration value."""
    pass


def _env(name: str, default: str = "") -> str:
    return os.getenv(ENV_PREFIX + name, default).strip()


def _required(name: str) -> str:
    value = _env(name)
    if not value:
        raise ConfigError(f"{ENV_PREFIX}{name} is required")
    return value


def _flag(name: str) -> bool:
    # Any non-empty value turns the flag on
    return _env(name) != ""


def parse_server(server: str) -> Tuple[str, int]:
    """Split host[:port] or [v6addr][:port]. Port defaults to the TLS port."""
    if server.startswith("["):
        host, sep, rest = server[1:].partition("]")
        if not sep or not host:
            raise ConfigError(f"malformed IPv6 address: {server!r}")
        if not rest:
            return host, DEFAULT_PORT
        if not rest.startswith(":"):
            raise ConfigError(f"unexpected text after IPv6 address: {server!r}")
        port = rest[1:]
    else:
        if server.count(":") > 1:
            raise ConfigError(f"IPv6 address must be bracketed: {server!r}")
        host, sep, port = server.partition(":")
        if not sep:
            return server, DEFAULT_PORT
    if not port.isdigit():
        raise ConfigError(f"invalid port in server address: {server!r}")
    return host, int(port)


@dataclass
class BotConfig:
    nick: str = ""
    server: str = ""
    channels: Tuple[str, ...] = field(default_factory=tuple)
    sasl_login: str = ""
    sasl_password: str = ""
    owner: str = ""
    version: str = DEFAULT_VERSION
    debug: bool = False
    insecure_skip_verify: bool = False
    concurrency_limit: int = DEFAULT_CAPACITY

    @property
    def host(self) -> str:
        return parse_server(self.server)[0]

    @property
    def port(self) -> int:
        return parse_server(self.server)[1]

    @property
    def use_sasl(self) -> bool:
        return bool(self.sasl_login and self.sasl_password)

    def identity(self) -> BotIdentity:
        return BotIdentity(nick=self.nick, owner=self.owner)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "BotConfig":
        """Create BotConfig from WUTBOT_* environment variables."""
        if env_file:
            load_dotenv(env_file, override=True)
        limit = _env("CONCURRENCY_LIMIT", str(DEFAULT_CAPACITY))
        if not limit.isdigit() or int(limit) < 1:
            raise ConfigError(f"{ENV_PREFIX}CONCURRENCY_LIMIT must be a positive integer, got {limit!r}")
        config = cls(
            nick=_required("NICK"),
            server=_required("SERVER"),
            channels=parse_channels(_required("CHANNELS")),
            sasl_login=_env("SASL_LOGIN"),
            sasl_password=_env("SASL_PASSWORD"),
            owner=_env("OWNER_ACCOUNT"),
            version=_env("VERSION") or DEFAULT_VERSION,
            debug=_flag("DEBUG"),
            insecure_skip_verify=_flag("INSECURE_SKIP_VERIFY"),
            concurrency_limit=int(limit),
        )
        # Validates the port early
        parse_server(config.server)
        return config
