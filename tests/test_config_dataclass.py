"""Tests for the typed BotConfig dataclass."""

import pytest

from wutbot.config import DEFAULT_PORT, DEFAULT_VERSION, BotConfig, ConfigError, parse_server
from wutbot.domain.models import BotIdentity

_ENV_NAMES = (
    "NICK", "SERVER", "CHANNELS", "SASL_LOGIN", "SASL_PASSWORD", "OWNER_ACCOUNT",
    "VERSION", "DEBUG", "INSECURE_SKIP_VERIFY", "CONCURRENCY_LIMIT",
)


@pytest.fixture
def env(monkeypatch):
    for name in _ENV_NAMES:
        monkeypatch.delenv("WUTBOT_" + name, raising=False)
    monkeypatch.setenv("WUTBOT_NICK", "Bot")
    monkeypatch.setenv("WUTBOT_SERVER", "irc.example.org:6697")
    monkeypatch.setenv("WUTBOT_CHANNELS", "#a, #b")

    def _set(**values):
        for key, value in values.items():
            monkeypatch.setenv("WUTBOT_" + key.upper(), value)

    return _set


class TestParseServer:
    def test_host_and_port(self):
        assert parse_server("irc.example.org:6667") == ("irc.example.org", 6667)

    def test_default_port(self):
        assert parse_server("irc.example.org") == ("irc.example.org", DEFAULT_PORT)

    def test_ipv6(self):
        assert parse_server("[::1]:6697") == ("::1", 6697)

    def test_ipv6_without_port(self):
        assert parse_server("[::1]") == ("::1", DEFAULT_PORT)

    def test_bad_port(self):
        with pytest.raises(ConfigError):
            parse_server("irc.example.org:tls")

    @pytest.mark.parametrize("server", ["::1", "2001:db8::1:6697", "[::1", "[]:6697", "[::1]6697"])
    def test_malformed_ipv6(self, server):
        with pytest.raises(ConfigError):
            parse_server(server)


class TestBotConfig:
    def test_defaults(self):
        c = BotConfig()
        assert c.owner == ""
        assert c.version == DEFAULT_VERSION
        assert c.concurrency_limit == 128
        assert c.debug is False
        assert c.use_sasl is False

    def test_identity(self):
        c = BotConfig(nick="Bot", owner="alice")
        assert c.identity() == BotIdentity(nick="Bot", owner="alice")

    def test_from_env_minimal(self, env):
        c = BotConfig.from_env()
        assert c.nick == "Bot"
        assert c.host == "irc.example.org"
        assert c.port == 6697
        assert c.channels == ("#a", "#b")
        assert c.owner == ""
        assert c.insecure_skip_verify is False

    def test_from_env_full(self, env):
        env(
            sasl_login="bot",
            sasl_password="pw",
            owner_account="alice",
            version="wutbot 2",
            debug="1",
            insecure_skip_verify="yes",
            concurrency_limit="4",
        )
        c = BotConfig.from_env()
        assert c.use_sasl is True
        assert c.owner == "alice"
        assert c.version == "wutbot 2"
        assert c.debug is True
        assert c.insecure_skip_verify is True
        assert c.concurrency_limit == 4

    @pytest.mark.parametrize("missing", ["NICK", "SERVER", "CHANNELS"])
    def test_from_env_missing_required(self, env, monkeypatch, missing):
        monkeypatch.delenv("WUTBOT_" + missing)
        with pytest.raises(ConfigError, match=missing):
            BotConfig.from_env()

    @pytest.mark.parametrize("limit", ["0", "-3", "many"])
    def test_from_env_bad_concurrency_limit(self, env, limit):
        env(concurrency_limit=limit)
        with pytest.raises(ConfigError):
            BotConfig.from_env()

    def test_from_env_bad_server_port(self, env):
        env(server="irc.example.org:abc")
        with pytest.raises(ConfigError):
            BotConfig.from_env()

    def test_from_env_file(self, env, tmp_path, monkeypatch):
        env_file = tmp_path / "bot.env"
        env_file.write_text("WUTBOT_OWNER_ACCOUNT=carol\n")
        monkeypatch.delenv("WUTBOT_OWNER_ACCOUNT", raising=False)
        c = BotConfig.from_env(str(env_file))
        monkeypatch.delenv("WUTBOT_OWNER_ACCOUNT", raising=False)
        assert c.owner == "carol"
