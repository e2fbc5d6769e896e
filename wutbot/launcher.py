"""Launcher for the IRC bot."""

import sys

import irc.client

from wutbot.adapters.irc.bot import WutBot
from wutbot.config import BotConfig, ConfigError


def _log(msg: str):
    print(msg, file=sys.stderr)


def main() -> int:
    try:
        config = BotConfig.from_env()
    except ConfigError as e:
        _log(f"config error: {e}")
        return 2

    if not config.owner:
        _log(f"[{config.nick}] no owner account configured, owner commands disabled")

    bot = WutBot(config)
    try:
        bot.connect()
    except irc.client.ServerConnectionError as e:
        _log(f"[{config.nick}] connect failed: {e}")
        return 1

    bot.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
