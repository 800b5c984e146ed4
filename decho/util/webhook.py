import os
from typing import Mapping, Optional

from decho.util.errors import ConfigError

# Fallback when -w/--webhook is not given
WEBHOOK_ENV = "DECHO_DISCORD_WEBHOOK"


def resolve_webhook(from_arg: Optional[str], env: Optional[Mapping[str, str]] = None) -> str:
    """Explicit argument first, then the environment. The URL itself is not validated."""
    env = os.environ if env is None else env
    url = from_arg or env.get(WEBHOOK_ENV, "")
    if not url:
        raise ConfigError("no webhook provided")
    return url
