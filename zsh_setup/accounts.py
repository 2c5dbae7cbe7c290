import logging
from pathlib import Path
from typing import Iterator, Optional

from .config import Config
from .system import Account, AccountDirectory

logger = logging.getLogger("zsh_setup")


def home_for(config: Config, name: str) -> Path:
    if name == config.ROOT_USER:
        return config.ROOT_HOME
    return config.HOME_PARENT / name


def is_nologin_shell(config: Config, shell: str) -> bool:
    return any(marker in shell for marker in config.NOLOGIN_MARKERS)


def skip_reason(config: Config, account: Account) -> Optional[str]:
    """Return why an account does not get ZSH, or None if it qualifies."""
    if account.uid < config.MIN_REGULAR_UID and account.name != config.ROOT_USER:
        return "system account"
    if is_nologin_shell(config, account.shell):
        return f"non-login shell {account.shell}"
    if not account.home.is_dir():
        return f"home directory {account.home} does not exist"
    return None


def qualifying_accounts(config: Config, accounts: AccountDirectory) -> Iterator[Account]:
    """Yield accounts in account database order, skipping system, no-login and homeless ones."""
    for account in accounts.list():
        reason = skip_reason(config, account)
        if reason:
            logger.debug(f"Skipping {account.name}: {reason}")
            continue
        yield account
