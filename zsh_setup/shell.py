import logging
from pathlib import Path
from typing import List

from .commands import CommandError
from .config import Config
from .results import SetupError
from .system import Host

logger = logging.getLogger("zsh_setup")


def registered_shells(shells_file: Path) -> List[str]:
    if not shells_file.is_file():
        return []
    content = shells_file.read_text(encoding="utf-8", errors="surrogateescape")
    return [line.strip() for line in content.splitlines()]


class ShellSwitcher:
    def __init__(self, config: Config, host: Host):
        self.config = config
        self.host = host

    def resolve_shell(self) -> str:
        path = self.host.which(self.config.SHELL_NAME)
        if not path:
            raise SetupError(f"{self.config.SHELL_NAME} was not found on the search path.")
        return path

    def register_shell(self, shell: str) -> List[str]:
        """Append the shell to the shells registry unless it is already listed."""
        shells_file = self.config.SHELLS_FILE
        try:
            if shell in registered_shells(shells_file):
                return []
            with shells_file.open("a", encoding="utf-8") as f:
                f.write(f"{shell}\n")
        except (OSError, UnicodeError) as e:
            warning = f"Failed to add {shell} to {shells_file}: {e}"
            logger.warning(warning)
            return [warning]
        logger.info(f"Added {shell} to {shells_file}.")
        return []

    def set_default_shell(self, name: str, shell: str) -> bool:
        """Make shell the login shell of an account. Returns False if it already was."""
        logger.info(f"Setting ZSH as default shell for user {name}")
        try:
            current = self.host.accounts.get(name).shell
        except KeyError:
            raise SetupError(f"User {name} not found in the account database.")
        if current == shell:
            logger.info(f"ZSH is already the default shell for user {name}.")
            return False
        try:
            self.host.accounts.set_shell(name, shell)
        except CommandError as e:
            raise SetupError(f"Failed to set ZSH as default shell for user {name}: {e}")
        logger.info(f"ZSH set as default shell for user {name}.")
        return True
