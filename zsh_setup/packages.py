import logging

from .commands import CommandError
from .results import SetupError
from .system import PackageManager

logger = logging.getLogger("zsh_setup")


class PackageInstaller:
    def __init__(self, packages: PackageManager):
        self.packages = packages

    def ensure_package(self, name: str) -> bool:
        """Install a package unless it is already installed. Returns True if it installed something."""
        try:
            installed = self.packages.is_installed(name)
        except CommandError as e:
            raise SetupError(f"Failed to query package database for {name}: {e}")
        if installed:
            logger.info(f"Package {name} is already installed.")
            return False
        logger.info(f"Installing package: {name}")
        try:
            self.packages.refresh()
        except CommandError as e:
            raise SetupError(f"Failed to update package lists: {e}")
        try:
            self.packages.install(name)
        except CommandError as e:
            raise SetupError(f"Failed to install {name}: {e}")
        logger.info(f"Package {name} installed successfully.")
        return True
