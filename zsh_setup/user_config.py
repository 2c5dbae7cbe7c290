import logging
import re
import shutil
from pathlib import Path
from typing import List

from .accounts import home_for
from .backup import BackupManager
from .commands import CommandError
from .config import Config
from .results import SetupError
from .system import Host

logger = logging.getLogger("zsh_setup")

PLUGINS_LINE = re.compile(r"^plugins=\((?P<names>[^)]*)\)", re.MULTILINE)


class UserConfigurator:
    """Installs Oh-My-ZSH and a fresh .zshrc for one account."""

    def __init__(self, config: Config, host: Host, backups: BackupManager):
        self.config = config
        self.host = host
        self.backups = backups

    def configure(self, name: str) -> List[str]:
        """Configure one account. Raises SetupError on fatal failures, returns warnings otherwise."""
        home = home_for(self.config, name)
        is_root = name == self.config.ROOT_USER
        framework = home / self.config.FRAMEWORK_DIR
        profile = home / self.config.PROFILE_FILE
        logger.info(f"Installing Oh-My-ZSH for user {name}")

        warnings = self.backups.backup_account(name, home)

        if framework.is_symlink() or framework.exists():
            try:
                if framework.is_symlink() or not framework.is_dir():
                    framework.unlink()
                else:
                    shutil.rmtree(framework)
            except OSError as e:
                raise SetupError(f"Failed to remove existing {framework} for user {name}: {e}")

        try:
            self.host.fetcher.fetch(self.config.FRAMEWORK_URL, framework, user=None if is_root else name)
        except CommandError as e:
            raise SetupError(f"Failed to clone Oh-My-ZSH for user {name}: {e}")

        try:
            shutil.copyfile(framework / self.config.PROFILE_TEMPLATE, profile)
        except OSError as e:
            raise SetupError(f"Failed to create {self.config.PROFILE_FILE} for user {name}: {e}")

        warnings += self.install_plugins(name, framework, profile, is_root)
        warnings += self.append_aliases(profile)

        if not is_root:
            try:
                self.host.accounts.set_owner(name, [framework, profile])
            except CommandError as e:
                raise SetupError(f"Failed to set ownership of ZSH files for user {name}: {e}")

        logger.info(f"Oh-My-ZSH installed successfully for user {name}.")
        return warnings

    def install_plugins(self, name: str, framework: Path, profile: Path, is_root: bool) -> List[str]:
        warnings = []
        enabled = []
        plugins_dir = framework / self.config.PLUGINS_DIR
        for plugin, url in self.config.PLUGINS.items():
            try:
                self.host.fetcher.fetch(url, plugins_dir / plugin, user=None if is_root else name)
                enabled.append(plugin)
            except CommandError as e:
                warnings.append(f"Failed to install plugin {plugin} for user {name}: {e}")
        if enabled:
            try:
                enable_plugins(profile, enabled)
            except (OSError, ValueError) as e:
                warnings.append(f"Failed to enable plugins in {profile}: {e}")
        for warning in warnings:
            logger.warning(warning)
        return warnings

    def append_aliases(self, profile: Path) -> List[str]:
        if not self.config.ALIASES:
            return []
        lines = ["", "# Aliases"]
        lines += [f"alias {alias}='{command}'" for alias, command in self.config.ALIASES.items()]
        try:
            with profile.open("a") as f:
                f.write("\n".join(lines) + "\n")
        except OSError as e:
            warning = f"Failed to add aliases to {profile}: {e}"
            logger.warning(warning)
            return [warning]
        return []


def enable_plugins(profile: Path, plugins: List[str]) -> None:
    """Add plugins to the plugins=(...) list of a .zshrc, keeping existing entries."""
    content = profile.read_text()
    match = PLUGINS_LINE.search(content)
    if match is None:
        raise ValueError("no plugins=(...) line found")
    names = match.group("names").split()
    names += [p for p in plugins if p not in names]
    line = f"plugins=({' '.join(names)})"
    profile.write_text(content[:match.start()] + line + content[match.end():])
