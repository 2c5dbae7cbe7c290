"""
Run driver: sequences the setup steps, records a StepResult for each one and
decides whether a failed step ends the run.
"""

import logging
import time
from typing import Any, Callable, List, Optional

from rich.table import Table

from .accounts import qualifying_accounts
from .backup import BackupManager
from .commands import CommandError
from .config import Config
from .defaults import SystemDefaultsConfigurator
from .log import NordColors, attach_log_file, console
from .packages import PackageInstaller
from .preflight import check_distribution, check_root
from .results import SetupError, Status, StepResult
from .shell import ShellSwitcher
from .system import Host
from .user_config import UserConfigurator
from .verify import verify_installation

logger = logging.getLogger("zsh_setup")

SEPARATOR = "=" * 47

STATUS_STYLES = {
    Status.SUCCESS: f"bold {NordColors.GREEN}",
    Status.WARNING: f"bold {NordColors.YELLOW}",
    Status.FAILED: f"bold {NordColors.RED}",
}


class ZshSetup:
    def __init__(self, config: Optional[Config] = None, host: Optional[Host] = None):
        self.config = config or Config()
        self.host = host or Host()
        self.backups = BackupManager(self.config)
        self.installer = PackageInstaller(self.host.packages)
        self.switcher = ShellSwitcher(self.config, self.host)
        self.users = UserConfigurator(self.config, self.host, self.backups)
        self.defaults = SystemDefaultsConfigurator(self.config)
        self.results: List[StepResult] = []
        self.shell: Optional[str] = None
        self.start_time = time.time()

    def run_step(self, name: str, description: str, func: Callable[..., Any], *args: Any) -> StepResult:
        logger.info(f"Starting: {description}")
        start = time.time()
        try:
            outcome = func(*args)
        except (SetupError, CommandError) as e:
            result = StepResult(name, Status.FAILED, str(e))
        else:
            if isinstance(outcome, StepResult):
                result = outcome
            elif isinstance(outcome, list):
                result = StepResult.from_warnings(name, outcome)
            else:
                result = StepResult(name)
        result.name = name
        result.elapsed = time.time() - start
        self.results.append(result)
        if result.fatal:
            logger.error(f"✗ {description} failed in {result.elapsed:.2f}s: {result.message}")
        else:
            logger.info(f"✓ {description} completed in {result.elapsed:.2f}s")
        return result

    def init_log_file(self) -> None:
        try:
            attach_log_file(self.config.LOG_FILE)
        except OSError as e:
            raise SetupError(f"Failed to create log file {self.config.LOG_FILE}: {e}")
        logger.info(SEPARATOR)
        logger.info("ZSH Setup Script started")
        logger.info(SEPARATOR)

    def install_packages(self) -> None:
        for package in self.config.PACKAGES:
            self.installer.ensure_package(package)

    def register_shell(self) -> List[str]:
        self.shell = self.switcher.resolve_shell()
        return self.switcher.register_shell(self.shell)

    def configure_account(self, name: str) -> List[str]:
        warnings = self.users.configure(name)
        self.switcher.set_default_shell(name, self.shell)
        return warnings

    def configure_all_users(self) -> bool:
        logger.info("Configuring ZSH as default shell for all users")
        for account in qualifying_accounts(self.config, self.host.accounts):
            result = self.run_step(
                f"user:{account.name}",
                f"Configuring ZSH for user {account.name}",
                self.configure_account,
                account.name,
            )
            if result.fatal:
                return False
        logger.info("ZSH configured as default shell for all regular users.")
        return True

    def run(self) -> int:
        """Run every step in order. Returns the process exit status."""
        if self.run_step("root", "Checking for root privileges", check_root, self.host).fatal:
            return self.finish(1)
        steps = [
            ("log_file", "Initializing log file", self.init_log_file),
            ("distribution", "Verifying Debian distribution", lambda: check_distribution(self.config)),
            ("backup_dir", "Creating backup directory", self.backups.create_root),
            ("packages", "Installing required packages", self.install_packages),
            ("shell_registry", "Registering ZSH as a login shell", self.register_shell),
        ]
        for name, description, func in steps:
            if self.run_step(name, description, func).fatal:
                return self.finish(1)
        if not self.configure_all_users():
            return self.finish(1)
        self.run_step("defaults", "Configuring ZSH for future users", self.defaults.configure, self.shell)
        if self.run_step("verify", "Verifying ZSH installation", verify_installation, self.config, self.host).fatal:
            return self.finish(1)
        return self.finish(0)

    def finish(self, code: int) -> int:
        self.print_summary()
        if code == 0:
            logger.info(SEPARATOR)
            logger.info("ZSH Setup Script completed successfully")
            logger.info(SEPARATOR)
            logger.info("ZSH and Oh-My-ZSH have been successfully installed for all users.")
        if self.backups.root is not None:
            logger.info(f"Log file: {self.config.LOG_FILE}")
            logger.info(f"Backup directory: {self.backups.root}")
        return code

    def print_summary(self) -> None:
        elapsed = time.time() - self.start_time
        minutes, seconds = divmod(elapsed, 60)
        table = Table(
            title=f"Setup Summary ({int(minutes)}m {int(seconds)}s)",
            header_style=f"bold {NordColors.FROST_2}",
        )
        table.add_column("Step", style=f"bold {NordColors.FROST_1}")
        table.add_column("Status")
        table.add_column("Time", justify="right")
        table.add_column("Details", style=NordColors.SNOW_STORM_1)
        for result in self.results:
            table.add_row(
                result.name,
                f"[{STATUS_STYLES[result.status]}]{result.status.value}[/]",
                f"{result.elapsed:.2f}s",
                result.message,
            )
        console.print(table)
