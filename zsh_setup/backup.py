import datetime
import logging
import shutil
import tarfile
from pathlib import Path
from typing import List, Optional

from .config import Config
from .results import SetupError

logger = logging.getLogger("zsh_setup")


class BackupManager:
    """Snapshots each account's ZSH files into one timestamped directory per run."""

    def __init__(self, config: Config):
        self.config = config
        self.root: Optional[Path] = None

    def create_root(self, now: Optional[datetime.datetime] = None) -> Path:
        timestamp = (now or datetime.datetime.now()).strftime(self.config.TIMESTAMP_FORMAT)
        root = self.config.BACKUP_PARENT / f"{self.config.BACKUP_PREFIX}{timestamp}"
        logger.info(f"Setting up backup directory: {root}")
        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SetupError(f"Failed to create backup directory {root}: {e}")
        self.root = root
        return root

    def backup_account(self, name: str, home: Path) -> List[str]:
        """
        Copy the profile and history files and archive the framework directory
        of one account. Missing sources are skipped; failures are returned as
        warnings so the remaining artifacts are still attempted.
        """
        if self.root is None:
            raise SetupError("Backup directory has not been created.")
        logger.info(f"Backing up ZSH configuration for user {name}")
        warnings = []

        for file_name, suffix in (
            (self.config.PROFILE_FILE, "zshrc.bak"),
            (self.config.HISTORY_FILE, "zsh_history.bak"),
        ):
            src = home / file_name
            if not src.is_file():
                continue
            dest = self.root / f"{name}_{suffix}"
            try:
                shutil.copy2(src, dest)
                logger.debug(f"Backed up {src} to {dest}")
            except OSError as e:
                warnings.append(f"Failed to backup {file_name} for {name}: {e}")

        framework = home / self.config.FRAMEWORK_DIR
        if framework.is_dir():
            archive = self.root / f"{name}_oh-my-zsh.tar.gz"
            try:
                with tarfile.open(archive, "w:gz") as tar:
                    tar.add(str(framework), arcname=framework.name)
                logger.debug(f"Archived {framework} to {archive}")
            except (OSError, tarfile.TarError) as e:
                warnings.append(f"Failed to backup {self.config.FRAMEWORK_DIR} for {name}: {e}")

        for warning in warnings:
            logger.warning(warning)
        return warnings
