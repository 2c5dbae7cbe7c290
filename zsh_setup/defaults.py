import logging
from pathlib import Path
from typing import List

from .config import Config

logger = logging.getLogger("zsh_setup")


def set_directive(path: Path, key: str, value: str) -> None:
    """
    Leave exactly one KEY=value line in a defaults file. The first existing
    directive is rewritten in place, later duplicates are dropped, and the
    line is appended when the key is absent. Bytes that are not UTF-8 are
    written back unchanged.
    """
    prefix = f"{key}="
    directive = f"{prefix}{value}"
    lines = []
    if path.exists():
        lines = path.read_text(encoding="utf-8", errors="surrogateescape").splitlines()
    result = []
    found = False
    for line in lines:
        if line.startswith(prefix):
            if not found:
                result.append(directive)
                found = True
            continue
        result.append(line)
    if not found:
        result.append(directive)
    path.write_text("\n".join(result) + "\n", encoding="utf-8", errors="surrogateescape")


class SystemDefaultsConfigurator:
    """Points the adduser/useradd defaults at ZSH so future accounts get it too."""

    def __init__(self, config: Config):
        self.config = config

    def configure(self, shell: str) -> List[str]:
        logger.info("Configuring ZSH as default shell for future users")
        warnings = []
        for path, key, required in self.config.DEFAULTS_FILES:
            if not required and not path.is_file():
                logger.debug(f"{path} not present; skipping.")
                continue
            try:
                set_directive(path, key, shell)
                logger.info(f"Set {key}={shell} in {path}.")
            except (OSError, UnicodeError) as e:
                warning = f"Failed to update {key} in {path}: {e}"
                logger.warning(warning)
                warnings.append(warning)
        if not warnings:
            logger.info("ZSH configured as default shell for future users.")
        return warnings
