import logging
from typing import List

from .config import Config
from .results import SetupError
from .shell import registered_shells
from .system import Host

logger = logging.getLogger("zsh_setup")


def verify_installation(config: Config, host: Host) -> List[str]:
    logger.info("Verifying ZSH installation")
    shell = host.which(config.SHELL_NAME)
    if not shell:
        raise SetupError("ZSH is not installed. Installation failed.")
    try:
        registered = shell in registered_shells(config.SHELLS_FILE)
    except (OSError, UnicodeError) as e:
        logger.debug(f"Could not read {config.SHELLS_FILE}: {e}")
        registered = False
    if not registered:
        warning = f"ZSH is not properly registered in {config.SHELLS_FILE}."
        logger.warning(warning)
        return [warning]
    logger.info("ZSH installation verified successfully.")
    return []
