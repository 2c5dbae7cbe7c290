import logging
from typing import Optional

from .config import Config
from .results import SetupError, Status, StepResult
from .system import Host

logger = logging.getLogger("zsh_setup")


def check_root(host: Host) -> None:
    """Ensure the script is run with root privileges."""
    if host.geteuid() != 0:
        raise SetupError("This script must be run as root or with sudo privileges.")
    logger.info("Root privileges confirmed.")


def read_pretty_name(config: Config) -> Optional[str]:
    if not config.OS_RELEASE.is_file():
        return None
    try:
        for line in config.OS_RELEASE.read_text().splitlines():
            if line.startswith("PRETTY_NAME="):
                return line.split("=", 1)[1].strip().strip('"')
    except OSError as e:
        logger.debug(f"Could not read {config.OS_RELEASE}: {e}")
    return None


def check_distribution(config: Config) -> StepResult:
    """Warn, without stopping, when the host does not look Debian-based."""
    if not config.DISTRO_MARKER.exists():
        message = (
            "This script is designed for Ubuntu/Debian-based systems. "
            "It might not work correctly on this system."
        )
        logger.warning(message)
        return StepResult("distribution", Status.WARNING, message)
    pretty_name = read_pretty_name(config)
    logger.info(f"Detected {pretty_name or 'Debian-based system'}")
    return StepResult("distribution")
