import signal
import sys

import click

from . import APP_NAME, VERSION
from .log import close_logger, console, print_header, print_intro, setup_logger
from .provision import ZshSetup


def signal_handler(sig, frame) -> None:
    sig_name = signal.Signals(sig).name
    console.print(f"\nSetup interrupted by {sig_name}.")
    sys.exit(130 if sig == signal.SIGINT else 128 + sig)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
def main() -> None:
    """Install ZSH and Oh-My-ZSH and make ZSH the default shell for all users."""
    for sig in (signal.SIGINT, signal.SIGTERM):
        signal.signal(sig, signal_handler)
    print_header(APP_NAME)
    print_intro(
        f"{APP_NAME} v{VERSION}\n"
        "This script will install ZSH and Oh-My-ZSH for all users.\n"
        "It requires root privileges and is designed for Ubuntu/Debian-based systems."
    )
    logger = setup_logger()
    try:
        code = ZshSetup().run()
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        code = 1
    finally:
        close_logger()
    sys.exit(code)
