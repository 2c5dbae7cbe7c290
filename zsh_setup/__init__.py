"""
ZSH Setup

Installs ZSH and Oh-My-ZSH, then makes ZSH the default login shell for every
regular account (and root) on a Debian/Ubuntu host, and for accounts created
later on.
"""

APP_NAME = "ZSH Setup"
VERSION = "1.0.0"
