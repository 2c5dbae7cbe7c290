from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Tuple


@dataclass
class Config:
    LOG_FILE: Path = field(default_factory=lambda: Path("/var/log/zsh-setup.log"))
    BACKUP_PARENT: Path = field(default_factory=lambda: Path("/root"))
    BACKUP_PREFIX: str = "zsh_backup_"
    TIMESTAMP_FORMAT: str = "%Y%m%d%H%M%S"

    ROOT_USER: str = "root"
    ROOT_HOME: Path = field(default_factory=lambda: Path("/root"))
    HOME_PARENT: Path = field(default_factory=lambda: Path("/home"))
    MIN_REGULAR_UID: int = 1000
    # Substrings marking a shell that cannot log in interactively
    NOLOGIN_MARKERS: Tuple[str, ...] = ("nologin", "false")

    DISTRO_MARKER: Path = field(default_factory=lambda: Path("/etc/debian_version"))
    OS_RELEASE: Path = field(default_factory=lambda: Path("/etc/os-release"))

    SHELL_NAME: str = "zsh"
    PACKAGES: List[str] = field(default_factory=lambda: ["zsh", "git", "curl"])

    FRAMEWORK_URL: str = "https://github.com/ohmyzsh/ohmyzsh.git"
    FRAMEWORK_DIR: str = ".oh-my-zsh"
    PROFILE_FILE: str = ".zshrc"
    HISTORY_FILE: str = ".zsh_history"
    PROFILE_TEMPLATE: str = "templates/zshrc.zsh-template"
    PLUGINS_DIR: str = "custom/plugins"
    PLUGINS: Dict[str, str] = field(default_factory=lambda: {
        "zsh-autosuggestions": "https://github.com/zsh-users/zsh-autosuggestions.git",
        "fzf-tab": "https://github.com/Aloxaf/fzf-tab.git",
    })
    ALIASES: Dict[str, str] = field(default_factory=lambda: {
        "v": "vim",
    })

    SHELLS_FILE: Path = field(default_factory=lambda: Path("/etc/shells"))
    # (defaults file, directive key, required to exist)
    DEFAULTS_FILES: List[Tuple[Path, str, bool]] = field(default_factory=lambda: [
        (Path("/etc/adduser.conf"), "DSHELL", True),
        (Path("/etc/default/useradd"), "SHELL", False),
    ])

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
