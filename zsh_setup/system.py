"""
OS capabilities used by the setup steps.

Every interaction with the package database, the account database and the
network goes through one of the small interfaces below, so the steps can be
driven against in-memory doubles.
"""

import os
import pwd
import shlex
import shutil
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from .commands import run_command


@dataclass
class Account:
    name: str
    uid: int
    home: Path
    shell: str

    @classmethod
    def from_pwd(cls, entry: pwd.struct_passwd) -> "Account":
        return cls(entry.pw_name, entry.pw_uid, Path(entry.pw_dir), entry.pw_shell)


class PackageManager(ABC):
    @abstractmethod
    def is_installed(self, name: str) -> bool: ...

    @abstractmethod
    def refresh(self) -> None: ...

    @abstractmethod
    def install(self, name: str) -> None: ...


class AccountDirectory(ABC):
    @abstractmethod
    def list(self) -> List[Account]: ...

    @abstractmethod
    def get(self, name: str) -> Account: ...

    @abstractmethod
    def set_shell(self, name: str, shell: str) -> None: ...

    @abstractmethod
    def set_owner(self, name: str, paths: List[Path]) -> None: ...


class FrameworkFetcher(ABC):
    @abstractmethod
    def fetch(self, url: str, dest: Path, user: Optional[str] = None) -> None:
        """Clone url into dest, as the given account when user is set."""


class AptPackageManager(PackageManager):
    def is_installed(self, name: str) -> bool:
        result = run_command(["dpkg", "-s", name], check=False)
        return result.returncode == 0

    def refresh(self) -> None:
        run_command(["apt-get", "update", "-qq"])

    def install(self, name: str) -> None:
        env = os.environ.copy()
        env["DEBIAN_FRONTEND"] = "noninteractive"
        run_command(["apt-get", "install", "-y", name], env=env)


class SystemAccounts(AccountDirectory):
    def list(self) -> List[Account]:
        return [Account.from_pwd(entry) for entry in pwd.getpwall()]

    def get(self, name: str) -> Account:
        return Account.from_pwd(pwd.getpwnam(name))

    def set_shell(self, name: str, shell: str) -> None:
        run_command(["chsh", "-s", shell, name])

    def set_owner(self, name: str, paths: List[Path]) -> None:
        run_command(["chown", "-R", f"{name}:{name}"] + [str(p) for p in paths])


class GitFetcher(FrameworkFetcher):
    def fetch(self, url: str, dest: Path, user: Optional[str] = None) -> None:
        if user is None:
            run_command(["git", "clone", "--quiet", url, str(dest)])
        else:
            clone = f"git clone --quiet {shlex.quote(url)} {shlex.quote(str(dest))}"
            run_command(["su", "-", user, "-c", clone])


@dataclass
class Host:
    packages: PackageManager = field(default_factory=AptPackageManager)
    accounts: AccountDirectory = field(default_factory=SystemAccounts)
    fetcher: FrameworkFetcher = field(default_factory=GitFetcher)
    which: Callable[[str], Optional[str]] = shutil.which
    geteuid: Callable[[], int] = os.geteuid
