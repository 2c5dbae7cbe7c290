import logging

import pytest

from zsh_setup.config import Config
from zsh_setup.log import LOGGER_NAME, close_logger
from zsh_setup.system import Account, Host
from tests.fakes import FakeAccounts, FakeFetcher, FakePackageManager

ZSH_PATH = "/usr/bin/zsh"


@pytest.fixture(autouse=True)
def _reset_logger():
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    yield
    close_logger()


@pytest.fixture
def config(tmp_path):
    etc = tmp_path / "etc"
    (etc / "default").mkdir(parents=True)
    (tmp_path / "root").mkdir()
    (tmp_path / "home").mkdir()
    return Config(
        LOG_FILE=tmp_path / "log" / "zsh-setup.log",
        BACKUP_PARENT=tmp_path / "root",
        ROOT_HOME=tmp_path / "root",
        HOME_PARENT=tmp_path / "home",
        DISTRO_MARKER=etc / "debian_version",
        OS_RELEASE=etc / "os-release",
        SHELLS_FILE=etc / "shells",
        DEFAULTS_FILES=[
            (etc / "adduser.conf", "DSHELL", True),
            (etc / "default" / "useradd", "SHELL", False),
        ],
    )


@pytest.fixture
def accounts(config):
    alice_home = config.HOME_PARENT / "alice"
    alice_home.mkdir()
    (config.HOME_PARENT / "bob").mkdir()
    (config.HOME_PARENT / "www-data").mkdir()
    return FakeAccounts([
        Account("root", 0, config.ROOT_HOME, "/bin/bash"),
        Account("daemon", 1, config.HOME_PARENT / "www-data", "/usr/sbin/nologin"),
        Account("www-data", 33, config.HOME_PARENT / "www-data", "/bin/bash"),
        Account("alice", 1000, alice_home, "/bin/bash"),
        Account("bob", 1001, config.HOME_PARENT / "bob", "/bin/false"),
        Account("carol", 1002, config.HOME_PARENT / "carol", "/bin/bash"),
    ])


@pytest.fixture
def host(config, accounts):
    return Host(
        packages=FakePackageManager({"zsh", "git", "curl"}),
        accounts=accounts,
        fetcher=FakeFetcher(config.FRAMEWORK_URL),
        which=lambda name: ZSH_PATH if name == "zsh" else None,
        geteuid=lambda: 0,
    )
