import pytest

from zsh_setup.backup import BackupManager
from zsh_setup.results import SetupError
from zsh_setup.user_config import UserConfigurator, enable_plugins
from tests.fakes import ZSHRC_TEMPLATE


@pytest.fixture
def configurator(config, host):
    backups = BackupManager(config)
    backups.create_root()
    return UserConfigurator(config, host, backups)


def test_configure_regular_user(config, host, configurator):
    home = config.HOME_PARENT / "alice"
    (home / ".zshrc").write_text("# old config\n")

    assert configurator.configure("alice") == []

    profile = (home / ".zshrc").read_text()
    assert "plugins=(git zsh-autosuggestions fzf-tab)" in profile
    assert "source $ZSH/oh-my-zsh.sh" in profile
    assert profile.endswith("alias v='vim'\n")
    assert (home / ".oh-my-zsh" / "custom" / "plugins" / "zsh-autosuggestions").is_dir()
    assert (configurator.backups.root / "alice_zshrc.bak").read_text() == "# old config\n"
    assert host.accounts.owners["alice"] == [home / ".oh-my-zsh", home / ".zshrc"]
    assert {user for _, _, user in host.fetcher.fetches} == {"alice"}


def test_configure_root_runs_as_root_and_keeps_ownership(config, host, configurator):
    configurator.configure("root")

    assert (config.ROOT_HOME / ".zshrc").is_file()
    assert "root" not in host.accounts.owners
    assert {user for _, _, user in host.fetcher.fetches} == {None}


def test_existing_framework_is_replaced(config, configurator):
    stale = config.HOME_PARENT / "alice" / ".oh-my-zsh" / "stale.zsh"
    stale.parent.mkdir()
    stale.write_text("old")

    configurator.configure("alice")

    assert not stale.exists()
    assert (config.HOME_PARENT / "alice" / ".oh-my-zsh" / "templates").is_dir()


def test_framework_fetch_failure_is_fatal(config, host, configurator):
    host.fetcher.failing_urls.add(config.FRAMEWORK_URL)

    with pytest.raises(SetupError, match="Failed to clone Oh-My-ZSH for user alice"):
        configurator.configure("alice")
    assert "alice" not in host.accounts.owners


def test_missing_template_is_fatal(config, configurator):
    config.PROFILE_TEMPLATE = "templates/missing-template"

    with pytest.raises(SetupError, match="Failed to create .zshrc for user alice"):
        configurator.configure("alice")


def test_plugin_failure_is_only_a_warning(config, host, configurator):
    host.fetcher.failing_urls.add(config.PLUGINS["fzf-tab"])

    warnings = configurator.configure("alice")

    assert len(warnings) == 1
    assert "Failed to install plugin fzf-tab for user alice" in warnings[0]
    profile = (config.HOME_PARENT / "alice" / ".zshrc").read_text()
    assert "plugins=(git zsh-autosuggestions)" in profile
    assert host.accounts.owners["alice"]


def test_all_plugins_failing_leaves_template_plugins(config, host, configurator):
    for url in config.PLUGINS.values():
        host.fetcher.failing_urls.add(url)

    warnings = configurator.configure("alice")

    assert len(warnings) == 2
    assert "plugins=(git)\n" in (config.HOME_PARENT / "alice" / ".zshrc").read_text()


def test_enable_plugins_keeps_existing_entries(tmp_path):
    profile = tmp_path / ".zshrc"
    profile.write_text("plugins=(\n  git\n  fzf-tab\n)\nsource $ZSH/oh-my-zsh.sh\n")

    enable_plugins(profile, ["zsh-autosuggestions", "fzf-tab"])

    assert profile.read_text() == "plugins=(git fzf-tab zsh-autosuggestions)\nsource $ZSH/oh-my-zsh.sh\n"


def test_enable_plugins_requires_plugins_line(tmp_path):
    profile = tmp_path / ".zshrc"
    profile.write_text(ZSHRC_TEMPLATE.replace("plugins=(git)\n", ""))

    with pytest.raises(ValueError):
        enable_plugins(profile, ["fzf-tab"])


def test_symlinked_framework_is_replaced_without_touching_target(config, host, configurator, tmp_path):
    shared = tmp_path / "shared-oh-my-zsh"
    shared.mkdir()
    (shared / "keep.zsh").write_text("shared")
    framework = config.HOME_PARENT / "alice" / ".oh-my-zsh"
    framework.symlink_to(shared, target_is_directory=True)

    configurator.configure("alice")

    assert not framework.is_symlink()
    assert (framework / "templates").is_dir()
    assert (shared / "keep.zsh").read_text() == "shared"


def test_dangling_framework_symlink_is_replaced(config, configurator, tmp_path):
    framework = config.HOME_PARENT / "alice" / ".oh-my-zsh"
    framework.symlink_to(tmp_path / "gone", target_is_directory=True)

    configurator.configure("alice")

    assert framework.is_dir() and not framework.is_symlink()
