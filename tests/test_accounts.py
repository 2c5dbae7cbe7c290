from zsh_setup.accounts import home_for, qualifying_accounts, skip_reason
from zsh_setup.system import Account


def test_home_for_root_and_regular_users(config):
    assert home_for(config, "root") == config.ROOT_HOME
    assert home_for(config, "alice") == config.HOME_PARENT / "alice"


def test_qualifying_accounts_filters_and_keeps_database_order(config, accounts):
    names = [a.name for a in qualifying_accounts(config, accounts)]

    assert names == ["root", "alice"]


def test_skip_reasons(config, accounts):
    assert skip_reason(config, accounts.get("www-data")) == "system account"
    assert skip_reason(config, accounts.get("daemon")) == "system account"
    assert skip_reason(config, accounts.get("bob")) == "non-login shell /bin/false"
    assert "does not exist" in skip_reason(config, accounts.get("carol"))
    assert skip_reason(config, accounts.get("alice")) is None


def test_root_is_included_regardless_of_uid(config):
    root = Account("root", 0, config.ROOT_HOME, "/bin/sh")
    assert skip_reason(config, root) is None


def test_nologin_shell_excludes_regular_user(config, tmp_path):
    home = tmp_path / "dave"
    home.mkdir()
    dave = Account("dave", 1500, home, "/sbin/nologin")
    assert skip_reason(config, dave) == "non-login shell /sbin/nologin"
