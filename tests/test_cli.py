from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from keylic.cli import cli


@pytest.fixture
def env(monkeypatch: Any, tmp_path: Path) -> dict[str, Path]:
    keys_dir = tmp_path / "keys"
    slot = tmp_path / "data" / "license.key"
    monkeypatch.setenv("KEYLIC_KEYS_DIR", str(keys_dir))
    monkeypatch.setenv("KEYLIC_LICENSE_KEY_PATH", str(slot))
    monkeypatch.setenv("KEYLIC_SUBJECT", "Widget")
    monkeypatch.delenv("KEYLIC_SECRET", raising=False)
    monkeypatch.delenv("KEYLIC_REPOSITORY_VERSION", raising=False)
    return {"keys_dir": keys_dir, "slot": slot, "tmp": tmp_path}


def test_cli_help():
    """Test CLI help command."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "Usage:" in result.output


def test_cli_keygen(env):
    """Test keygen command."""
    runner = CliRunner()
    result = runner.invoke(cli, ["keygen", "--keys-dir", str(env["keys_dir"])])

    assert result.exit_code == 0
    assert "Keys generated and saved" in result.output
    assert (env["keys_dir"] / "vendor_private.key").exists()
    assert (env["keys_dir"] / "vendor_public.key").exists()
    assert (env["keys_dir"] / "artifact.secret").exists()


def test_cli_subject(env):
    result = CliRunner().invoke(cli, ["subject"])
    assert result.exit_code == 0
    assert result.output.strip() == "Widget"


def test_cli_license_lifecycle(env):
    """Issue, install, view, verify and uninstall through the CLI."""
    runner = CliRunner()
    key_file = env["tmp"] / "widget.lic"
    assert runner.invoke(cli, ["keygen"]).exit_code == 0

    result = runner.invoke(
        cli,
        [
            "issue",
            "--holder",
            "CN=Jane Doe",
            "--not-before",
            "2000-01-01",
            "--not-after",
            "2999-01-01",
            "--extra",
            "edition=pro",
            "--output",
            str(key_file),
        ],
    )
    assert result.exit_code == 0, result.output
    assert key_file.read_bytes().startswith(b"KLIC\x02v2")

    result = runner.invoke(cli, ["install", str(key_file)])
    assert result.exit_code == 0, result.output
    assert env["slot"].read_bytes() == key_file.read_bytes()

    result = runner.invoke(cli, ["view", "--verify"])
    assert result.exit_code == 0, result.output
    assert '"holder": "CN=Jane Doe"' in result.output
    assert '"edition": "pro"' in result.output

    result = runner.invoke(cli, ["uninstall"])
    assert result.exit_code == 0, result.output
    assert not env["slot"].exists()

    result = runner.invoke(cli, ["view"])
    assert result.exit_code != 0
    assert "NotInstalled" in result.output


def test_cli_issue_rejects_inverted_window(env):
    runner = CliRunner()
    assert runner.invoke(cli, ["keygen"]).exit_code == 0
    result = runner.invoke(
        cli,
        [
            "issue",
            "--not-before",
            "2025-01-01",
            "--not-after",
            "2024-01-01",
            "--output",
            str(env["tmp"] / "bad.lic"),
        ],
    )
    assert result.exit_code != 0
    assert "InvalidPayload" in result.output
    assert not (env["tmp"] / "bad.lic").exists()


def test_cli_install_garbage(env):
    runner = CliRunner()
    assert runner.invoke(cli, ["keygen"]).exit_code == 0
    garbage = env["tmp"] / "garbage.lic"
    garbage.write_bytes(b"not a license key")
    result = runner.invoke(cli, ["install", str(garbage)])
    assert result.exit_code != 0
    assert "CorruptArtifact" in result.output
    assert not env["slot"].exists()


def test_cli_issue_without_keys(env):
    result = CliRunner().invoke(
        cli, ["issue", "--output", str(env["tmp"] / "widget.lic")]
    )
    assert result.exit_code != 0
    assert "keygen" in result.output
