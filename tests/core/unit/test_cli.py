"""Unit tests for the gobinary command line."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

import gobinary.cli as cli_module
from gobinary import __version__
from gobinary.cli import cli, main
from gobinary.domain.settings import InstallerEnvironment
from gobinary.usecases.binary_installer import InstallResult, UninstallResult


class StubInstaller:
    """Returns preconfigured results and records which command ran."""

    def __init__(
        self,
        install_result: InstallResult | None = None,
        uninstall_result: UninstallResult | None = None,
    ) -> None:
        self.install_result = install_result
        self.uninstall_result = uninstall_result
        self.calls: list[str] = []
        self.environments: list[InstallerEnvironment] = []

    def install(self) -> InstallResult:
        self.calls.append("install")
        return self.install_result

    def uninstall(self) -> UninstallResult:
        self.calls.append("uninstall")
        return self.uninstall_result


@pytest.fixture
def stub_installer(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> StubInstaller:
    """Replace the production wiring with a stub and run inside tmp_path."""
    stub = StubInstaller(
        install_result=InstallResult.create_success(tmp_path / "mytool"),
        uninstall_result=UninstallResult.create_success(tmp_path / "mytool"),
    )

    def _create_installer(environment, client=None):
        stub.environments.append(environment)
        return stub

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli_module, "create_installer", _create_installer)
    return stub


@pytest.mark.unit
@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.CLI")
class TestCliGroup:
    """Tests for global CLI behavior."""

    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "install" in result.output
        assert "uninstall" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


@pytest.mark.unit
@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.CLI.ExitCodes")
class TestMain:
    """Tests for main() exit codes."""

    def test_install_success_exits_zero(self, stub_installer: StubInstaller) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["install"])

        assert exc.value.code == 0
        assert stub_installer.calls == ["install"]

    def test_uninstall_success_exits_zero(self, stub_installer: StubInstaller) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["uninstall"])

        assert exc.value.code == 0
        assert stub_installer.calls == ["uninstall"]

    def test_environment_is_working_directory(
        self, stub_installer: StubInstaller, tmp_path: Path
    ) -> None:
        with pytest.raises(SystemExit):
            main(["uninstall"])

        assert stub_installer.environments[0].cwd.resolve() == tmp_path.resolve()

    def test_install_failure_exits_one(
        self, stub_installer: StubInstaller, capsys: pytest.CaptureFixture[str]
    ) -> None:
        stub_installer.install_result = InstallResult.create_failure(
            "Release with tag v9.9.9 not found"
        )

        with pytest.raises(SystemExit) as exc:
            main(["install"])

        assert exc.value.code == 1
        assert "Release with tag v9.9.9 not found" in capsys.readouterr().err

    def test_uninstall_failure_exits_one(
        self, stub_installer: StubInstaller, capsys: pytest.CaptureFixture[str]
    ) -> None:
        stub_installer.uninstall_result = UninstallResult.create_failure(
            "Unable to find package.json"
        )

        with pytest.raises(SystemExit) as exc:
            main(["uninstall"])

        assert exc.value.code == 1
        assert "Unable to find package.json" in capsys.readouterr().err

    def test_unknown_command_exits_one(
        self, stub_installer: StubInstaller, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["reinstall"])

        assert exc.value.code == 1
        assert "reinstall" in capsys.readouterr().err
        assert stub_installer.calls == []

    def test_missing_command_exits_one(self, stub_installer: StubInstaller) -> None:
        with pytest.raises(SystemExit) as exc:
            main([])

        assert exc.value.code == 1
        assert stub_installer.calls == []

    def test_version_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["--version"])

        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out
