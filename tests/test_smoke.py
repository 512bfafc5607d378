from treeresolver import __version__
from click.testing import CliRunner

from treeresolver.cli.main import cli


def test_version():
    assert __version__ == "0.1.0"


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "Dependency linking" in result.output


def test_cli_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_top_level_exports():
    import treeresolver

    tree = treeresolver.DepResolver()
    tree.add_instance("a")
    assert list(tree.build().roots) == ["a"]
