from __future__ import annotations

import re
import shlex
from pathlib import Path

from click.testing import CliRunner

from setsmaps import cli
from tests.conftest import build_census_source, patch_cli_feed, write_census_file

README = Path(__file__).resolve().parents[1] / "README.md"


def _readme_cli_commands() -> list[str]:
    text = README.read_text(encoding="utf-8")
    blocks = re.findall(r"```bash\n(.*?)```", text, flags=re.DOTALL)
    return [
        line.strip()
        for block in blocks
        for line in block.splitlines()
        if line.strip().startswith("setsmaps ")
    ]


def test_readme_cli_examples_are_parseable(monkeypatch, tmp_path: Path) -> None:
    census = write_census_file(tmp_path, build_census_source())
    words = tmp_path / "words.txt"
    words.write_text("am ma at\n")
    patch_cli_feed(monkeypatch, cli)

    substitutions = {"census.txt": str(census), "words.txt": str(words)}
    commands = _readme_cli_commands()
    assert commands

    runner = CliRunner()
    for command in commands:
        argv = [substitutions.get(token, token) for token in shlex.split(command)[1:]]
        result = runner.invoke(cli.cli, argv)
        assert result.exit_code in {0, 1}, (
            f"Expected parseable invocation for {command!r}, "
            f"got exit_code={result.exit_code} output={result.output!r}"
        )
