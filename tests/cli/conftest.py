"""Shared fixtures for end-to-end CLI tests.

Every CLI e2e test gets an isolated temporary project to work in, so tests
never pollute each other or the real workspace.

Tests invoke the real ``clap`` Click group in-process through
``click.testing.CliRunner``, with ``standalone_mode=False`` exactly as
``commands.main()`` does. This validates the full chain: ``commands.py``
dispatch -> subcommand module -> core operation. Answers to interactive
prompts are passed as ``input``.

The ``run_clap_completion`` fixture uses Click's ``ShellComplete`` API to
query completions at the Python level, the same logic that drives the
runtime ``_CLAP_COMPLETE`` protocol.
"""

from __future__ import annotations

import os
import shlex
import subprocess
from collections.abc import Callable, Iterator
from pathlib import Path

import click
import pytest
from click.shell_completion import ShellComplete
from click.testing import CliRunner

from clap_orchestrator.cli.commands import _click_cli

# Type aliases for the callable fixtures.
RunClap = Callable[..., subprocess.CompletedProcess[str]]
RunClapCompletion = Callable[[str], subprocess.CompletedProcess[str]]

_EXIT_CANCELLED = 130


@pytest.fixture()
def isolated_project(tmp_path: Path) -> Iterator[Path]:
    """Create an isolated empty project with a ``modules/`` root and cd into it.

    Yields:
        Path to the temporary project root.

    After the test, the working directory is restored.
    """
    (tmp_path / "modules").mkdir()
    original_cwd = Path.cwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)


@pytest.fixture()
def run_clap(isolated_project: Path) -> RunClap:
    """Return a helper that invokes ``clap <args>`` inside the isolated project.

    Usage in tests::

        def test_validate(run_clap: RunClap) -> None:
            result = run_clap("validate", "billing")
            assert result.returncode == 1

        def test_prompt(run_clap: RunClap) -> None:
            result = run_clap("create-module", input="billing\\n")

    Returns:
        A callable ``(*args, input=None) -> CompletedProcess[str]`` whose
        ``returncode`` follows ``commands.main()``: the command's return
        value, 130 for an abort, the exit code of a ``ClickException``.
    """

    def _run(*args: str, input: str | None = None) -> subprocess.CompletedProcess[str]:
        runner = CliRunner()
        result = runner.invoke(
            _click_cli,
            list(args),
            input=input,
            prog_name="clap",
            standalone_mode=False,
        )

        exc = result.exception
        if isinstance(exc, click.Abort):
            returncode = _EXIT_CANCELLED
        elif isinstance(exc, click.ClickException):
            returncode = exc.exit_code
        elif exc is not None and not isinstance(exc, SystemExit):
            raise exc
        else:
            returncode = int(result.return_value or 0)

        return subprocess.CompletedProcess(
            args=["clap", *args],
            returncode=returncode,
            stdout=result.output,
            stderr="",
        )

    return _run


@pytest.fixture()
def run_clap_completion(isolated_project: Path) -> RunClapCompletion:
    """Return a helper that queries Click completions for ``clap``.

    The returned callable accepts a partial command string (e.g.
    ``"clap validate bil"``) and returns a ``CompletedProcess``-like object
    whose ``.stdout`` contains one completion per line (``value\\thelp``).
    """

    def _complete(partial_cmd: str) -> subprocess.CompletedProcess[str]:
        parts = shlex.split(partial_cmd)
        # Drop the program name, Click handles it via prog_name.
        if parts and parts[0] == "clap":
            parts = parts[1:]

        # A trailing space means a new, empty word is being typed.
        if partial_cmd.endswith(" ") or not parts:
            incomplete = ""
            args = parts
        else:
            incomplete = parts[-1]
            args = parts[:-1]

        comp = ShellComplete(_click_cli, {}, "clap", "_CLAP_COMPLETE")
        completions = comp.get_completions(args, incomplete)
        lines = [
            f"{c.value}\t{c.help}" if c.help else c.value
            for c in completions
        ]
        stdout = "\n".join(lines) + "\n" if lines else ""
        return subprocess.CompletedProcess(
            args=["click-complete", partial_cmd],
            returncode=0,
            stdout=stdout,
            stderr="",
        )

    return _complete
