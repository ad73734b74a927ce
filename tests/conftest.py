import os
import textwrap
from pathlib import Path

import pytest
from loguru import logger

# Shell prologue shared by the stub engines: counts runs in the workspace.
COUNT_RUNS = """\
n=$(cat runs 2>/dev/null || echo 0)
n=$((n + 1))
echo "$n" > runs
"""


@pytest.fixture
def workspace_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    root = tmp_path / "tmp"
    root.mkdir()
    monkeypatch.setenv("TMPDIR", str(root))
    return root


@pytest.fixture
def fake_engine(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Install shell scripts that stand in for tex/pdflatex on PATH."""

    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")

    def install(name: str, body: str) -> Path:
        script = bin_dir / name
        script.write_text("#!/bin/sh\n" + COUNT_RUNS + textwrap.dedent(body), encoding="utf-8")
        script.chmod(0o755)
        return script

    return install


@pytest.fixture
def reset_logger():
    yield
    logger.remove()
    logger.disable("texcaller")
