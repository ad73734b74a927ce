import sys

import pytest
from loguru import logger

from texcaller.converter import convert

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="stub engines need a POSIX shell")


@pytest.fixture
def records(reset_logger) -> list[str]:
    messages: list[str] = []
    logger.remove()
    logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    logger.enable("texcaller")
    return messages


def test_conversion_logs_each_run(fake_engine, workspace_root, records) -> None:
    fake_engine("pdflatex", 'echo "run $n" > texput.aux\necho pdf > texput.pdf\n')

    convert(b"x", "LaTeX", "PDF", 2)

    text = "".join(records)
    assert "INFO|[texcaller] Converting 1 bytes with pdflatex (at most 2 runs)" in text
    assert "DEBUG|[texcaller] Run 1: pdflatex exited cleanly, aux 6 bytes" in text
    assert "ERROR|[texcaller] Conversion failed: Output didn't stabilize after 2 runs." in text


def test_conversion_logs_compiler_transcript_on_failure(fake_engine, workspace_root, records) -> None:
    fake_engine("pdflatex", 'echo "! Missing $ inserted." > texput.log\nexit 1\n')

    convert(b"x", "LaTeX", "PDF")

    text = "".join(records)
    assert "ERROR|[texcaller] Run 1: pdflatex exited with status 1" in text
    assert "COMPILER LOG:" in text
    assert "! Missing $ inserted." in text


def test_library_is_silent_by_default(fake_engine, workspace_root, reset_logger) -> None:
    messages: list[str] = []
    logger.remove()
    logger.add(messages.append, level="DEBUG")
    logger.disable("texcaller")
    fake_engine("pdflatex", "echo pdf > texput.pdf\n")

    assert convert(b"x", "LaTeX", "PDF").succeeded
    assert messages == []
