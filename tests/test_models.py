import pytest
from pydantic import ValidationError

from texcaller.config import DestinationFormat, Settings, SourceFormat
from texcaller.errors import ArgumentError
from texcaller.models import ConversionRequest, ConversionResult


def test_request_accepts_enums_and_strings() -> None:
    request = ConversionRequest(
        source=b"\\bye",
        source_format=SourceFormat.TEX,
        destination_format="PDF",
        max_runs=2,
    )

    assert request.source_format == "TeX"
    assert request.destination_format == "PDF"
    assert request.validate_arguments() == "pdftex"


def test_request_checks_format_pair_before_run_ceiling() -> None:
    request = ConversionRequest(source=b"", source_format="TeX", destination_format="PS", max_runs=1)

    with pytest.raises(ArgumentError, match="Unable to convert"):
        request.validate_arguments()


def test_request_rejects_single_run() -> None:
    request = ConversionRequest(source=b"", source_format="LaTeX", destination_format="DVI", max_runs=1)

    with pytest.raises(ArgumentError, match=r"Argument max_runs is 1, but must be >= 2\."):
        request.validate_arguments()


def test_request_is_immutable() -> None:
    request = ConversionRequest(source=b"", source_format="LaTeX", destination_format="DVI", max_runs=3)

    with pytest.raises(ValidationError):
        request.max_runs = 10


def test_result_success_tracks_destination() -> None:
    assert ConversionResult(destination=b"", info="Generated PDF (0 bytes)").succeeded
    assert not ConversionResult(info="failed").succeeded


def test_result_raise_for_error_is_noop_on_success() -> None:
    ConversionResult(destination=b"%PDF", info="ok", runs=1).raise_for_error()


def test_settings_normalize_log_level() -> None:
    assert Settings(log_level=" debug ").log_level == "DEBUG"
    assert Settings(log_level="").log_level == "WARNING"


def test_settings_reject_unknown_log_level() -> None:
    with pytest.raises(ValidationError, match="Unknown log level 'verbose'"):
        Settings(log_level="verbose")
