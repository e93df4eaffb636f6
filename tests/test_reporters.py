"""Tests for getappid.reporters"""

import json
import pytest
from getappid.models import ExtractionResult, ExtractionStatus
from getappid.reporters import (
    get_reporter, ConsoleReporter, JSONReporter, EnvReporter,
)


@pytest.fixture
def found_result():
    return ExtractionResult(
        status=ExtractionStatus.FOUND,
        application_id="com.example.demo",
        build_file="app/build.gradle",
        flavor="demo",
        line_number=9,
    )


@pytest.fixture
def missing_result():
    return ExtractionResult(
        status=ExtractionStatus.READ_ERROR,
        build_file="app/build.gradle",
        error="[Errno 13] Permission denied",
    )


class TestGetReporter:
    def test_known_formats(self):
        assert isinstance(get_reporter("console"), ConsoleReporter)
        assert isinstance(get_reporter("JSON"), JSONReporter)
        assert isinstance(get_reporter("env"), EnvReporter)

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            get_reporter("xml")


class TestConsoleReporter:
    def test_found(self, found_result, capsys):
        content = ConsoleReporter(use_colors=False).report(found_result)
        assert content == "applicationId found: com.example.demo"
        assert "com.example.demo" in capsys.readouterr().out

    def test_verbose_details(self, found_result):
        content = ConsoleReporter(use_colors=False, verbose=True).report(found_result)
        assert "Build file: app/build.gradle" in content
        assert "Line: 9" in content
        assert "Flavor: demo" in content

    def test_not_found(self, missing_result):
        content = ConsoleReporter(use_colors=False).report(missing_result)
        assert "Impossible to find the applicationId" in content
        assert "could not be read" in content
        assert "Permission denied" in content

    def test_writes_file(self, found_result, tmp_path):
        output = tmp_path / "report.txt"
        ConsoleReporter(use_colors=False).report(found_result, str(output))
        assert output.read_text().strip() == "applicationId found: com.example.demo"


class TestJSONReporter:
    def test_structure(self, found_result, tmp_path):
        output = tmp_path / "result.json"
        JSONReporter().report(found_result, str(output))
        data = json.loads(output.read_text())
        assert data["found"] is True
        assert data["result"]["application_id"] == "com.example.demo"
        assert data["result"]["status"] == "found"
        assert "timestamp" in data

    def test_not_found(self, missing_result):
        data = json.loads(JSONReporter().report(missing_result, None))
        assert data["found"] is False
        assert data["result"]["status"] == "read_error"


class TestEnvReporter:
    def test_appends_to_file(self, found_result, tmp_path):
        output = tmp_path / "github_output"
        output.write_text("OTHER=1\n")
        EnvReporter().report(found_result, str(output))
        assert output.read_text() == "OTHER=1\nAPPLICATION_ID=com.example.demo\n"

    def test_nothing_written_when_missing(self, missing_result, tmp_path):
        output = tmp_path / "github_output"
        assert EnvReporter().report(missing_result, str(output)) == ""
        assert output.read_text() == ""
