import pytest

from analysis_model.domain.builder import IssueBuilder, PendingIssue, parse_line
from analysis_model.domain.models import LineRange, LineRangeList, Severity


def test_builds_issue_from_pending_fields():
    with IssueBuilder(origin="demo") as b:
        issue = (
            b.set_file_name("src\\app\\main.cs")
            .set_line_start("42")
            .set_category("Design")
            .set_type("CA1000")
            .set_message("message")
            .set_description("description")
            .set_package_name("A.B")
            .guess_severity("Error")
            .add_line_range(LineRange(40, 41))
            .build_and_clean()
        )

    assert issue.file_name == "src/app/main.cs"
    assert issue.line_start == 42
    assert issue.line_end == 42
    assert issue.category == "Design"
    assert issue.type == "CA1000"
    assert issue.message == "message"
    assert issue.description == "description"
    assert issue.package_name == "A.B"
    assert issue.severity == Severity.ERROR
    assert issue.origin == "demo"
    assert issue.line_ranges == LineRangeList([LineRange(40, 41)])


def test_build_and_clean_resets_pending_state():
    b = IssueBuilder()
    b.set_file_name("a.c").set_line_start(3).set_message("m").set_description("d")
    b.add_line_range(LineRange(1)).set_severity(Severity.ERROR)

    b.build_and_clean()

    assert b.pending == PendingIssue()
    assert b.pending == IssueBuilder().pending

    second = b.set_message("next").build_and_clean()
    assert second.file_name == ""
    assert second.description == ""
    assert second.line_ranges == LineRangeList()
    assert second.severity == Severity.WARNING_NORMAL


def test_built_issues_are_immutable():
    issue = IssueBuilder().set_message("m").build_and_clean()

    with pytest.raises(AttributeError):
        issue.message = "changed"  # type: ignore[misc]


def test_line_ranges_do_not_leak_into_built_issue():
    b = IssueBuilder()
    b.add_line_range(LineRange(1))
    issue = b.build()
    b.add_line_range(LineRange(2))

    assert issue.line_ranges == LineRangeList([LineRange(1)])


def test_ids_are_sequential_and_ignored_by_equality():
    b = IssueBuilder()
    first = b.set_message("same").build_and_clean()
    second = b.set_message("same").build_and_clean()

    assert (first.id, second.id) == (1, 2)
    assert first == second


def test_closed_builder_refuses_to_build():
    with IssueBuilder() as b:
        pass

    assert b.closed
    with pytest.raises(RuntimeError):
        b.build_and_clean()


def test_builder_is_closed_when_parse_fails():
    b = IssueBuilder()
    with pytest.raises(ValueError):
        with b:
            raise ValueError("boom")

    assert b.closed


@pytest.mark.parametrize("value, expected", [("12", 12), (" 7 ", 7), ("", 0), ("abc", 0), (None, 0), (-3, 0), (5, 5)])
def test_parse_line(value, expected):
    assert parse_line(value) == expected
