import version_checker._format as format
from version_checker._report import SelfUpdate
from version_checker._semver import SemVer
from version_checker._version_spec import SemanticVersion


def test_table_not_manifest():
    assert not format.TableFormat().is_manifest


def test_table_plain(report):
    output = format.TableFormat(color=False).format(report)

    assert "\x1b[" not in output
    assert "Version Report: demo" in output
    for header in ("Advisories", "Dependency", "Version", "Latest"):
        assert header in output
    assert "1.0.188" in output
    assert "N/A" in output
    assert "4 dependencies" in output
    assert "3 out of date, 1 unspecified" in output


def test_table_colored(report):
    output = format.TableFormat(color=True).format(report)
    assert "\x1b[" in output
    assert "serde" in output


def test_table_cell_styles(report):
    fmt = format.TableFormat()
    serde, time, helper, cc = report.records

    assert [t.style for t in fmt._cells(serde)] == ["", "yellow", "red", "green"]
    assert [t.style for t in fmt._cells(time)] == ["white on red", "yellow", "red", "green"]
    assert [t.style for t in fmt._cells(helper)] == ["yellow", "yellow", "red", "green"]
    assert [t.style for t in fmt._cells(cc)] == ["", "", "green", "green"]
    assert [t.plain for t in fmt._cells(time)] == ["2", "time", "0.1.0", "0.3.0"]


def test_self_update_notice():
    update = SelfUpdate(
        local=SemanticVersion(SemVer(0, 1, 0)), remote=SemanticVersion(SemVer(0, 2, 0))
    )
    notice = format.TableFormat().format_self_update(update)
    assert "0.1.0 -> 0.2.0" in notice
