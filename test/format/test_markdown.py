import version_checker._format as format


def test_markdown_not_manifest():
    assert not format.MarkdownFormat().is_manifest


def test_markdown(report):
    expected = """## Version Report: demo

Advisories | Dependency | Version | Latest
--- | --- | --- | ---
0 | serde | 1.0.0 | 1.0.188
2 | time | 0.1.0 | 0.3.0
0 | helper | N/A | N/A
0 | cc | 1.0.79 | 1.0.79

Advisories | Total Dependencies | Up To Date | Out Of Date | Unspecified
--- | --- | --- | --- | ---
2 | 4 | 1 | 3 | 1"""
    assert format.MarkdownFormat().format(report) == expected


def test_markdown_no_dependencies(empty_report):
    expected = """## Version Report: demo

Advisories | Total Dependencies | Up To Date | Out Of Date | Unspecified
--- | --- | --- | --- | ---
0 | 0 | 0 | 0 | 0"""
    assert format.MarkdownFormat().format(empty_report) == expected
