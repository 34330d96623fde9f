import json

from typer.testing import CliRunner

from complexity_cli.cli.app import app

runner = CliRunner()

NESTED_LOOPS = """for (int i = 0; i < n; i++) {
  for (int j = 0; j < n; j++) {
    sum += arr[i][j];
  }
}
"""

FIBONACCI = """int fib(int n) {
  if (n <= 1) return n;
  return fib(n-1) + fib(n-2);
}
"""


def write_source(tmp_path, code, name="snippet.cpp"):
    path = tmp_path / name
    path.write_text(code, encoding="utf-8")
    return str(path)


def test_analyze_file(tmp_path):
    result = runner.invoke(app, ["analyze", write_source(tmp_path, NESTED_LOOPS)])
    assert result.exit_code == 0
    assert "Line-by-Line Complexity Analysis" in result.output
    assert "Final Complexity: O(n²)" in result.output
    assert "Analysis Summary" in result.output


def test_analyze_stdin_stops_at_sentinel():
    code = FIBONACCI + "END\nfor (int i = 0; i < n; i++) {\n"
    result = runner.invoke(app, ["analyze"], input=code)
    assert result.exit_code == 0
    assert "Final Complexity: O(1)" in result.output
    assert "Line   5:" not in result.output


def test_analyze_custom_sentinel():
    code = "x = 1;\nSTOP\nfor (int i = 0; i < n; i++) {\n"
    result = runner.invoke(app, ["analyze", "-", "--sentinel", "STOP"], input=code)
    assert result.exit_code == 0
    assert "Final Complexity: O(1)" in result.output


def test_analyze_table_format(tmp_path):
    result = runner.invoke(
        app, ["analyze", write_source(tmp_path, NESTED_LOOPS), "--format", "table"]
    )
    assert result.exit_code == 0
    assert "O(n²)" in result.output
    assert "->" not in result.output


def test_analyze_json_export(tmp_path):
    target = tmp_path / "result.json"
    result = runner.invoke(
        app,
        [
            "analyze",
            write_source(tmp_path, NESTED_LOOPS),
            "--format",
            "json",
            "--output",
            str(target),
        ],
    )
    assert result.exit_code == 0
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data["overall"] == "QUADRATIC"
    assert data["max_nesting_depth"] == 2
    assert [line["complexity"] for line in data["lines"]] == [
        "LINEAR",
        "QUADRATIC",
        "CONSTANT",
        "CONSTANT",
        "CONSTANT",
    ]


def test_analyze_selected_lines(tmp_path):
    result = runner.invoke(
        app, ["analyze", write_source(tmp_path, NESTED_LOOPS), "--lines", "2"]
    )
    assert result.exit_code == 0
    assert "Line   2:" in result.output
    assert "Line   1:" not in result.output


def test_analyze_without_reasons_and_summary(tmp_path):
    result = runner.invoke(
        app,
        ["analyze", write_source(tmp_path, FIBONACCI), "--no-reasons", "--no-summary"],
    )
    assert result.exit_code == 0
    assert "Reason:" not in result.output
    assert "Analysis Summary" not in result.output


def test_analyze_uses_config_file(tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"show_banner": False, "show_summary": False}))
    result = runner.invoke(
        app, ["analyze", write_source(tmp_path, NESTED_LOOPS), "--config", str(config)]
    )
    assert result.exit_code == 0
    assert "Time Complexity Analyzer" not in result.output
    assert "Analysis Summary" not in result.output


def test_analyze_missing_file(tmp_path):
    result = runner.invoke(app, ["analyze", str(tmp_path / "missing.cpp")])
    assert result.exit_code == 1
    assert "Source file not found" in result.output


def test_analyze_invalid_format(tmp_path):
    result = runner.invoke(
        app, ["analyze", write_source(tmp_path, NESTED_LOOPS), "--format", "xml"]
    )
    assert result.exit_code == 1
    assert "Unknown output format" in result.output


def test_analyze_empty_input():
    result = runner.invoke(app, ["analyze"], input="END\n")
    assert result.exit_code == 0
    assert "No code to analyze" in result.output


def test_classes():
    result = runner.invoke(app, ["classes"])
    assert result.exit_code == 0
    assert "Linearithmic" in result.output
    assert "4+" in result.output


def test_analyze_config_debug_shows_traceback(tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"debug": True}))
    result = runner.invoke(
        app, ["analyze", str(tmp_path / "missing.cpp"), "--config", str(config)]
    )
    assert result.exit_code == 1
    assert "Source file not found" in result.output
    assert "Traceback" in result.output


def test_analyze_missing_file_hides_traceback_by_default(tmp_path):
    result = runner.invoke(app, ["analyze", str(tmp_path / "missing.cpp")])
    assert result.exit_code == 1
    assert "Traceback" not in result.output
