from complexity_cli import output
from complexity_cli.analyzer import ComplexityClass, analyze_source

NESTED_LOOPS = [
    "for (int i = 0; i < n; i++) {",
    "  for (int j = 0; j < n; j++) {",
    "    sum += arr[i][j];",
    "  }",
    "}",
]


def render(func, *args, **kwargs):
    with output.console.capture() as capture:
        func(*args, **kwargs)
    return capture.get()


def test_every_class_has_a_style():
    assert set(output.COMPLEXITY_STYLES) == set(ComplexityClass)


def test_print_line_record():
    record = analyze_source(NESTED_LOOPS).records[1]
    text = render(output.print_line_record, record)
    assert "Line   2: for (int j = 0; j < n; j++) {" in text
    assert "-> Complexity: O(n²)" in text
    assert "Reason: Nested loops (n × n iterations)" in text


def test_print_line_record_without_reason():
    record = analyze_source(NESTED_LOOPS).records[0]
    text = render(output.print_line_record, record, show_reason=False)
    assert "Complexity: O(n)" in text
    assert "Reason" not in text


def test_print_final_complexity():
    text = render(output.print_final_complexity, analyze_source(NESTED_LOOPS))
    assert "Final Complexity: O(n²)" in text
    assert "Maximum loop nesting depth: 2" in text


def test_print_analysis_summary():
    result = analyze_source(["int f(int n) {", "  g(n);", "}"])
    text = render(output.print_analysis_summary, result, duration=0.0005)
    assert "Analysis Summary" in text
    assert "Functions found: f, g" in text
    assert "Analyzed 3 lines in 500.00 μs" in text


def test_print_complexity_classes():
    text = render(output.print_complexity_classes)
    assert "Linearithmic" in text
    assert "4+" in text
    assert "O(n³)" in text
