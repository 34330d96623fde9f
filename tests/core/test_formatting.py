from complexity_cli.core.formatting import format_time, pluralize, truncate_code


def test_format_time():
    assert format_time(0.0000001) == "100.00 ns"
    assert format_time(0.0001) == "100.00 μs"
    assert format_time(0.1) == "100.00 ms"
    assert format_time(10) == "10.000000 s"


def test_truncate_code():
    assert truncate_code("sum += x;", 20) == "sum += x;"
    assert truncate_code("for (int i = 0; i < n; i++) {", 10) == "for (int …"
    assert len(truncate_code("x" * 100, 10)) == 10


def test_pluralize():
    assert pluralize(1, "line") == "1 line"
    assert pluralize(0, "line") == "0 lines"
    assert pluralize(5, "line") == "5 lines"
