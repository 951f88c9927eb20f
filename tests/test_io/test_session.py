import io

from sdopt.io import InteractiveSession, TokenReader


def run_session(text: str) -> str:
    out = io.StringIO()
    code = InteractiveSession(io.StringIO(text), out).run()
    assert code == 0
    return out.getvalue()


def test_token_reader_spans_lines():
    reader = TokenReader(io.StringIO("a b\n\n c\nrest of line\n"))
    assert [reader.next_token() for _ in range(3)] == ["a", "b", "c"]
    assert reader.next_line() == "rest of line"


def test_exit_immediately():
    output = run_session("0\n")
    assert output.splitlines() == [
        "Press 0 to exit or 1 to enter the program:",
        "Exiting Program...",
    ]


def test_invalid_binary_answers_reprompt():
    output = run_session("7\nyes\n0\n")
    assert output.splitlines() == [
        "Press 0 to exit or 1 to enter the program:",
        "Please enter a valid input (0 or 1).",
        "Press 0 to exit or 1 to enter the program:",
        "Please enter a valid input (0 or 1).",
        "Press 0 to exit or 1 to enter the program:",
        "Exiting Program...",
    ]


def test_manual_input_to_console():
    output = run_session("1\n1\n1\nquadratic\n1\n10\n0.0001\n0.5\n1.0\n")
    lines = output.splitlines()
    assert "Enter the initial point as 1 space-separated values:" in lines
    start = lines.index("Iteration 1:")
    assert lines[start : start + 3] == [
        "Iteration 1:",
        "Objective Function Value: 1.00000",
        "x-values: 1.00000 ",
    ]
    assert lines[-3:] == [
        "Convergence reached after 3 iterations.",
        "",
        "Optimization process completed.",
    ]


def test_manual_input_reprompts_on_bad_numbers():
    output = run_session("1\n1\n1\nquadratic\nabc\n1\n10\nx\n0.0001\n0.5\n\n1.0\n")
    lines = output.splitlines()
    assert "Please enter a valid integer." in lines
    assert "Please enter a valid number." in lines
    assert "Please enter 1 valid numbers." in lines
    assert lines[-1] == "Optimization process completed."


def test_unknown_objective_skips_initial_point():
    output = run_session("1\n1\n1\nsphere\n2\n10\n0.1\n0.1\n")
    lines = output.splitlines()
    assert not any(line.startswith("Enter the initial point") for line in lines)
    assert lines[-1] == "Error: Unknown objective function."


def test_file_input_to_file_output(write_config, tmp_path):
    config = write_config("Quadratic", 2, 10, 0.0001, 0.5, [6.0, 0.0])
    target = tmp_path / "out.txt"
    output = run_session(f"1\n0\n0\n{config}\n{target}\n")
    assert "Please provide the path for the output file:" in output
    assert target.read_text().splitlines() == [
        "Error: Initial point 6.0 is outside the bounds [-5.0, 5.0]"
    ]


def test_missing_config_file(tmp_path):
    output = run_session(f"1\n0\n1\n{tmp_path / 'missing.txt'}\n")
    assert output.splitlines()[-1] == "Error reading the file."


def test_end_of_input_exits():
    output = run_session("1\n")
    assert output.splitlines()[-1] == "Exiting Program..."
