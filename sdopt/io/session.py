"""Interactive prompt protocol around the run coordinator.

The session asks whether to continue, where to read the run configuration
from (a config file or manual entry) and where to send the trace (a file or
the console). Malformed answers re-prompt locally; configuration errors are
written through the selected sink in place of the trace.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, List, Sequence, TextIO, TypeVar

from ..logging import get_logger
from ..optimize import RunConfig, run_optimization, validate_objective_name
from .config_file import ConfigFileError, ConfigNotFoundError, parse_point, read_config
from .sink import write_trace, write_trace_file

logger = get_logger(__name__)

T = TypeVar("T")

ENTER_PROMPT = "Press 0 to exit or 1 to enter the program:"
INPUT_PROMPT = "Press 0 for .txt input or 1 for manual input:"
OUTPUT_PROMPT = "Press 0 for .txt output or 1 for console output:"
CONFIG_PATH_PROMPT = "Please provide the path to the config file:"
OUTPUT_PATH_PROMPT = "Please provide the path for the output file:"
OBJECTIVE_PROMPT = "Enter the choice of objective function (quadratic, rosenbrock or rosenbrock_bonus):"
DIMENSIONALITY_PROMPT = "Enter the dimensionality of the problem:"
ITERATIONS_PROMPT = "Enter the number of iterations:"
TOLERANCE_PROMPT = "Enter the tolerance:"
STEP_SIZE_PROMPT = "Enter the step size:"
POINT_PROMPT = "Enter the initial point as {dim} space-separated values:"

INVALID_BINARY = "Please enter a valid input (0 or 1)."
INVALID_INTEGER = "Please enter a valid integer."
INVALID_NUMBER = "Please enter a valid number."
INVALID_POINT = "Please enter {dim} valid numbers."
EXITING = "Exiting Program..."
WRITE_FAILED = "Error writing the file."

FILE = 0
MANUAL = 1
CONSOLE = 1


class TokenReader:
    """Whitespace tokenizer over a line-oriented text stream.

    Raises ``EOFError`` once the stream is exhausted.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._pending: Deque[str] = deque()

    def _readline(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError("input exhausted")
        return line

    def next_token(self) -> str:
        while not self._pending:
            self._pending.extend(self._readline().split())
        return self._pending.popleft()

    def next_line(self) -> str:
        """Drop what is left of the current line and return the next one."""
        self._pending.clear()
        return self._readline().strip()


class InteractiveSession:
    """One pass through the prompt protocol.

    Parameters
    ----------
    stdin, stdout:
        Streams for user answers and for prompts, messages and console
        traces.
    """

    def __init__(self, stdin: TextIO, stdout: TextIO):
        self.reader = TokenReader(stdin)
        self.stdout = stdout

    def say(self, message: str) -> None:
        print(message, file=self.stdout)

    def run(self) -> int:
        """Run the protocol and return the process exit code."""
        try:
            self._run()
        except EOFError:
            logger.debug("Input closed before the session finished")
            self.say(EXITING)
        return 0

    def _run(self) -> None:
        if self.ask_binary(ENTER_PROMPT) == 0:
            self.say(EXITING)
            return
        source = self.ask_binary(INPUT_PROMPT)
        destination = self.ask_binary(OUTPUT_PROMPT)
        if source == FILE:
            lines = self._from_file()
        else:
            lines = self._from_prompts()
        if lines is not None:
            self.emit(lines, destination)

    def _from_file(self) -> List[str] | None:
        self.say(CONFIG_PATH_PROMPT)
        path = self.reader.next_line()
        try:
            config = read_config(path)
        except ConfigNotFoundError as exc:
            self.say(str(exc))
            return None
        except ConfigFileError as exc:
            self.say(f"Error: {exc}")
            return None
        return run_optimization(config).lines

    def _from_prompts(self) -> List[str]:
        self.say(OBJECTIVE_PROMPT)
        name = self.reader.next_token()
        dimensionality = self._ask(DIMENSIONALITY_PROMPT, int, INVALID_INTEGER)
        iterations = self._ask(ITERATIONS_PROMPT, int, INVALID_INTEGER)
        tolerance = self._ask(TOLERANCE_PROMPT, float, INVALID_NUMBER)
        step_size = self._ask(STEP_SIZE_PROMPT, float, INVALID_NUMBER)
        # an unknown name ends the run before the initial point is read
        errors = validate_objective_name(name)
        if errors:
            return errors
        point = self.ask_point(dimensionality)
        config = RunConfig(
            objective_name=name,
            dimensionality=dimensionality,
            max_iterations=iterations,
            tolerance=tolerance,
            step_size=step_size,
            initial_point=tuple(point),
        )
        return run_optimization(config).lines

    def _ask(self, prompt: str, kind: Callable[[str], T], invalid: str) -> T:
        while True:
            self.say(prompt)
            token = self.reader.next_token()
            try:
                return kind(token)
            except ValueError:
                self.say(invalid)

    def ask_binary(self, prompt: str) -> int:
        while True:
            value = self._ask(prompt, int, INVALID_BINARY)
            if value in (0, 1):
                return value
            self.say(INVALID_BINARY)

    def ask_point(self, dimensionality: int) -> List[float]:
        while True:
            self.say(POINT_PROMPT.format(dim=dimensionality))
            line = self.reader.next_line()
            try:
                point = parse_point(line)
            except ConfigFileError:
                point = []
            if point:
                return point
            self.say(INVALID_POINT.format(dim=dimensionality))

    def emit(self, lines: Sequence[str], destination: int) -> None:
        if destination == CONSOLE:
            write_trace(lines, self.stdout)
            return
        self.say(OUTPUT_PATH_PROMPT)
        path = self.reader.next_line()
        try:
            write_trace_file(lines, path)
        except OSError as exc:
            logger.error("Cannot write trace to %s: %s", path, exc)
            self.say(WRITE_FAILED)


__all__ = ["InteractiveSession", "TokenReader"]
