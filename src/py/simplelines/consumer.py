from typing import Callable, Protocol, runtime_checkable
from mypy_extensions import mypyc_attr


class ErrorMessage:
	"""The slot where a consumer writes why it rejected a line."""

	__slots__ = ["message"]

	def __init__(self, message: str = "") -> None:
		self.message: str = message

	def __bool__(self) -> bool:
		return bool(self.message)

	def __str__(self) -> str:
		return self.message


@runtime_checkable
class LineConsumer(Protocol):
	"""Anything with a `consume` method qualifies. `consume` receives one
	trimmed, comment-free line and returns `False` to stop the parsing,
	optionally setting `error.message`."""

	def consume(self, line: str, error: ErrorMessage) -> bool: ...


TConsumeLine = Callable[[str, ErrorMessage], bool]


class FunctionConsumer:
	__slots__ = ["function"]

	def __init__(self, function: TConsumeLine) -> None:
		self.function: TConsumeLine = function

	def consume(self, line: str, error: ErrorMessage) -> bool:
		return bool(self.function(line, error))


def asConsumer(value: LineConsumer | TConsumeLine) -> LineConsumer:
	"""Returns a consumer for the given consumer or `consume`-like callable."""
	if isinstance(value, LineConsumer):
		return value
	elif callable(value):
		return FunctionConsumer(value)
	else:
		raise ValueError(f"Expected a line consumer or a callable, got: {value}")


@mypyc_attr(allow_interpreted_subclasses=True)
class LineCollector:
	"""Collects the lines it is given. When `reject` is set, the matching
	line is rejected, with a message unless `silent` is set."""

	def __init__(
		self,
		lines: list[str] | None = None,
		*,
		reject: str | None = None,
		silent: bool = False,
	) -> None:
		self.lines: list[str] = [] if lines is None else lines
		self.reject: str | None = reject
		self.silent: bool = silent
		self.calls: int = 0

	def consume(self, line: str, error: ErrorMessage) -> bool:
		self.calls += 1
		if self.reject is not None and line == self.reject:
			if not self.silent:
				error.message = f"Rejected '{line}'"
			return False
		self.lines.append(line)
		return True

	def __str__(self) -> str:
		return f"LineCollector({len(self.lines)} lines)"


# EOF
