from enum import Enum
from pathlib import Path
from typing import Iterator, NamedTuple
from .utils.io import LineParser, asText, stripComment
from .utils.logging import LogLevel, debug, logged, warning
from .source import ArraySource, ByteSource, FileSource, SourceReadError
from .consumer import ErrorMessage, LineConsumer, TConsumeLine, asConsumer
from . import config

__doc__ = """
Parses "simple" files: one entry per line, `#` starting a comment that
runs to the end of the line, blank lines ignored. Each remaining line is
trimmed and given to a line consumer, which may stop the parsing by
rejecting it.

The result never depends on how the input is split into chunks by the
source.
"""

NO_ERROR_MESSAGE: str = "ConsumeLine failed without setting an error."


class ParseStatus(Enum):
	Success = 0
	Rejected = 1  # The consumer rejected a line
	ReadError = 2  # The source could not be opened or read


class ParseResult(NamedTuple):
	status: ParseStatus
	# The line that failed, or the number of lines read on success
	line: int = 0
	error: str | None = None

	@property
	def ok(self) -> bool:
		return self.status == ParseStatus.Success

	def __bool__(self) -> bool:
		return self.ok

	def check(self) -> "ParseResult":
		"""Returns this result on success, raises a `ParseError` otherwise."""
		if not self.ok:
			raise ParseError(self)
		return self


class ParseError(Exception):
	def __init__(self, result: ParseResult) -> None:
		super().__init__(result.error)
		self.result: ParseResult = result


def diagnostic(label: str, line: int, message: str) -> str:
	return f"error: {label} Line {line}, {message}"


class SimpleLineReader:
	"""Iterates on the `(line number, text)` of the non-empty lines of the
	source, with comments and surrounding whitespace removed. Chunks are
	only pulled from the source as lines are requested."""

	__slots__ = ["source", "parser"]

	def __init__(self, source: ByteSource) -> None:
		self.source: ByteSource = source
		self.parser: LineParser = LineParser()

	@property
	def line(self) -> int:
		"""The number of lines completed so far, including dropped ones."""
		return self.parser.line

	def __iter__(self) -> Iterator[tuple[int, str]]:
		for chunk in self.source:
			for n, raw in self.parser.feed(chunk):
				if text := stripComment(raw):
					yield n, asText(text)
		if last := self.parser.flush():
			n, raw = last
			if text := stripComment(raw):
				yield n, asText(text)


def iterSimpleLines(source: ByteSource) -> Iterator[tuple[int, str]]:
	return iter(SimpleLineReader(source))


def parseSimpleStream(
	source: ByteSource, label: str, consumer: LineConsumer | TConsumeLine
) -> ParseResult:
	"""Gives each line of the source to the consumer, stopping at the first
	rejected line. `label` prefixes diagnostics and is typically the path
	of the parsed file."""
	consume = asConsumer(consumer)
	reader = SimpleLineReader(source)
	error = ErrorMessage()
	lines = iter(reader)
	while True:
		# Only errors of the source are reported as read errors, the ones
		# raised by the consumer propagate.
		try:
			item = next(lines, None)
		except SourceReadError as e:
			n = reader.line + 1
			warning("Read failed", label=label, line=n, reason=str(e))
			return ParseResult(
				ParseStatus.ReadError, n, diagnostic(label, n, f"Read failed: {e}")
			)
		if item is None:
			return ParseResult(ParseStatus.Success, reader.line)
		n, line = item
		error.message = ""
		if not consume.consume(line, error):
			if logged(LogLevel.Debug):
				debug("Line rejected", label=label, line=n, text=line)
			return ParseResult(
				ParseStatus.Rejected,
				n,
				diagnostic(label, n, error.message or NO_ERROR_MESSAGE),
			)


def parseSimpleText(
	text: str | bytes,
	label: str,
	consumer: LineConsumer | TConsumeLine,
	*,
	blockSize: int = -1,
) -> ParseResult:
	return parseSimpleStream(ArraySource(text, blockSize), label, consumer)


def parseSimpleFile(
	path: Path | str,
	consumer: LineConsumer | TConsumeLine,
	*,
	blockSize: int = config.BLOCK_SIZE,
) -> ParseResult:
	"""Parses the file at `path`, using the path as the diagnostics label."""
	try:
		source = FileSource(path, blockSize)
	except OSError as e:
		warning("Unable to open file", path=str(path), reason=str(e))
		return ParseResult(
			ParseStatus.ReadError,
			0,
			f'error: Unable to open "{path}", {e.strerror or e}',
		)
	with source:
		return parseSimpleStream(source, str(path), consumer)


# EOF
