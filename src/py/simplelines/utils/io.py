from typing import Iterator

DEFAULT_ENCODING: str = "utf8"
EOL: bytes = b"\n"
COMMENT: bytes = b"#"
# ASCII whitespace, so that CRLF input trims like LF input
WHITESPACE: bytes = b" \t\r\v\f"


def asBytes(value: str | bytes | bytearray) -> bytes:
	if isinstance(value, bytes):
		return value
	elif isinstance(value, bytearray):
		return bytes(value)
	elif isinstance(value, str):
		return bytes(value, DEFAULT_ENCODING)
	else:
		raise ValueError(f"Expected bytes or str, got: {value}")


def asText(value: bytes | bytearray) -> str:
	"""Decodes without validating: undecodable bytes are kept as surrogates."""
	return value.decode(DEFAULT_ENCODING, errors="surrogateescape")


def stripComment(line: bytes) -> bytes:
	"""Removes the comment (if any) and the surrounding whitespace."""
	i = line.find(COMMENT)
	return (line if i == -1 else line[:i]).strip(WHITESPACE)


class LineParser:
	"""Reassembles chunks into lines, carrying the bytes of an unterminated
	line over to the next chunk. Lines are numbered from 1 as they are
	completed, whether or not they end up being empty."""

	__slots__ = ["buffer", "line"]

	def __init__(self) -> None:
		self.buffer: bytearray = bytearray()
		self.line: int = 0

	def feed(self, chunk: bytes) -> Iterator[tuple[int, bytes]]:
		"""Yields the `(number, line)` of each line completed by `chunk`,
		the remainder is kept in the buffer."""
		start = 0
		end = chunk.find(EOL)
		while end != -1:
			if self.buffer:
				self.buffer += chunk[start:end]
				line = bytes(self.buffer)
				self.buffer.clear()
			else:
				line = chunk[start:end]
			self.line += 1
			yield self.line, line
			start = end + 1
			end = chunk.find(EOL, start)
		if start < len(chunk):
			self.buffer += chunk[start:]

	def flush(self) -> tuple[int, bytes] | None:
		"""Returns the trailing unterminated line, if any."""
		if not self.buffer:
			return None
		line = bytes(self.buffer)
		self.buffer.clear()
		self.line += 1
		return self.line, line


# EOF
