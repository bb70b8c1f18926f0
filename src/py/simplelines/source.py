import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Iterator
from mypy_extensions import mypyc_attr
from .utils.io import asBytes
from . import config


class SourceReadError(OSError):
	"""Raised by a source when the underlying input fails while being read,
	as opposed to reaching its end."""


def checkBlockSize(blockSize: int) -> int:
	if blockSize == 0:
		raise ValueError("Block size must be positive, or negative to read everything")
	return blockSize


@mypyc_attr(allow_interpreted_subclasses=True)
class ByteSource(ABC):
	"""A forward-only source of byte chunks. Chunks have no relationship
	with lines: a chunk may end anywhere, including in the middle of a
	line."""

	@abstractmethod
	def nextChunk(self) -> bytes | None:
		"""Returns the next (non-empty) chunk, or `None` at the end of the input."""

	def sizeHint(self) -> int | None:
		"""Returns the expected total size in bytes, when known."""
		return None

	def close(self) -> None:
		pass

	def __iter__(self) -> Iterator[bytes]:
		while (chunk := self.nextChunk()) is not None:
			yield chunk

	def __enter__(self) -> "ByteSource":
		return self

	def __exit__(self, *args: object) -> None:
		self.close()


class ArraySource(ByteSource):
	"""Serves an in-memory buffer in blocks of `blockSize` bytes, or all
	at once when `blockSize` is negative."""

	__slots__ = ["data", "blockSize", "offset"]

	def __init__(self, data: bytes | bytearray | str, blockSize: int = -1) -> None:
		super().__init__()
		self.data: bytes = asBytes(data)
		self.blockSize: int = checkBlockSize(blockSize)
		self.offset: int = 0

	def nextChunk(self) -> bytes | None:
		n = len(self.data)
		if self.offset >= n:
			return None
		end = n if self.blockSize < 0 else min(n, self.offset + self.blockSize)
		chunk = self.data[self.offset : end]
		self.offset = end
		return chunk

	def sizeHint(self) -> int | None:
		return len(self.data)

	def __str__(self) -> str:
		return f"ArraySource({self.offset}/{len(self.data)}, blockSize={self.blockSize})"


class StreamSource(ByteSource):
	"""Reads blocks from a binary file-like object. Errors raised by the
	stream are reported as `SourceReadError`."""

	__slots__ = ["stream", "blockSize", "closing"]

	def __init__(
		self,
		stream: BinaryIO,
		blockSize: int = config.BLOCK_SIZE,
		*,
		closing: bool = False,
	) -> None:
		super().__init__()
		self.stream: BinaryIO = stream
		self.blockSize: int = checkBlockSize(blockSize)
		self.closing: bool = closing

	def nextChunk(self) -> bytes | None:
		try:
			chunk = self.stream.read(self.blockSize)
		except OSError as e:
			raise SourceReadError(e.strerror or str(e)) from e
		return bytes(chunk) if chunk else None

	def sizeHint(self) -> int | None:
		try:
			return os.fstat(self.stream.fileno()).st_size
		except (OSError, AttributeError, ValueError):
			return None

	def close(self) -> None:
		if self.closing:
			self.stream.close()


class FileSource(StreamSource):
	"""Reads the file at `path`, opening it right away so that a missing or
	unreadable file fails before any parsing happens."""

	__slots__ = ["path"]

	def __init__(self, path: Path | str, blockSize: int = config.BLOCK_SIZE) -> None:
		checkBlockSize(blockSize)
		self.path: Path = Path(path)
		super().__init__(open(self.path, "rb"), blockSize, closing=True)

	def __str__(self) -> str:
		return f"FileSource({self.path}, blockSize={self.blockSize})"


# EOF
