import io
import pytest
from simplelines import ArraySource, FileSource, StreamSource, SourceReadError


def test_array_blocks():
	source = ArraySource(b"abcdefg", 3)
	assert source.sizeHint() == 7
	assert list(source) == [b"abc", b"def", b"g"]
	assert source.nextChunk() is None


def test_array_whole():
	assert list(ArraySource("héllo")) == ["héllo".encode("utf8")]
	assert list(ArraySource(b"")) == []


def test_zero_block_size():
	with pytest.raises(ValueError):
		ArraySource(b"abc", 0)
	with pytest.raises(ValueError):
		StreamSource(io.BytesIO(b"abc"), 0)


def test_stream_blocks():
	stream = io.BytesIO(b"abcde")
	source = StreamSource(stream, 2)
	assert list(source) == [b"ab", b"cd", b"e"]
	source.close()
	# Streams given by the caller are left open
	assert not stream.closed


def test_stream_read_all():
	assert list(StreamSource(io.BytesIO(b"a\nb\n"), -1)) == [b"a\nb\n"]


def test_stream_error():
	class Broken(io.RawIOBase):
		def readable(self) -> bool:
			return True

		def readinto(self, buffer) -> int:  # type: ignore
			raise OSError(5, "Input/output error")

	with pytest.raises(SourceReadError) as info:
		StreamSource(Broken(), 4).nextChunk()  # type: ignore
	assert str(info.value) == "Input/output error"
	assert isinstance(info.value.__cause__, OSError)


def test_file_source(tmp_path):
	path = tmp_path / "entries.txt"
	path.write_bytes(b"one\ntwo\n")
	with FileSource(path, 3) as source:
		assert source.sizeHint() == 8
		assert b"".join(source) == b"one\ntwo\n"
	assert source.stream.closed


def test_file_source_missing(tmp_path):
	with pytest.raises(FileNotFoundError):
		FileSource(tmp_path / "missing.txt")


# EOF
