import argparse
import sys
from .parser import parseSimpleFile
from .consumer import ErrorMessage
from .utils.io import DEFAULT_ENCODING
from .utils.logging import error, exception, info
from . import config


def printable(line: str) -> str:
	"""Replaces the bytes that were not valid text in the input."""
	return line.encode(DEFAULT_ENCODING, "surrogateescape").decode(
		DEFAULT_ENCODING, "replace"
	)


def run(args: list[str] | None = None) -> int:
	"""Parses each given file, printing its entries (unless quiet) and its
	diagnostic when it fails. Returns the process exit code."""
	parser = argparse.ArgumentParser(
		prog="simplelines",
		description="Lists the entries of simple line-oriented files",
		formatter_class=argparse.ArgumentDefaultsHelpFormatter,
	)
	parser.add_argument("files", metavar="FILE", nargs="+", help="Files to parse")
	parser.add_argument(
		"-b",
		"--block-size",
		action="store",
		dest="blockSize",
		type=int,
		help="Size of the blocks read from files, negative to read them at once",
		default=config.BLOCK_SIZE,
	)
	parser.add_argument(
		"-q",
		"--quiet",
		action="store_true",
		dest="quiet",
		help="Only reports errors",
	)
	options = parser.parse_args(args)
	if options.blockSize == 0:
		parser.error("block size must not be 0")

	failed: int = 0
	for path in options.files:

		def consume(line: str, _: ErrorMessage, path: str = path) -> bool:
			if not options.quiet:
				sys.stdout.write(f"{path}: {printable(line)}\n")
			return True

		try:
			result = parseSimpleFile(path, consume, blockSize=options.blockSize)
		except OSError as e:
			# The output went away (broken pipe, full disk)
			exception(e, "Unable to write entries", path=path)
			return 1
		if not result:
			failed += 1
			sys.stderr.write(f"{result.error}\n")
	if failed:
		error("Parsing failed", 1, files=len(options.files), failed=failed)
		return 1
	info("Parsing done", files=len(options.files))
	return 0


def main() -> None:
	sys.exit(run())


# EOF
