import sys
import time
from enum import Enum
from typing import NamedTuple, TextIO
from contextvars import ContextVar
from .term import Term, colored
from .. import config

TPrimitive = bool | int | float | str | bytes | None

LogOrigin: ContextVar[str] = ContextVar("LogOrigin", default="simplelines")


class LogLevel(Enum):
	Debug = 0
	Info = 10
	Warning = 30  # A Warning
	Error = 40  # A managed error
	Exception = 50  # An un-managed error


LOG_LEVEL_COLOR = {
	LogLevel.Debug: 31,
	LogLevel.Info: 75,
	LogLevel.Warning: 202,
	LogLevel.Error: 160,
	LogLevel.Exception: 124,
}


class LogEntry(NamedTuple):
	origin: str
	time: float
	level: LogLevel = LogLevel.Info
	message: str | None = None
	code: int | str | None = None
	context: dict[str, TPrimitive] | None = None


def level(name: str) -> LogLevel:
	"""Returns the level with the given (case-insensitive) name, defaulting
	to `Warning`."""
	for item in LogLevel:
		if item.name.lower() == name.strip().lower():
			return item
	return LogLevel.Warning


LOG_LEVEL: LogLevel = level(config.LOG_LEVEL)


def stream() -> TextIO:
	return sys.stderr


def formatData(value: TPrimitive | dict[str, TPrimitive]) -> str:
	if value is None or value == {}:
		return "◌"
	elif isinstance(value, dict):
		return " ".join(f"{k}={formatData(v)}" for k, v in value.items())
	elif isinstance(value, str):
		return repr(value) if " " in value else value
	elif isinstance(value, bool):
		return "✓" if value else "✗"
	elif isinstance(value, float):
		return f"{value:0.2f}"
	else:
		return str(value)


def logged(lvl: LogLevel) -> bool:
	"""Tells if entries of the given level are currently written, so that
	callers can skip building expensive context."""
	return lvl.value >= LOG_LEVEL.value


def send(entry: LogEntry) -> LogEntry:
	if not logged(entry.level):
		return entry
	out = stream()
	code: str = f" [{entry.code}]" if entry.code is not None else ""
	if colored(out):
		clr: str = Term.Color(LOG_LEVEL_COLOR[entry.level])
		out.write(
			f"{clr}{Term.BOLD}[{entry.origin}]{Term.RESET}{clr}{code} {entry.message} {formatData(entry.context)}{Term.RESET}\n"
		)
	else:
		out.write(
			f"[{entry.origin}]{code} {entry.message} {formatData(entry.context)}\n"
		)
	out.flush()
	return entry


def entry(
	message: str,
	*,
	level: LogLevel,
	code: int | str | None = None,
	origin: str | None = None,
	context: dict[str, TPrimitive],
) -> LogEntry:
	return LogEntry(
		origin=origin or LogOrigin.get(),
		time=time.time(),
		level=level,
		message=message,
		code=code,
		context=context,
	)


def debug(message: str, *, origin: str | None = None, **context: TPrimitive) -> LogEntry:
	return send(entry(message, level=LogLevel.Debug, origin=origin, context=context))


def info(message: str, *, origin: str | None = None, **context: TPrimitive) -> LogEntry:
	return send(entry(message, level=LogLevel.Info, origin=origin, context=context))


def warning(
	message: str, *, origin: str | None = None, **context: TPrimitive
) -> LogEntry:
	return send(entry(message, level=LogLevel.Warning, origin=origin, context=context))


def error(
	message: str,
	code: int | str | None = None,
	*,
	origin: str | None = None,
	**context: TPrimitive,
) -> LogEntry:
	return send(
		entry(message, level=LogLevel.Error, code=code, origin=origin, context=context)
	)



def exception(
	exception: BaseException,
	message: str | None = None,
	*,
	origin: str | None = None,
	**context: TPrimitive,
) -> BaseException:
	send(
		entry(
			f"{message}: [{exception.__class__.__name__}] {exception}"
			if message
			else f"[{exception.__class__.__name__}] {exception}",
			level=LogLevel.Exception,
			origin=origin,
			context=context,
		)
	)
	if logged(LogLevel.Exception):
		out = stream()
		tb = exception.__traceback__
		while tb:
			code = tb.tb_frame.f_code
			out.write(
				f"... in {code.co_name:15s} at {tb.tb_lineno:4d} in {code.co_filename}\n",
			)
			tb = tb.tb_next
		out.flush()
	# Return the exception so that this function can be called like:
	#   raise exception(error)
	return exception


# EOF
