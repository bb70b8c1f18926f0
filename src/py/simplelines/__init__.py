from .parser import (
	ParseResult,
	ParseStatus,
	ParseError,
	iterSimpleLines,
	parseSimpleStream,
	parseSimpleText,
	parseSimpleFile,
)  # NOQA: F401
from .consumer import ErrorMessage, LineConsumer, LineCollector, asConsumer  # NOQA: F401
from .source import (
	ByteSource,
	ArraySource,
	StreamSource,
	FileSource,
	SourceReadError,
)  # NOQA: F401


# EOF
