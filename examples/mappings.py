from simplelines import ArraySource, ErrorMessage, parseSimpleStream

# Maps framework names to the files they provide, one mapping per line:
#
#   Framework: file.proto, other.proto
MAPPINGS: str = """\
# Mappings for the shared frameworks
Foundation: NSString.proto, NSArray.proto
UIKit: UIView.proto   # views only
Broken
"""


class MappingCollector:
	def __init__(self) -> None:
		self.frameworks: dict[str, str] = {}

	def consume(self, line: str, error: ErrorMessage) -> bool:
		name, sep, files = line.partition(":")
		if not sep:
			error.message = f"Framework/file mapping without a colon: '{line}'"
			return False
		for path in files.split(","):
			if path := path.strip():
				self.frameworks[path] = name.strip()
		return True


collector = MappingCollector()
result = parseSimpleStream(ArraySource(MAPPINGS, 16), "mappings.txt", collector)
print(collector.frameworks)
print(result.error)
# EOF
