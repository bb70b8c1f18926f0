from os import getenv
from .utils.io import DEFAULT_ENCODING  # NOQA: F401

# Size of the blocks read from files and streams, a negative value reads
# the whole input at once.
BLOCK_SIZE: int = int(getenv("SIMPLELINES_BLOCK_SIZE", 8192))

# One of Debug, Info, Warning, Error, Exception
LOG_LEVEL: str = getenv("SIMPLELINES_LOG_LEVEL", "Warning")

# EOF
