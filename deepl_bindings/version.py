from typing import Final

VERSION: Final[str] = "0.4.0"
