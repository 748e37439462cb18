"""Loading word files from a resource directory"""

import random
from pathlib import Path

from ..exceptions import WordSourceError
from ..logging_config import get_logger
from ..utils.error_handler import handle_errors
from .constants import WordFileConstants
from .word_store import WordStore

logger = get_logger(__name__)


class ResourceLoader:
    """Looks up text resources by name inside a single directory.

    A name is matched exactly first; failing that, its stem is tried with each
    of the known text asset extensions, so ``words`` and ``words.txt`` both
    resolve to ``words.txt``.
    """

    def __init__(self, resource_dir: Path | str) -> None:
        self.resource_dir = Path(resource_dir)

    def resolve(self, name: str) -> Path | None:
        """Find the file backing a resource name"""
        exact = self.resource_dir / name
        if exact.is_file():
            return exact

        stem = Path(name).stem
        for ext in WordFileConstants.TEXT_ASSET_EXTENSIONS:
            candidate = self.resource_dir / f"{stem}{ext}"
            if candidate.is_file():
                return candidate
        return None

    def read_text(self, name: str) -> str:
        """Read a resource as UTF-8 text, raising WordSourceError on failure"""
        path = self.resolve(name)
        if path is None:
            raise WordSourceError(name, f"not found in {self.resource_dir}")

        try:
            text = path.read_text(encoding=WordFileConstants.ENCODING)
        except UnicodeDecodeError as e:
            raise WordSourceError(name, "file is not valid UTF-8 text", e) from e
        except OSError as e:
            raise WordSourceError(name, "file could not be read", e) from e

        logger.debug(f"Read {len(text)} characters from {path}")
        return text

    @handle_errors(
        default_return=None, reraise_on=TypeError, operation_name="load_word_file"
    )
    def load_text(self, name: str) -> str | None:
        """Read a resource; logs an error and returns None if it is unavailable"""
        return self.read_text(name)

    def load_store(self, name: str, rng: random.Random | None = None) -> WordStore:
        """Load and parse a word file; a missing file gives an empty store"""
        return WordStore.load(self.load_text(name), rng=rng)
