"""Material sources yielding (name, markup) pairs.

Markup files are read as bytes so the parser can honour byte-order marks and
encoding declarations (material definitions are often saved as UTF-16).
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .errors import SourceError
from .models import ManifestEntry

logger = logging.getLogger(__name__)


def _read_markup(path: Path) -> bytes:
    try:
        with open(path, 'rb') as f:
            return f.read()
    except FileNotFoundError:
        raise SourceError(str(path), 'File not found')
    except PermissionError:
        raise SourceError(str(path), 'Permission denied')
    except OSError as e:
        raise SourceError(str(path), str(e))


class DirectoryMaterialSource:
    """Yields one material per markup file in a directory.

    Files are visited in name order so repeated exports are identical. The
    material name is the file stem.

    Example:
        >>> source = DirectoryMaterialSource("./materials")
        >>> for name, markup in source:
        ...     print(name)
    """

    def __init__(self, directory: str, pattern: str = "*.xml"):
        self.directory = Path(directory)
        self.pattern = pattern

    def paths(self) -> List[Path]:
        """Return matching files, sorted by name.

        Raises:
            SourceError: If the directory does not exist
        """
        if not self.directory.is_dir():
            raise SourceError(str(self.directory), 'Not a directory')
        return sorted(
            (p for p in self.directory.glob(self.pattern) if p.is_file()),
            key=lambda p: p.name,
        )

    def __len__(self) -> int:
        return len(self.paths())

    def __iter__(self) -> Iterator[Tuple[str, bytes]]:
        for path in self.paths():
            logger.debug(f"Reading material markup from {path}")
            yield path.stem, _read_markup(path)


class ManifestMaterialSource:
    """Yields the materials listed in an export manifest, in listed order.

    Relative paths resolve against base_dir (normally the directory holding
    the configuration file). Names are used verbatim.
    """

    def __init__(self, entries: List[ManifestEntry], base_dir: Optional[str] = None):
        self.entries = list(entries)
        self.base_dir = Path(base_dir) if base_dir else Path('.')

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Tuple[str, bytes]]:
        for entry in self.entries:
            path = Path(entry.path)
            if not path.is_absolute():
                path = self.base_dir / path
            logger.debug(f"Reading material '{entry.name}' from {path}")
            yield entry.name, _read_markup(path)
