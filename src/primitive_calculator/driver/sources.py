"""Read arithmetic expressions from a text file or an archive."""
import lzma
from pathlib import Path
import tarfile
import tempfile
from typing import Callable, Dict, List, Optional
import zipfile

import py7zr
from py7zr.exceptions import Bad7zFile
from pydantic import BaseModel, ConfigDict, Field, FilePath


# Undecodable bytes become U+FFFD and are then reported by the tokenizer as bad characters
ENCODING = "utf-8"
DECODE_ERRORS = "replace"

# Library errors raised when an archive is corrupt or truncated
ARCHIVE_ERRORS = (zipfile.BadZipFile, tarfile.TarError, Bad7zFile, lzma.LZMAError, EOFError)


def _decode(data: bytes) -> str:
    return data.decode(ENCODING, errors=DECODE_ERRORS)


def _first_txt(names: List[str]) -> Optional[str]:
    return next((name for name in names if name.endswith(".txt")), None)


def _read_zip(path: Path) -> Optional[str]:
    with zipfile.ZipFile(path, "r") as zf:
        member = _first_txt(zf.namelist())
        return None if member is None else _decode(zf.read(member))


def _read_tar_xz(path: Path) -> Optional[str]:
    with tarfile.open(path, "r:xz") as tf:
        member = _first_txt([m.name for m in tf.getmembers() if m.isfile()])
        if member is None:
            return None
        return _decode(tf.extractfile(member).read())


def _read_7z(path: Path) -> Optional[str]:
    with py7zr.SevenZipFile(path, mode="r") as archive:
        member = _first_txt(archive.getnames())
        if member is None:
            return None
        # py7zr only extracts to disk, so go through a scratch directory
        with tempfile.TemporaryDirectory() as tmpdir:
            archive.extract(path=tmpdir, targets=[member])
            return _decode((Path(tmpdir) / member).read_bytes())


# Archive readers keyed by the file name ending they handle
ARCHIVE_READERS: Dict[str, Callable[[Path], Optional[str]]] = {
    ".zip": _read_zip,
    ".tar.xz": _read_tar_xz,
    ".7z": _read_7z,
}


class ExpressionSource(BaseModel):
    """
    File holding one arithmetic expression per line.

    Supported formats:
    - plain .txt file
    - .zip, .tar.xz or .7z archive, whose first .txt member is read

    Invalid UTF-8 never aborts reading: the offending line reaches the
    calculator with a replacement character and fails on its own.
    """

    model_config = ConfigDict(frozen=True)

    path: FilePath = Field(..., description="Path to the expressions file or archive")

    def read_text(self) -> str:
        """
        Return the raw content of the expressions file.

        :return: File content
        :rtype: str
        :raises ValueError: If the archive is corrupt, of an unsupported format, or holds no .txt file
        """
        if self.path.suffix == ".txt":
            return _decode(self.path.read_bytes())

        suffix = next((s for s in ARCHIVE_READERS if self.path.name.endswith(s)), None)
        if suffix is None:
            raise ValueError(f"📄❌ Unsupported archive format: {self.path.suffix}")

        try:
            content = ARCHIVE_READERS[suffix](self.path)
        except ARCHIVE_ERRORS as exc:
            raise ValueError(f"📄❌ Corrupt {suffix} archive: {exc}") from exc

        if content is None:
            raise ValueError(f"📄❌ No .txt file found in {suffix} archive")
        return content

    def read_lines(self) -> List[str]:
        """
        Return the expressions file split into lines, line endings removed.

        :return: Lines of the expressions file
        :rtype: List[str]
        """
        return self.read_text().splitlines()
