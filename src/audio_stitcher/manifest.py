"""The concat manifest handed to ffmpeg.

ffmpeg's concat demuxer reads a text file with one ``file <path>`` line per
segment. The manifest always lives at a fixed name in the current directory.
"""
import os
from contextlib import contextmanager
from typing import Iterable, Iterator, List

from .errors import ManifestCleanupError, ManifestWriteError, PathEncodingError
from .logging_utils import get_logger

log = get_logger(__name__)

MANIFEST_PATH = "./_stitcher_tmp_.txt"


def build_manifest(files: Iterable) -> str:
    lines: List[str] = []
    for file in files:
        path = os.fspath(file)
        if isinstance(path, bytes):
            try:
                path = path.decode("utf-8")
            except UnicodeDecodeError:
                raise PathEncodingError(f"failed to render {path!r} as text for the manifest")
        try:
            path.encode("utf-8")
        except UnicodeEncodeError:
            raise PathEncodingError(f"failed to render {path!r} as text for the manifest")
        lines.append("file " + path + "\n")
    return "".join(lines)


def write_manifest(files: Iterable, path: str = MANIFEST_PATH) -> str:
    contents = build_manifest(files)
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(contents)
    except OSError as e:
        raise ManifestWriteError(f"failed to write lines to the temp file {path}: {e}") from e
    log.debug("wrote manifest %s", path)
    return path


def remove_manifest(path: str = MANIFEST_PATH) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        return
    except OSError as e:
        raise ManifestCleanupError(f"failed to clean up the temporary file {path}: {e}") from e


@contextmanager
def manifest_file(files: Iterable, path: str = MANIFEST_PATH) -> Iterator[str]:
    """Write the manifest, yield its path and always remove it afterwards.

    If the body raised, a failed removal is only logged so the original
    error reaches the caller.
    """
    try:
        write_manifest(files, path)
        yield path
    except BaseException:
        try:
            remove_manifest(path)
        except ManifestCleanupError as e:
            log.warning("%s", e)
        raise
    remove_manifest(path)
