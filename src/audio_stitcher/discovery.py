import os
from typing import List, Optional

from .logging_utils import get_logger

log = get_logger(__name__)

SUPPORTED_EXTENSIONS = ("mp3", "wav")


def _is_text(value: str) -> bool:
    # undecodable file name bytes come back from os as lone surrogates
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def filter_supported_extensions(path: str) -> Optional[str]:
    """Return ``path`` if its extension is one we stitch, otherwise None.

    Matching is case-sensitive: ``a.WAV`` is dropped.
    """
    ext = os.path.splitext(path)[1]
    if not ext or not _is_text(ext):
        return None
    if ext[1:] in SUPPORTED_EXTENSIONS:
        return path
    return None


def look_for_files(in_path) -> List[str]:
    """List the supported audio files directly inside ``in_path``.

    The result keeps directory-iteration order and is not sorted. A directory
    that cannot be read gives an empty list, same as an empty one.
    """
    try:
        with os.scandir(in_path) as it:
            entries = list(it)
    except OSError as e:
        log.debug("could not read %s: %s", in_path, e)
        return []

    files = []
    for entry in entries:
        try:
            if not entry.is_file():
                continue
        except OSError:
            continue
        path = filter_supported_extensions(os.path.join(os.fspath(in_path), entry.name))
        if path is not None:
            files.append(path)
    log.info("found %d file(s) in %s", len(files), in_path)
    return files
