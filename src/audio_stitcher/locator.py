import os
import subprocess
from typing import Iterable, List, Optional

from pydub.utils import which

from .errors import BinaryNotFoundError
from .logging_utils import get_logger

log = get_logger(__name__)

FFMPEG_ENV_VAR = "STITCHER_FFMPEG"
FALLBACK_PATHS = ("/bin/ffmpeg", "./vendor/ffmpeg/ffmpeg")


def default_candidates(explicit: Optional[str] = None) -> List[str]:
    """Build the prioritized list of ffmpeg binaries to probe.

    Order: the explicit path, $STITCHER_FFMPEG, the fixed fallback paths,
    then whatever ffmpeg is on PATH. Duplicates keep their first position.
    """
    candidates = []
    if explicit:
        candidates.append(explicit)
    from_env = os.environ.get(FFMPEG_ENV_VAR)
    if from_env:
        candidates.append(from_env)
    candidates.extend(FALLBACK_PATHS)
    on_path = which("ffmpeg")
    if on_path:
        candidates.append(on_path)

    unique = []
    for path in candidates:
        if path not in unique:
            unique.append(path)
    return unique


def probe_binary(path: str) -> bool:
    try:
        proc = subprocess.run(
            [path, "-h"], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
        )
    except OSError as e:
        log.debug("probe failed to start %s: %s", path, e)
        return False
    log.debug("probe %s exited with %d", path, proc.returncode)
    return proc.returncode == 0


def find_valid_ffmpeg_binary(paths_to_check: Iterable[str]) -> str:
    """Return the first candidate that runs `-h` with exit status 0."""
    paths_to_check = [os.fspath(p) for p in paths_to_check]
    for path in paths_to_check:
        if probe_binary(path):
            log.info("using ffmpeg binary %s", path)
            return path
    raise BinaryNotFoundError(paths_to_check)
