import os
import subprocess
from typing import List, Sequence

from .errors import StitchFailedError
from .logging_utils import get_logger
from .manifest import MANIFEST_PATH, manifest_file

log = get_logger(__name__)


def build_concat_command(ffmpeg_bin_path, inputs_file_path, output_path) -> List[str]:
    # -safe 0: the concat demuxer refuses absolute paths and paths outside
    # the manifest's directory without it
    return [
        os.fspath(ffmpeg_bin_path),
        "-y",
        "-vn",
        "-f",
        "concat",
        "-safe",
        "0",
        "-i",
        os.fspath(inputs_file_path),
        "-c",
        "copy",
        os.fspath(output_path),
    ]


def run_concat(ffmpeg_bin_path, inputs_file_path, output_path) -> subprocess.CompletedProcess:
    cmd = build_concat_command(ffmpeg_bin_path, inputs_file_path, output_path)
    log.debug("running %s", cmd)
    try:
        proc = subprocess.run(cmd)
    except OSError as e:
        raise StitchFailedError(f"did not concatenate the files: ffmpeg command failed: {e}") from e
    if proc.returncode != 0:
        raise StitchFailedError(
            f"did not concatenate the files: exit not ok: {proc!r}", returncode=proc.returncode
        )
    return proc


def stitch_files(ffmpeg_bin_path, output_path, files: Sequence, manifest_path: str = MANIFEST_PATH) -> str:
    """Concatenate ``files`` into ``output_path`` with ffmpeg's concat demuxer.

    The streams are copied, not re-encoded, so all inputs should share one
    codec. The temporary manifest is removed whether or not ffmpeg succeeds.
    Returns the output path.
    """
    with manifest_file(files, manifest_path) as inputs_file_path:
        run_concat(ffmpeg_bin_path, inputs_file_path, output_path)
    log.info("successfully concatenated %d file(s) into %s", len(files), output_path)
    return os.fspath(output_path)
