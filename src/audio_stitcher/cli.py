import sys
import argparse
from datetime import datetime
from dotenv import load_dotenv

from .discovery import look_for_files
from .errors import NoInputFilesError, StitcherError
from .locator import default_candidates, find_valid_ffmpeg_binary
from .logging_utils import setup_logging
from .stitch import stitch_files

DEFAULT_OUTPUT_TEMPLATE = "STITCH_OUTPUT_{}.wav"
TIMESTAMP_FORMAT = "%d-%b-%Y %H:%M"


def resolve_output_path(out=None, now=None):
    if out:
        return out
    now = now or datetime.now()
    return DEFAULT_OUTPUT_TEMPLATE.format(now.strftime(TIMESTAMP_FORMAT))


def run(input_path, out=None, ffmpeg=None):
    """Stitch every mp3/wav file in ``input_path`` and return the output path."""
    ffmpeg_bin_path = find_valid_ffmpeg_binary(default_candidates(ffmpeg))
    output_path = resolve_output_path(out)

    files_to_stitch = look_for_files(input_path)
    if not files_to_stitch:
        raise NoInputFilesError("found no files!")

    return stitch_files(ffmpeg_bin_path, output_path, files_to_stitch)


def main(argv=None):
    argv = argv if argv is not None else sys.argv[1:]
    parser = argparse.ArgumentParser(
        description="Concatenate the mp3/wav files of a directory into one file with ffmpeg."
    )
    parser.add_argument("--input-path", "-i", required=True, help="Directory to look for files in.")
    parser.add_argument(
        "--out",
        "-o",
        default=None,
        help="Output file. Its type should match the input files "
        "(default: STITCH_OUTPUT_<date time>.wav).",
    )
    parser.add_argument("--ffmpeg", default=None, help="ffmpeg binary to try before the defaults.")
    parser.add_argument("--env-file", "-e", default=".env")
    parser.add_argument("--log-level", default=None, help="Log level (e.g., INFO, DEBUG)")
    args = parser.parse_args(argv)

    if not args.input_path.strip():
        parser.error("--input-path must not be empty")

    load_dotenv(args.env_file, override=True)
    setup_logging(args.log_level)

    try:
        output_path = run(args.input_path, args.out, args.ffmpeg)
    except StitcherError as e:
        print("Error: " + str(e), file=sys.stderr)
        return 1

    print('Created "' + output_path + '"')
    return 0


if __name__ == "__main__":
    sys.exit(main())
