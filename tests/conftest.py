import os
import stat
import sys
from pathlib import Path

import pytest

FAKE_FFMPEG = """#!{python}
import json
import sys

args = sys.argv[1:]
with open({record!r}, "a", encoding="utf-8") as f:
    f.write(json.dumps(args) + "\\n")
if args == ["-h"]:
    sys.exit({help_status})
manifest = args[args.index("-i") + 1]
with open(manifest, encoding="utf-8") as f:
    contents = f.read()
if {concat_status} == 0:
    with open(args[-1], "w", encoding="utf-8") as f:
        f.write(contents)
sys.exit({concat_status})
"""


def make_fake_ffmpeg(directory: Path, name="ffmpeg", help_status=0, concat_status=0) -> Path:
    """Write an executable that answers `-h` and copies the manifest to the output path.

    Every invocation's arguments are appended as JSON lines to ``<name>.calls``.
    """
    directory.mkdir(parents=True, exist_ok=True)
    script = directory / name
    record = directory / f"{name}.calls"
    script.write_text(
        FAKE_FFMPEG.format(
            python=sys.executable,
            record=str(record),
            help_status=help_status,
            concat_status=concat_status,
        )
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def fake_ffmpeg(tmp_path):
    return make_fake_ffmpeg(tmp_path / "bin")


@pytest.fixture
def sounds_dir(tmp_path):
    sounds = tmp_path / "sounds"
    sounds.mkdir()
    for name in ("a.wav", "b.mp3", "c.txt"):
        (sounds / name).write_bytes(b"\x00" * 16)
    return sounds


@pytest.fixture
def in_tmp_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    # empty means unset, and lets monkeypatch undo whatever a .env file loads
    monkeypatch.setenv("STITCHER_FFMPEG", "")
    return tmp_path


def listed_audio(directory):
    """Supported files of ``directory`` in os.listdir order."""
    return [
        os.path.join(str(directory), name)
        for name in os.listdir(directory)
        if os.path.splitext(name)[1] in (".mp3", ".wav") and os.path.isfile(os.path.join(directory, name))
    ]
