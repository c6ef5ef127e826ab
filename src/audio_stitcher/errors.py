class StitcherError(Exception):
    """Base error for audio-stitcher."""


class BinaryNotFoundError(StitcherError):
    """Raised when none of the candidate ffmpeg binaries can be run."""

    def __init__(self, checked_paths):
        self.checked_paths = list(checked_paths)
        super().__init__(
            f"failed to find a valid ffmpeg binary. checked paths: {self.checked_paths}"
        )


class NoInputFilesError(StitcherError):
    """Raised when the input directory yields nothing to stitch."""


class ManifestWriteError(StitcherError):
    """Raised when the concat manifest cannot be written."""


class PathEncodingError(ManifestWriteError):
    """Raised when an input path cannot be rendered as text for the manifest."""


class ManifestCleanupError(StitcherError):
    """Raised when the temporary manifest cannot be removed."""


class StitchFailedError(StitcherError):
    """Raised when ffmpeg cannot be started or exits with a non-zero status."""

    def __init__(self, message, returncode=None):
        self.returncode = returncode
        super().__init__(message)
