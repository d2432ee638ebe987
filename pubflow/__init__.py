"""Build, upload and verify Python distributions."""

__version__ = "0.1.0"
