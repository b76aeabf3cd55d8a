"""Extract inline base64 data URIs from HTML/CSS documents into sibling files."""

__version__ = "0.1.0"
