"""gitdelta — a syntax-highlighting pager for git diffs."""

__version__ = "0.1.0"
