"""mdcorpus - serve a directory of markdown files as a cross-linked site."""

__version__ = "0.1.0"
