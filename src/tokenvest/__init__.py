"""TokenVest - investment registry for tokenized real-world assets."""

__version__ = "0.1.0"
