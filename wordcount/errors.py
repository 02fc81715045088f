# errors.py - exceptions raised by the word counter and handled by the CLI


class WordCountError(Exception):
    """Base class for word counter errors."""


class UsageError(WordCountError):
    """Bad command line arguments. The message is shown to the user as is."""


class WordReadError(WordCountError, OSError):
    """Reading or decoding the input failed part way through the file."""
