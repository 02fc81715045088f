# wordcount/text/tokenizer.py
# whitespace tokenizer and a one-pass word reader over a text file

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Iterator, List, Optional

from wordcount.errors import WordReadError

logger = logging.getLogger(__name__)


def simple_tokenize(s: str) -> List[str]:
    """
    Split a line into words on runs of whitespace.
    Case and punctuation are kept as they are.
    """
    if not s:
        return []
    return s.split()


class FileWordReader:
    """
    Pulls words out of a text file one at a time.
    The file is opened in the constructor, so a missing path fails right
    away with FileNotFoundError (or another OSError). Lines are read
    lazily; a fault part way through raises WordReadError.
    The reader is single pass and closes the file once exhausted.

        with FileWordReader("book.txt") as reader:
            for word in reader:
                ...
    """

    def __init__(self, path: str, encoding: str = "utf-8") -> None:
        self.path = path
        self._fh = open(path, "r", encoding=encoding)
        self._pending: Deque[str] = deque()
        self._done = False
        logger.debug("opened %s", path)

    def next_word(self) -> Optional[str]:
        """Next word, or None once the input is exhausted."""
        while not self._pending:
            if self._done:
                return None
            line = self._read_line()
            if line is None:
                self.close()
                return None
            self._pending.extend(simple_tokenize(line))
        return self._pending.popleft()

    def _read_line(self) -> Optional[str]:
        try:
            line = self._fh.readline()
        except (OSError, UnicodeDecodeError) as e:
            self.close()
            raise WordReadError(f"failed reading {self.path}: {e}") from e
        return line or None

    def close(self) -> None:
        if not self._done:
            self._done = True
            self._fh.close()
            logger.debug("closed %s", self.path)

    def __iter__(self) -> Iterator[str]:
        while True:
            word = self.next_word()
            if word is None:
                return
            yield word

    def __enter__(self) -> "FileWordReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
