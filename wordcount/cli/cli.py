"""
cli.py - command line word counter
Usage:
  wordcount [-b | -a | -h] [-frequency | -num_unique] <filename>

Features:
- Backend chosen by flag from the counter registry (BST, AVL tree, hash table)
- Frequency report (count desc, then word asc) followed by a lexicographic listing
- Unique word count
- Every failure ends in a plain message on stdout and a normal return
- Uses Rich for console output, with markup/highlighting off; lines carrying
  user data (words, paths) bypass rendering so control characters survive
"""

import sys
from typing import Callable, Dict, List, Optional, Sequence

from rich.console import Console

from wordcount.core.data_count import DataCount
from wordcount.core.merge_sort import frequency_order, lexicographic_order
from wordcount.core.protocols import DataCounterProtocol
from wordcount.core.registry import CounterRegistry, default_registry
from wordcount.errors import UsageError, WordReadError
from wordcount.text.tokenizer import FileWordReader
from wordcount.utils.config_manager import Config
from wordcount.utils.logger_utils import configure_logging, time_block

# initialise console for plain, unwrapped output
console = Console(markup=False, emoji=False, highlight=False, soft_wrap=True)

USAGE = "Usage: [-b | -a | -h] [-frequency | -num_unique] <filename>"

MODE_HELP = [
    ("-frequency", "Print all the word/frequency pairs, ordered by frequency, "
                   "and then by the words in lexicographic order."),
    ("-num_unique", "Print the number of unique words in the document. "
                    "This is the total number of distinct (different) words in the document. "
                    "Words that appear more than once are only counted as a single word for "
                    "this statistic"),
]


# reports -------------------------------------------------------------------------
def count_words(reader: FileWordReader, counter: DataCounterProtocol) -> List[DataCount]:
    """Feed every word from reader into counter and return its snapshot."""
    word = reader.next_word()
    while word is not None:
        counter.inc_count(word)
        word = reader.next_word()
    return counter.get_counts()


def _write_raw(line: str) -> None:
    # Rich strips control codes while rendering; user text goes straight to the stream
    console.file.write(line + "\n")


def _print_counts(counts: Sequence[DataCount]) -> None:
    for dc in counts:
        _write_raw(f"{dc.count} {dc.key}")


def print_frequency_report(counts: Sequence[DataCount]) -> None:
    console.print("Ordered by Frequency:")
    _print_counts(frequency_order(counts))
    console.print()
    console.print("Ordered Lexicographically:")
    _print_counts(lexicographic_order(counts))


def print_unique_report(counts: Sequence[DataCount]) -> None:
    console.print(f"Unique words: {len(counts)}")


REPORTS: Dict[str, Callable[[Sequence[DataCount]], None]] = {
    "-frequency": print_frequency_report,
    "-num_unique": print_unique_report,
}


# argument handling -------------------------------------------------------------------
def print_usage(registry: CounterRegistry) -> None:
    console.print(USAGE)
    console.print()
    for flag, desc in registry.describe():
        console.print(f"{flag} - {desc}")
    console.print()
    for mode, desc in MODE_HELP:
        console.print(f"{mode} - {desc}")


def parse_args(argv: Sequence[str], registry: CounterRegistry):
    """
    Validate the three positional tokens and return (backend_flag, mode, path).
    Raises UsageError; an empty message means only the usage text applies.
    """
    if len(argv) != 3:
        raise UsageError("")
    flag, mode, path = argv
    if flag not in registry:
        raise UsageError("Invalid choice for first argument")
    if mode not in REPORTS:
        raise UsageError("Invalid choice for second argument")
    return flag, mode, path


def main(argv: Optional[Sequence[str]] = None) -> int:
    registry = default_registry()
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        flag, mode, path = parse_args(args, registry)
    except UsageError as e:
        if str(e):
            console.print(str(e))
        print_usage(registry)
        return 0

    try:
        cfg = Config()
        counter_cfg = cfg.counter_config()
    except ValueError as e:
        console.print(f"Invalid configuration: {e}")
        return 0
    configure_logging(counter_cfg.log_level)

    counter = registry.create(flag, counter_cfg)

    try:
        reader = FileWordReader(path)
    except OSError:
        _write_raw(f'The file "{path}" does not exist')
        return 0

    try:
        with time_block("counting"), reader:
            counts = count_words(reader, counter)
    except WordReadError as e:
        console.print("An error occurred when parsing the file!:")
        console.print(str(e.__cause__ or e))
        return 0

    REPORTS[mode](counts)
    return 0


if __name__ == "__main__":
    sys.exit(main())
