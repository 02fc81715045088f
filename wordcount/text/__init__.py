# wordcount/text/__init__.py
# splitting input text into word tokens

from .tokenizer import FileWordReader, simple_tokenize

__all__ = ["FileWordReader", "simple_tokenize"]
