"""Integer and calendar helpers, number puzzle solutions, dice prime odds, a toy set of atoms and a Lisp tokenizer."""

__version__ = "0.1.0"