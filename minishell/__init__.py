"""Building blocks of a small command shell: tokenizer, environment, builtins and execution."""

__version__ = "0.1.0"