"""Read and write CSV files with configurable delimiters, quoting and byte-order marks."""

__version__ = "0.1.0"