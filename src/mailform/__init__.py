"""mailform - a terminal compose form for To, From, Subject and Body."""

__version__ = "0.1.0"
