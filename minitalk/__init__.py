"""Send text between processes one bit at a time using SIGUSR1 and SIGUSR2, with small string, memory and list helpers."""

__version__ = "0.1.0"