"""Wiegand keypad access control: input buffering, code checking, logging, storage and web pages."""

__version__ = "0.1.0"