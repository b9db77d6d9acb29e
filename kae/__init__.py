"""A small terminal to-do list manager with a curses list view and a command line."""

__version__ = "0.1.0"