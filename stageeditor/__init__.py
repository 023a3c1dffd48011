"""A small pygame stage editor: place palette sprites on a map, drag and delete them."""

__version__ = "0.1.0"