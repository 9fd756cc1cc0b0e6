"""Archie: interactive front-end for paru, yay and pacman."""

VERSION = "3.3.0"
__version__ = VERSION
