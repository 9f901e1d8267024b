"""Backends for cdeclgen output generation (C headers)."""

from .header_generator import generate_header, save_header_file

__all__ = ["generate_header", "save_header_file"]
