from __future__ import annotations

from .inputs import generate_input_files, generate_lines

__all__ = ["generate_input_files", "generate_lines"]
