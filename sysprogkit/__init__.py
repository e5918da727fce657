"""Systems-programming teaching tools: an in-memory file tree, paths, a dynamic array, an ARMv8 instruction encoder, text replacement and a survey."""

__version__ = "0.1.0"