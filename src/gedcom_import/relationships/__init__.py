from .synthesizer import process_family, resolve_children

__all__ = ["process_family", "resolve_children"]
