from .references import verify_family_references

__all__ = ["verify_family_references"]
