from .uuid_factory import deterministic_uuid, new_entity_id, normalize_pointer

__all__ = ["deterministic_uuid", "new_entity_id", "normalize_pointer"]
