from instagram_api.mappers.collection import decode_many

__all__ = ["decode_many"]
