from scribe_common.infrastructure.interfaces import StorageClient

__all__ = ["StorageClient"]
