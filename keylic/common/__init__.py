# Common utilities
from keylic.common.crypto import CryptoUtils as CryptoUtils
from keylic.common.logging_utils import setup_logger as setup_logger
from keylic.common.store import FileStore as FileStore
from keylic.common.store import MemoryStore as MemoryStore

__all__ = ["CryptoUtils", "FileStore", "MemoryStore", "setup_logger"]
