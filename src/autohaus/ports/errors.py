class StorageError(Exception):
    """Raised by storage adapters when the backing store cannot serve a call.

    Adapters translate driver-specific exceptions into this type so use cases
    can decide on fallbacks without knowing which store is in use.
    """
