class DuplicateEntryError(Exception):
    """A create hit a unique constraint that a concurrent writer claimed first"""
