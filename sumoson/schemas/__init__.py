from .property import PropertyRecord

__all__ = ['PropertyRecord']
