from .logger import StructuredFormatter, setup_logger

__all__ = ['StructuredFormatter', 'setup_logger']
