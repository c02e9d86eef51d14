"""Desktop touch-typing trainer with live speed and accuracy statistics."""

__version__ = "0.1.0"