# Argwalk CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Argwalk."""
import logging

logger: logging.Logger = logging.getLogger("argwalk")
