"""
Utilities module for the Forex Alert Feed service.
"""
from .logger import logger, init_logging, setup_logging, intercept_stdlib_logging

__all__ = ["logger", "init_logging", "setup_logging", "intercept_stdlib_logging"]
