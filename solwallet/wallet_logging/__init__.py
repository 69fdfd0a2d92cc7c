"""
Structured logging for solwallet.

JSON logs with timestamp, level, event_type and account context.
Use get_logger() in every module; call configure_logging() once from the host.
"""

from solwallet.wallet_logging.logger import bind_account, configure_logging, get_logger

__all__ = ["bind_account", "configure_logging", "get_logger"]
