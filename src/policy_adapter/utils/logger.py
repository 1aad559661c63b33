# logger.py
import logging
import os


# This module sets up file logging for the CLI.
def setup_logging(settings, worker_name="policy-adapter"):
    prefix = f"{worker_name}.{os.getpid()}"

    # Handle both cases: logging section passed directly or full settings with 'logging' key
    logging_config = settings.get('logging', settings) if isinstance(settings, dict) else {}

    log_file = logging_config.get('file', 'logs/policy_adapter.log')
    log_level = str(logging_config.get('level', 'INFO')).upper()

    # Create the directory if it doesn't exist
    log_dir = os.path.dirname(log_file)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir, exist_ok=True)

    log_format = f"[{prefix}] %(asctime)s - %(levelname)s - %(name)s - %(message)s"
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, log_level, logging.INFO),
        datefmt="%Y-%m-%d %H:%M:%S",
        format=log_format,
    )
