#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Mansi Translator - Russian <-> Mansi text translation

Entry point for the NiceGUI-based translator page.
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

LOGS_DIR = Path.home() / ".mansi_translator" / "logs"


def setup_logging(logs_dir: Path = LOGS_DIR):
    """Configure logging to console and file.

    Log file location: ~/.mansi_translator/logs/app.log (UTF-8, truncated on startup)

    Returns:
        tuple: (console_handler, file_handler) to keep references alive
    """
    log_file_path = logs_dir / "app.log"

    # Create console handler first (always works)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    ))

    file_handler = None
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        # Fall back to console-only logging if log directory cannot be created
        print(f"[WARNING] Failed to create log directory {logs_dir}: {e}", file=sys.stderr)
        logs_dir = None

    if logs_dir is not None:
        try:
            file_handler = logging.FileHandler(log_file_path, mode='w', encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
        except OSError as e:
            print(f"[WARNING] Failed to create log file {log_file_path}: {e}", file=sys.stderr)
            file_handler = None

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.addHandler(console_handler)
    if file_handler:
        root_logger.addHandler(file_handler)

    # Suppress verbose logging from third-party libraries
    for name in ['uvicorn', 'uvicorn.error', 'uvicorn.access',
                 'starlette', 'httpcore', 'httpx',
                 'asyncio', 'concurrent']:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info("Mansi Translator starting...")
    logger.info("=" * 60)
    if file_handler:
        logger.info("Log file: %s", log_file_path)
    else:
        logger.warning("File logging disabled - console only")

    return (console_handler, file_handler)


# Global reference to keep log handlers alive (prevents garbage collection)
_global_log_handlers = None


def main():
    """Main entry point

    Note: Import is inside main() so that NiceGUI is loaded only once logging is set up.
    """
    import asyncio

    global _global_log_handlers
    _global_log_handlers = setup_logging()

    logger = logging.getLogger(__name__)

    try:
        from mansi_translator.ui.app import run_app
    except Exception as e:
        logger.exception("Failed to import UI module: %s", e)
        return

    try:
        run_app(
            host='127.0.0.1',
            port=8765,
            native=False,  # Browser mode (use external browser)
        )
    except KeyboardInterrupt:
        logger.debug("Application shutdown via KeyboardInterrupt")
    except asyncio.CancelledError:
        logger.debug("Application shutdown via CancelledError")
    except Exception as e:
        logger.exception("Application crashed: %s", e)
        raise


if __name__ in {'__main__', '__mp_main__'}:
    main()
