#!/usr/bin/env python3
"""Basic usage example"""

from leveled_logger import LoggerBuilder, LogLevel, create_logger

def main():
    # Default logger: info and above, writes to ./logs/latest.log
    logger = create_logger()
    logger.info("Application started")
    logger.success("Loaded", 3, "plugins")
    logger.warning("Config key missing:", {"key": "timeout", "default": 30})

    # Configure with the builder
    debug_logger = (LoggerBuilder()
        .with_level(LogLevel.DEBUG)
        .with_write_file(False)
        .with_log_format("{time} [{level}] {fileName}:{lineNumber} {content}")
        .build())

    debug_logger.debug("This is debug")
    debug_logger.error("This is error")
    debug_logger.notice("This is notice")

if __name__ == "__main__":
    main()
