#!/usr/bin/env python3
"""Basic usage example"""

import threading

from synclog import LoggerBuilder, LogLevel


def worker(logger, n):
    logger.debug("worker {} starting\n", n)
    logger.info("worker {} done\n", n)


def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_name("example")
        .with_level(LogLevel.DEBUG)
        .with_console(colored=True)
        .with_call_site()
        .build())

    # Log messages
    logger.trace("This is trace\n")
    logger.debug("This is debug\n")
    logger.info("Application started\n")
    logger.warn("This is warning\n")
    logger.error("This is error\n")
    logger.fatal("This is fatal\n")
    logger.info("hello {} {}\n", "world", 12345)

    # Share one logger between threads
    threads = [threading.Thread(target=worker, args=(logger, n)) for n in range(5)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    logger.close()

if __name__ == "__main__":
    main()
