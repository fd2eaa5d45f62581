"""
Command-line entry point: ``python -m maven_feed`` or ``maven-feed``.
"""

import sys

from maven_feed.config import ConfigError, load_config
from maven_feed.logger import logger, setup_logger
from maven_feed.web.app import create_app


def main() -> None:
    """Load configuration and serve the feeds until interrupted."""
    try:
        config = load_config()
    except ConfigError as e:
        logger.critical(str(e))
        sys.exit(1)

    setup_logger(config)
    logger.debug(f"Parsed artifact specs: {[str(s) for s in config.artifacts]}")

    app = create_app(config)

    logger.info(f"Listening on {config.listen_address}")
    app.run(
        host=config.bind_host,
        port=config.bind_port,
        threaded=True,
        use_reloader=False,
    )


if __name__ == "__main__":
    main()
