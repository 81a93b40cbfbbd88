import asyncio
import logging

from autocomplete_handler import AutocompleteHandler
from config import Config
from flask_app import FlaskApp

LOGGER = logging.getLogger(__name__)


def prepare_logger(level="INFO"):
    """ Setup logger """
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=level
    )

    """ Set a higher logging level for urllib3 to avoid all connections being logged """
    logging.getLogger("urllib3").setLevel(logging.WARNING)


class Application:
    def __init__(self, config: Config = None):
        # Initialization
        self.config = config if config is not None else Config()
        prepare_logger(self.config.LOG_LEVEL)
        self.handler = AutocompleteHandler(self.config)
        self.handler.populate()
        self.flask_app = FlaskApp(self.handler, self.config)

    def run(self):
        # Serve the web application until it is stopped
        LOGGER.info("Starting autocomplete on %s:%s", self.config.HOST, self.config.PORT)
        asyncio.run(self.flask_app.run().serve())


def main():
    Application().run()


if __name__ == "__main__":
    main()
