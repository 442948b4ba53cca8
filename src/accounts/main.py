"""Application entry point for the accounts server."""

from accounts.app import App
from accounts.config import Config
from accounts.logging import setup_logging
from accounts.web.runner import run_server


def main() -> None:
    config = Config()  # type: ignore[call-arg]
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
