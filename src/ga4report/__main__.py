"""Entry point for serving the report endpoint."""

import logging

from ga4report.app import create_app
from ga4report.config import Settings


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = Settings.from_env()
    app = create_app(settings)
    logging.getLogger("ga4report").info(
        "Running on http://%s:%d/report", settings.host, settings.port
    )
    app.run(host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
