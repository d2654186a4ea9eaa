from __future__ import annotations

import logging

from telegram.ext import Application

from funniversaries.bot_handlers import HandlerDependencies, build_handlers
from funniversaries.config_store import ensure_default_config, load_config
from funniversaries.settings import load_settings

LOGGER = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    configure_logging()

    settings = load_settings()
    ensure_default_config(settings.anniversary_config_path)
    config = load_config(settings.anniversary_config_path)
    LOGGER.info("Loaded %s counts from %s", len(config.counts), settings.anniversary_config_path)

    application = Application.builder().token(settings.telegram_bot_token).build()
    application.bot_data["handler_deps"] = HandlerDependencies(settings=settings)

    for handler in build_handlers():
        application.add_handler(handler)

    application.run_polling()


if __name__ == "__main__":
    main()
