# storefront/utils/logging.py
import logging
import sys

from storefront.utils.settings import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(levelname)s - [PID:%(process)d] - %(name)s - %(message)s"

_configured = False


def setup_logging(level: str | None = None):
    """
    Konfiguracja logowania dla calej aplikacji.
    Wywolywana raz przy tworzeniu aplikacji, kolejne wywolania nic nie robia.
    """
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # mniej szumu z bibliotek zewnetrznych
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
