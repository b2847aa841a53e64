# --------------------------------------------------------------
# File: logger.py
# Description: Configuración de logging con consola coloreada y fichero diario.
# --------------------------------------------------------------
"""Construye los loggers del paquete a partir de la configuración."""

from __future__ import annotations

import logging
import re
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from colorama import Fore, Style, just_fix_windows_console

from gcm_cryptor import config

PACKAGE_LOGGER = "gcm_cryptor"

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

FORMAT_CONSOLE = (
    f"{Style.BRIGHT}%(levelname)-10s "
    + f"{Style.DIM}%(name)-24s "
    + "%(module)s.%(funcName)-24s "
    + f"{Style.RESET_ALL}%(message)s"
)
FORMAT_FILE = re.sub(r"\x1b\[[0-9;]*m", "", "%(asctime)s - " + FORMAT_CONSOLE)


class ColorFormatter(logging.Formatter):
    """Colorea cada línea según el nivel del registro."""

    COLOR_MAP = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.MAGENTA,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLOR_MAP.get(record.levelno, Fore.WHITE)
        message = super().format(record)
        return f"{color}{message}{Style.RESET_ALL}"


def resolve_level(name: str) -> int:
    """Traduce un nombre de nivel a su constante, con INFO por defecto."""

    return LEVELS.get(name.upper(), logging.INFO)


def configure_logging(
    level: Optional[str] = None, log_dir: Optional[str] = None
) -> logging.Logger:
    """Instala los manejadores en el logger raíz del paquete.

    Solo el logger `gcm_cryptor` recibe manejadores; los de cada módulo
    propagan hacia él. Sin nivel ni carpeta configurados se instala un
    `NullHandler` y los registros siguen propagando a la aplicación que
    use la librería.

    Args:
        level (Optional[str]): Nivel explícito; si falta se usa `GCM_LOG_LEVEL`.
        log_dir (Optional[str]): Carpeta para el fichero diario; si falta se
            usa `GCM_LOG_DIR`.

    Returns:
        logging.Logger: Logger del paquete. Reconfigurar sustituye los
        manejadores anteriores en lugar de acumularlos.

    """

    level = config.LOG_LEVEL if level is None else level
    directory = config.LOG_DIR if log_dir is None else log_dir

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if not level and not directory:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
        return logger

    logger.setLevel(resolve_level(level or "WARNING"))
    just_fix_windows_console()
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(ColorFormatter(FORMAT_CONSOLE))
    logger.addHandler(console_handler)

    if directory:
        Path(directory).mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(
            Path(directory) / f"{datetime.now().strftime('%Y-%m-%d')}.log",
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(FORMAT_FILE))
        logger.addHandler(file_handler)

    # Con manejadores propios no se reenvía a la raíz para no duplicar salida.
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Devuelve el logger de un módulo, configurando el del paquete la primera vez."""

    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        configure_logging()
    return logging.getLogger(name)
