import logging
import os
import re
from dotenv import load_dotenv

# charge immédiatement le .env
load_dotenv()

_USERINFO_RE = re.compile(r"(https?://[^:/@\s]+:)[^@\s]+@")


def get_logger(name: str) -> logging.Logger:
    """Configure un logger standardisé avec un niveau selon l'environnement"""
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    logger = logging.getLogger(name)
    if not logger.hasHandlers():
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(log_level)

        logger.debug(f"Logger initialized for '{name}' with level={log_level}")
    return logger


def mask_url(url) -> str:
    """Masque le mot de passe (clé API) d'une URL avant de la logger."""
    return _USERINFO_RE.sub(r"\1***@", str(url))
