"""
Configuração da biblioteca via variáveis de ambiente (.env)
"""
import logging
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

# Nível de log do pacote
LOG_LEVEL = os.getenv("PADROES_LOG_LEVEL", "WARNING")

# Tipos registrados pela factory padrão (vazio = todos)
DEFAULT_DISCRIMINANTS = os.getenv("PADROES_DEFAULT_DISCRIMINANTS", "")

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def get_default_discriminants() -> List[str]:
    """Lê a lista de tipos habilitados para a factory padrão"""
    raw = os.getenv("PADROES_DEFAULT_DISCRIMINANTS", DEFAULT_DISCRIMINANTS)
    return [item.strip().lower() for item in raw.split(",") if item.strip()]


def configure_logging(level: str = None) -> logging.Logger:
    """Configura o logger do pacote e retorna a instância"""
    level_name = (level or os.getenv("PADROES_LOG_LEVEL", LOG_LEVEL)).upper()
    logger = logging.getLogger("padroes")
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
