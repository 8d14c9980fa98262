"""
Configuracao de logging
Liga o logger 'softrender' (transform, projection, camera) a stdout e,
opcionalmente, a um ficheiro.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "softrender"

def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configura o logger do namespace 'softrender'.

    Args:
        level: nivel de logging (ex. logging.DEBUG, logging.WARNING)
        log_file: caminho opcional para gravar tambem em ficheiro.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # evitar handlers duplicados se for chamado mais de uma vez
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging inicializado.")
    return logger
