# wavefront3d/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер для загрузчика.
# ---------------------------------------------------------------

import logging


def init_logger(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("Wavefront3D")


logger = init_logger()


def set_log_level(level):
    """Принимает имя уровня ("DEBUG") или число из модуля logging."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            logger.warning(f"[Logger] Unknown log level, keeping {logger.level}")
            return
    logger.setLevel(level)
