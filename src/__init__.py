"""
Пакет TGH Printer Commands
==========================

Кодировщик команд для термопринтеров чеков TGH (диалект ESC/POS).

Этот пакет предоставляет:
    - Команды размера текста (GS !)
    - QR-коды средствами принтера (GS ( k)
    - Одномерные штрихкоды (GS H / f / w / h / k)
    - Растровые изображения с учётом прозрачности (GS v 0)
    - Печать логотипов из памяти принтера (GS p)
    - Загрузку изображений через Pillow и растровый QR/штрихкод
      для принтеров без встроенной поддержки символов

Каждая операция возвращает готовую последовательность байт; транспорт
(serial, USB, сеть) в пакет не входит.

Пример базового использования:
    >>> from src import get_logger
    >>> from src.tgh import TGHPrinter, SymbolSettings
    >>>
    >>> logger = get_logger(__name__)
    >>> printer = TGHPrinter()
    >>>
    >>> job = printer.set_text_size(1, 1)
    >>> job += "ИТОГО".encode("cp866")
    >>> job += printer.print_qr("https://example.com", SymbolSettings(cell_size=6))
    >>>
    >>> logger.info(f"Сгенерировано {len(job)} байт команд")

Управление конфигурацией:
    >>> import os
    >>> os.environ['TGH_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from src import load_config
    >>> config = load_config()
    >>> print(f"Размер модуля QR: {config['qr_cell_size']}")

Версия: 0.1.0
Лицензия: MIT
Python: 3.11+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "TGH Printer Commands Development Team"
__description__ = "Byte-exact command encoder for TGH thermal receipt printers"
__license__ = "MIT"
__python_requires__ = ">=3.11"

# Компоненты семантической версии
VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

LOGGER_NAMESPACE = "tgh_printer"

# =============================================================================
# ПРОВЕРКА ВЕРСИИ PYTHON
# =============================================================================

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"TGH Printer Commands требует Python 3.11 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================


def _setup_logging() -> None:
    """
    Инициализировать общепакетную конфигурацию логирования.

    Настраивает логгер пакета с:
    - Консольным обработчиком (stderr) для WARNING и выше
    - Ротирующим файловым обработчиком, если задан каталог TGH_LOG_DIR
    - Форматом с временной меткой, уровнем, модулем и сообщением

    Уровень логирования задаётся переменной окружения TGH_LOG_LEVEL:
    DEBUG, INFO, WARNING, ERROR, CRITICAL (по умолчанию INFO).

    Функция идемпотентна - повторные вызовы не имеют эффекта.
    """
    log_level_str = os.environ.get("TGH_LOG_LEVEL", "INFO").upper()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt=("[%(asctime)s] %(levelname)-8s " "[%(name)s.%(funcName)s:%(lineno)d] %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Консольный обработчик (stderr) - WARNING и выше
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Файловый обработчик (ротирующий) - только если задан каталог
    log_dir_str = os.environ.get("TGH_LOG_DIR")
    if log_dir_str:
        try:
            log_dir = Path(log_dir_str)
            log_dir.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_dir / "tgh_printer.log",
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                f"Не удалось инициализировать файловое логирование: {e}. "
                f"Используется только консоль."
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер для указанного модуля в пространстве имён пакета.

    Логгеры именуются как 'tgh_printer.<module_name>' и наследуют
    обработчики логгера пакета.

    Аргументы:
        module_name: Имя модуля, обычно `__name__`.

    Пример:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Команда QR: %d байт", len(cmd))
    """
    if module_name.startswith(LOGGER_NAMESPACE):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{LOGGER_NAMESPACE}.main")
    clean_name = module_name.lstrip(".")
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{clean_name}")


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

# Значения по умолчанию совпадают с умолчаниями протокола TGH
_DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "INFO",
    "qr_model": 2,
    "qr_cell_size": 3,
    "qr_correction": "A",
    "barcode_hri_position": 0,
    "barcode_hri_font": 0,
    "barcode_width": 3,
    "barcode_height": 162,
}


def default_config() -> Dict[str, Any]:
    """Вернуть копию конфигурации по умолчанию."""
    return _DEFAULT_CONFIG.copy()


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузить конфигурацию из config.json или использовать настройки
    по умолчанию.

    Если файл не существует, содержит недопустимый JSON или не является
    JSON-объектом, возвращается конфигурация по умолчанию с записью
    предупреждения в лог.

    Ключи конфигурации:
        - log_level: str - Уровень логирования
        - qr_model: int - Модель QR (1, 2, 3)
        - qr_cell_size: int - Размер модуля QR в точках
        - qr_correction: str - Уровень коррекции ошибок (A-D, L/M/Q/H)
        - barcode_hri_position: int - Позиция HRI (0-3)
        - barcode_hri_font: int - Шрифт HRI
        - barcode_width: int - Ширина модуля штрихкода (2-6)
        - barcode_height: int - Высота штрихкода (1-255)

    Аргументы:
        config_path: Путь к файлу. Если None, ищет 'config.json' в
                    текущем каталоге.

    Возвращает:
        Словарь со всеми ключами по умолчанию, переопределёнными
        пользовательскими значениями.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path("config.json")
    config_path = Path(config_path)

    config = default_config()

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)

            if not isinstance(user_config, dict):
                raise ValueError(
                    f"Файл конфигурации должен содержать JSON-объект, "
                    f"получен {type(user_config).__name__}"
                )

            config.update(user_config)

            logger.info(f"Конфигурация загружена из {config_path}")
            logger.debug(f"Конфигурация: {config}")

        except json.JSONDecodeError as e:
            logger.warning(
                f"Не удалось разобрать {config_path}: Недопустимый JSON "
                f"в строке {e.lineno}, столбце {e.colno}. "
                f"Используется конфигурация по умолчанию."
            )
        except OSError as e:
            logger.warning(
                f"Не удалось прочитать {config_path}: {e}. "
                f"Используется конфигурация по умолчанию."
            )
        except ValueError as e:
            logger.warning(
                f"Недопустимый формат конфигурации: {e}. "
                f"Используется конфигурация по умолчанию."
            )
    else:
        logger.info(
            f"Файл конфигурации {config_path} не найден. "
            f"Используется конфигурация по умолчанию."
        )

    return config


def check_dependencies() -> Dict[str, bool]:
    """
    Проверить, установлены ли сторонние зависимости.

    Не вызывает исключений для отсутствующих пакетов, а возвращает
    словарь состояний.

    Проверяемые зависимости:
        - pillow: Загрузка изображений
        - qrcode: Растровый QR-код
        - python-barcode: Растровый штрихкод
    """
    dependencies: Dict[str, bool] = {}

    try:
        import PIL  # noqa: F401

        dependencies["pillow"] = True
    except ImportError:
        dependencies["pillow"] = False

    try:
        import qrcode  # noqa: F401

        dependencies["qrcode"] = True
    except ImportError:
        dependencies["qrcode"] = False

    try:
        import barcode  # noqa: F401

        dependencies["python-barcode"] = True
    except ImportError:
        dependencies["python-barcode"] = False

    return dependencies


# =============================================================================
# ОПРЕДЕЛЕНИЕ ПУБЛИЧНОГО API
# =============================================================================

__all__ = [
    # Метаданные версии
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    "LOGGER_NAMESPACE",
    # Утилиты
    "get_logger",
    "default_config",
    "load_config",
    "check_dependencies",
]

# =============================================================================
# ИНИЦИАЛИЗАЦИЯ ПАКЕТА
# =============================================================================

_setup_logging()

_logger = get_logger(__name__)
_logger.debug(f"TGH Printer Commands v{__version__} инициализируется...")
_logger.debug(f"Версия Python: {sys.version}")

_deps = check_dependencies()
_missing = [name for name, available in _deps.items() if not available]

if _missing:
    _logger.warning(f"Отсутствуют зависимости: {', '.join(_missing)}")
    _logger.info(
        f"Установите недостающие пакеты командой: "
        f"pip install {' '.join(_missing)}"
    )
