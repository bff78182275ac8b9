"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс JAPANESE_ANALYSER_, вложенность через __)
- Валидация параметров MeCab
- Настройка логирования
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging
from datetime import datetime

logger = logging.getLogger(__name__)

ENV_PREFIX = 'JAPANESE_ANALYSER_'
DEFAULT_MECAB_PATH = "/usr/local/bin/mecab"


class Config:
    """Класс для работы с конфигурацией проекта"""

    def __init__(self, config_path: str = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в корне проекта
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"

            # Если не найден в текущей директории, ищем в родительских
            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"

            self.config_path = config_path

        self.config_data = {}
        self.env_data = {}

        self._load_config()
        self._load_env()
        try:
            self._apply_env_overrides()
            self._validate_and_prepare()
        except Exception as e:
            logger.warning(f"Проблема при применении ENV/валидации: {e}")
        self._configure_logging_if_needed()

    def _resolve_config_path(self) -> Path:
        env = os.getenv(f'{ENV_PREFIX}ENV', '').lower().strip()
        root = self.config_path.parent if self.config_path else Path.cwd()
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            candidate = root / 'config.yaml'
        if candidate.exists():
            return candidate
        # Фолбэк на исходный путь
        return self.config_path

    def _load_config(self):
        """Загружает конфигурацию из YAML файла"""
        defaults = self._get_default_config()
        try:
            self.config_path = self._resolve_config_path()
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = yaml.safe_load(f) or {}
                self.config_data = self._merge(defaults, loaded)
                logger.info(f"Конфигурация загружена: {self.config_path}")
            else:
                logger.warning(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
                self.config_data = defaults
        except Exception as e:
            logger.error(f"Ошибка загрузки конфигурации: {e}")
            self.config_data = defaults

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Рекурсивно накладывает значения из YAML на значения по умолчанию."""
        result = dict(base)
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(result.get(key), dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result

    def _load_env(self):
        """Загружает переменные окружения из .env файла"""
        try:
            load_dotenv()
            self.env_data = {
                'MECAB_PATH': os.getenv('MECAB_PATH'),
                'MECABRC': os.getenv('MECABRC'),
            }
            logger.info("Переменные окружения загружены из .env (если есть)")
        except Exception as e:
            logger.error(f"Ошибка загрузки переменных окружения: {e}")

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (JAPANESE_ANALYSER_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            # Служебные переменные не являются ключами конфигурации
            if key in (f'{ENV_PREFIX}ENV', f'{ENV_PREFIX}DEBUG'):
                continue
            tail = key[len(ENV_PREFIX):]
            # Вложенность разделяется двойным подчёркиванием
            dotted = tail.replace('__', '.').lower()
            parsed: Any = val
            if val.lower() in ('true', 'false'):
                parsed = (val.lower() == 'true')
            else:
                try:
                    if '.' in val:
                        parsed = float(val)
                    else:
                        parsed = int(val)
                except ValueError:
                    parsed = val
            self._set_nested(self.config_data, dotted, parsed)
        if os.getenv(f'{ENV_PREFIX}ENV'):
            logger.info(f"Активирован профиль: {os.getenv(f'{ENV_PREFIX}ENV')}")

    def _validate_and_prepare(self) -> None:
        """Проверяет диапазоны параметров MeCab."""
        timeout = self.get('mecab.timeout')
        if timeout is not None:
            try:
                timeout = float(timeout)
            except (TypeError, ValueError):
                timeout = 0
            if timeout <= 0:
                logger.warning("mecab.timeout <= 0: таймаут отключён")
                self._set_nested(self.config_data, 'mecab.timeout', None)
        try:
            min_fields = int(self.get('text_analysis.min_fields', 10))
        except (TypeError, ValueError):
            min_fields = 10
        if min_fields < 10:
            logger.warning("text_analysis.min_fields < 10: принудительно установлено в 10")
            min_fields = 10
        self._set_nested(self.config_data, 'text_analysis.min_fields', min_fields)

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если:
          - ранее не конфигурировалось, или
          - изменился уровень/формат/файл логирования, или
          - явно указан force=True
        """
        root = logging.getLogger()

        console_level_name = str(self.get_console_logging_level()).upper()
        file_level_name = str(self.get_file_logging_level()).upper()
        console_level = getattr(logging, console_level_name, logging.WARNING)
        file_level = getattr(logging, file_level_name, logging.DEBUG)

        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_japanese_analyser_configured", False) and not force:
            if (
                getattr(root, "_japanese_analyser_console_level", None) == console_level_name and
                getattr(root, "_japanese_analyser_file_level", None) == file_level_name and
                getattr(root, "_japanese_analyser_format", None) == desired_fmt and
                getattr(root, "_japanese_analyser_file", None) == desired_file
            ):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            self.cleanup_old_log_files()

            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(file_level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.debug(f"Не удалось открыть файл лога: {e}")

        root_level = min(console_level, file_level) if desired_file else console_level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_japanese_analyser_configured", True)
        setattr(root, "_japanese_analyser_console_level", console_level_name)
        setattr(root, "_japanese_analyser_file_level", file_level_name)
        setattr(root, "_japanese_analyser_format", desired_fmt)
        setattr(root, "_japanese_analyser_file", desired_file)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return {
            'mecab': {
                'model_type': 'mecab',
                # None: MECAB_PATH из .env или DEFAULT_MECAB_PATH
                'path': None,
                'encoding': "utf-8",
                # None: ждать завершения MeCab без ограничения
                'timeout': None,
            },
            'text_analysis': {
                'sentence_terminator': "EOS",
                'placeholder': "*",
                'min_fields': 10,
            },
            'files': {
                'results_folder': "data/results",
                'results_filename_prefix': "japanese_text_analysis",
            },
            'excel': {
                'main_sheet_name': "Слова",
            },
            'logging': {
                'level': "WARNING",
                'format': "%(asctime)s - %(levelname)s - %(message)s",
                'log_to_file': False,
                'log_file': "logs/japanese_analyser.log",
                'max_log_files': 10,
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            keys = key.split('.')
            value = self.config_data

            for k in keys:
                value = value[k]

            return value
        except (KeyError, TypeError):
            return default

    def get_env(self, key: str, default: Any = None) -> Any:
        """Получает значение переменной окружения, загруженной из .env"""
        value = self.env_data.get(key)
        return default if value is None else value

    def get_model_config(self) -> Dict[str, Any]:
        """Настройки модели анализатора для ModelFactory (тип/путь/кодировка/таймаут)."""
        return {
            'type': self.get('mecab.model_type', 'mecab'),
            'path': self.get_mecab_path(),
            'encoding': self.get_mecab_encoding(),
            'timeout': self.get_mecab_timeout(),
        }

    def get_mecab_path(self) -> str:
        """Путь к исполняемому файлу MeCab: mecab.path, затем MECAB_PATH из .env, затем путь по умолчанию"""
        path = self.get('mecab.path') or self.get_env('MECAB_PATH') or DEFAULT_MECAB_PATH
        return os.path.expanduser(str(path))

    def get_mecab_encoding(self) -> str:
        """Кодировка вывода MeCab"""
        return self.get('mecab.encoding', "utf-8")

    def get_mecab_timeout(self) -> Optional[float]:
        """Таймаут запуска MeCab в секундах (None: без ограничения)"""
        timeout = self.get('mecab.timeout')
        return float(timeout) if timeout is not None else None

    def get_sentence_terminator(self) -> str:
        """Маркер конца предложения в выводе анализатора"""
        return self.get('text_analysis.sentence_terminator', "EOS")

    def get_placeholder(self) -> str:
        """Заглушка анализатора для неприменимого поля"""
        return self.get('text_analysis.placeholder', "*")

    def get_min_fields(self) -> int:
        """Минимальное число полей в записи токена"""
        return int(self.get('text_analysis.min_fields', 10))

    def get_results_folder(self) -> str:
        """Получает папку для результатов"""
        return self.get('files.results_folder', "data/results")

    def get_results_filename_prefix(self) -> str:
        """Получает префикс для файлов результатов"""
        return self.get('files.results_filename_prefix', "japanese_text_analysis")

    def get_main_sheet_name(self) -> str:
        """Получает название основного листа Excel"""
        return self.get('excel.main_sheet_name', "Слова")

    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        # Поддержка старого формата logging.level для обратной совместимости
        return self.get('logging.console_level', self.get('logging.level', "WARNING"))

    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")

    def get_logging_level(self) -> str:
        return self.get_console_logging_level()

    def get_logging_format(self) -> str:
        """Получает формат логов"""
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")

    def get_logging_file(self) -> str:
        """Получает путь к файлу логов"""
        log_file_template = self.get('logging.log_file', "logs/japanese_analyser.log")
        if "{timestamp}" in log_file_template:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            return log_file_template.replace("{timestamp}", timestamp)
        return log_file_template

    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))

    def get_max_log_files(self) -> int:
        """Получает максимальное количество файлов логов для хранения"""
        return int(self.get('logging.max_log_files', 10))

    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        logs_dir = Path(self.get_logging_file()).parent
        if not logs_dir.exists():
            return

        log_files = list(logs_dir.glob("japanese_analyser_*.log"))
        max_files = self.get_max_log_files()
        if len(log_files) <= max_files:
            return

        # Самые новые последними
        log_files.sort(key=lambda f: f.stat().st_mtime)
        for old_file in log_files[:-max_files]:
            try:
                old_file.unlink()
                logger.debug(f"Удален старый лог файл: {old_file}")
            except OSError as e:
                logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")


# Глобальный экземпляр конфигурации
config = Config()
