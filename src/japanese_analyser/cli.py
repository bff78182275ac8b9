#!/usr/bin/env python3
"""
Интерфейс командной строки для Japanese Analyser

Разбирает текстовый файл через MeCab и выполняет над результатом:
1. Поиск слова (contains / index-of)
2. Фильтрацию предложений по слову
3. Восстановление текста из поверхностных форм
4. Экспорт в Excel / CSV / JSON
"""

import os
import sys
import argparse
import logging
from typing import List, Optional

from .errors import JapaneseAnalyserError
from .text_structure import Text

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ('xlsx', 'csv', 'json')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="japanese-analyser",
        description="Japanese Analyser - разбор японских текстов через MeCab",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  japanese-analyser text.txt                         # Сводка по тексту
  japanese-analyser text.txt --contains 翻訳          # Есть ли слово в тексте
  japanese-analyser text.txt --filter 翻訳 --surface  # Предложения со словом
  japanese-analyser text.txt --export result --format json
  japanese-analyser text.txt --export --format csv   # Имя файла с временной меткой
  japanese-analyser text.txt --mecab /opt/homebrew/bin/mecab
        """
    )
    parser.add_argument('file', help='Текстовый файл для разбора')
    parser.add_argument('--mecab', dest='mecab_path', default=None,
                        help='Путь к исполняемому файлу MeCab (по умолчанию из config.yaml)')
    parser.add_argument('--contains', metavar='WORD', default=None,
                        help='Проверить, встречается ли слово (поверхностная или словарная форма)')
    parser.add_argument('--index-of', metavar='WORD', default=None,
                        help='Индекс первого предложения со словом')
    parser.add_argument('--filter', metavar='WORD', default=None,
                        help='Оставить только предложения со словом')
    parser.add_argument('--surface', action='store_true',
                        help='Напечатать восстановленный текст')
    parser.add_argument('--export', metavar='PATH', nargs='?', const='', default=None,
                        help='Экспортировать результат в файл (без PATH: имя с временной меткой)')
    parser.add_argument('--format', dest='export_format', choices=EXPORT_FORMATS, default='xlsx',
                        help='Формат экспорта (по умолчанию xlsx)')
    return parser


def export_text(text: Text, path: str, export_format: str) -> Optional[str]:
    """Экспортирует текст через ResultExporter в выбранном формате.

    Пустой path заменяется именем с префиксом из config.yaml и временной меткой.
    """
    from .components.exporter import ResultExporter
    from .config import config

    exporter = ResultExporter(
        output_dir=config.get_results_folder(),
        main_sheet_name=config.get_main_sheet_name(),
        placeholder=config.get_placeholder(),
    )
    if not path:
        path = exporter.generate_filename(config.get_results_filename_prefix(), export_format)
    if export_format == 'csv':
        result = exporter.export_to_csv(text, path)
    elif export_format == 'json':
        result = exporter.export_to_json(text, path)
    else:
        result = exporter.export_to_excel(text, path)
    return str(result) if result else None


def run(args: argparse.Namespace) -> int:
    """Выполняет разбор и запрошенные операции. Возвращает код выхода."""
    from .text_parser import parse

    try:
        text = parse(args.file, analyzer_path=args.mecab_path)
    except JapaneseAnalyserError as e:
        print(f"❌ {e}")
        return 1

    print(f"📄 Файл: {args.file}")
    print(f"   Предложений: {len(text)}")
    print(f"   Слов: {text.word_count}")

    if args.contains is not None:
        found = text.contains(args.contains)
        print(f"🔍 '{args.contains}': {'найдено' if found else 'не найдено'}")

    if args.index_of is not None:
        print(f"🔢 Индекс предложения с '{args.index_of}': {text.index_of(args.index_of)}")

    if args.filter is not None:
        text = text.filter(args.filter)
        print(f"🧹 Предложений со словом '{args.filter}': {len(text)}")

    if args.surface:
        for sentence in text:
            print(sentence.to_surface())

    if args.export is not None:
        try:
            exported = export_text(text, args.export, args.export_format)
        except OSError as e:
            print(f"❌ Ошибка экспорта: {e}")
            return 1
        if exported:
            print(f"✅ Результаты экспортированы в: {exported}")
        else:
            print("⚠️ Нет данных для экспорта")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Основная функция CLI"""
    # Инициализируем логирование из конфигурации в самом начале
    from .config import config

    # JAPANESE_ANALYSER_DEBUG=1 принудительно включает DEBUG
    if os.environ.get('JAPANESE_ANALYSER_DEBUG') == '1':
        os.environ['JAPANESE_ANALYSER_LOGGING__LEVEL'] = 'DEBUG'
        config._apply_env_overrides()
        print("🔍 DEBUG режим активирован через JAPANESE_ANALYSER_DEBUG=1")

    config._configure_logging_if_needed(force=True)
    logger.debug(f"Уровень логирования: {config.get_logging_level()}")

    args = build_parser().parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
