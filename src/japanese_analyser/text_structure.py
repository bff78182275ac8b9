"""
Структура разобранного японского текста: Text → Sentence → Word.

Text владеет предложениями, Sentence владеет словами. Обратных ссылок нет.
Поиск по слову сравнивает поверхностную (surface) и словарную (root) формы
точно, без нормализации регистра и письменности.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, Iterator, List, Optional


@dataclass(frozen=True)
class Word:
    """Морфологическая запись одного токена MeCab."""
    surface: Optional[str] = None
    pos: Optional[str] = None
    pos_subone: Optional[str] = None
    pos_subtwo: Optional[str] = None
    pos_subthree: Optional[str] = None
    inflection: Optional[str] = None
    conjugation: Optional[str] = None
    root: Optional[str] = None
    reading: Optional[str] = None
    pronunciation: Optional[str] = None

    def matches(self, word: str) -> bool:
        """Совпадает ли слово с поверхностной или словарной формой."""
        return self.surface == word or self.root == word

    @property
    def is_empty(self) -> bool:
        return self.surface is None and self.pos is None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


@dataclass
class Sentence:
    """Предложение: слова в порядке выдачи анализатора."""
    words: List[Word] = field(default_factory=list)

    def append(self, word: Word) -> None:
        self.words.append(word)

    def contains(self, word: str) -> bool:
        """
        Ищет слово в предложении.

        Args:
            word: Поверхностная или словарная форма

        Returns:
            True если хотя бы одно слово совпало
        """
        return any(w.matches(word) for w in self.words)

    def index_of(self, word: str) -> int:
        """
        Индекс первого совпавшего слова.

        Это позиция среди разобранных токенов, а не смещение в символах
        исходного текста.

        Returns:
            Индекс (с нуля) или -1, если слово не найдено
        """
        for index, w in enumerate(self.words):
            if w.matches(word):
                return index
        return -1

    def to_surface(self) -> str:
        """Восстанавливает предложение из поверхностных форм без разделителей."""
        return "".join(w.surface for w in self.words if w.surface is not None)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self.words)

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __str__(self) -> str:
        return self.to_surface()


@dataclass
class Text:
    """Разобранный текст: предложения в порядке исходного документа."""
    sentences: List[Sentence] = field(default_factory=list)

    def contains(self, word: str, first_sentence_only: bool = False) -> bool:
        """
        Ищет слово во всём тексте.

        Args:
            word: Поверхностная или словарная форма
            first_sentence_only: Проверять только первое предложение
                (совместимость со старым поведением, которое возвращало
                результат после проверки первого предложения)

        Returns:
            True если слово найдено
        """
        if first_sentence_only:
            for sentence in self.sentences:
                return sentence.contains(word)
            return False
        return any(sentence.contains(word) for sentence in self.sentences)

    def index_of(self, word: str) -> int:
        """Индекс первого предложения, содержащего слово, или -1."""
        for index, sentence in enumerate(self.sentences):
            if sentence.contains(word):
                return index
        return -1

    def filter(self, word: str) -> "Text":
        """
        Отбирает предложения, содержащие слово.

        Предложения не копируются: новый Text ссылается на те же объекты.
        Исходный текст не изменяется.
        """
        return Text(sentences=[s for s in self.sentences if s.contains(word)])

    def to_surface(self) -> str:
        """Восстанавливает текст целиком. Исходное форматирование не сохраняется."""
        return "".join(sentence.to_surface() for sentence in self.sentences)

    def words(self) -> Iterator[Word]:
        """Все слова текста по порядку."""
        for sentence in self.sentences:
            yield from sentence.words

    @property
    def word_count(self) -> int:
        return sum(len(sentence) for sentence in self.sentences)

    def __len__(self) -> int:
        return len(self.sentences)

    def __iter__(self) -> Iterator[Sentence]:
        return iter(self.sentences)

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __str__(self) -> str:
        return self.to_surface()
