from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterator, Optional

from domain.chapter import Chapter

class Story(Mapping):
    """
    A Choose-Your-Own-Adventure plotline: chapters indexed by their key.
    The mapping is read-only once built, so it can be shared between requests.
    """
    def __init__(self, chapters: Optional[dict[str, Chapter]] = None):
        self._chapters = MappingProxyType(dict(chapters or {}))

    def __getitem__(self, key: str) -> Chapter:
        return self._chapters[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._chapters)

    def __len__(self) -> int:
        return len(self._chapters)

    def __repr__(self):
        return f"Story({len(self)} chapters)"

    def to_dict(self):
        return {key: chapter.to_dict() for key, chapter in self._chapters.items()}
