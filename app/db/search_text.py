import unicodedata

from sqlalchemy import Column, Text, event


def fold(text: str) -> str:
    """Unicode-aware case folding shared by stored text and queries."""
    return unicodedata.normalize("NFC", text).casefold()


def _strings(value, key: str | None = None):
    if isinstance(value, str):
        if key is None:
            yield value
    elif isinstance(value, dict):
        if key is not None:
            yield from _strings(value.get(key))
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _strings(item, key)


class Searchable:
    """Mixin keeping a folded copy of the searchable string values of a row.

    ``__search_fields__`` names plain columns, or ``(column, key)`` pairs for
    JSON lists of objects where only ``key`` holds searchable text. Object
    keys and non-string values never reach ``search_text``.
    """

    __search_fields__ = ()

    search_text = Column(Text, default="", nullable=False)

    def build_search_text(self) -> str:
        parts = []
        for field in self.__search_fields__:
            if isinstance(field, tuple):
                name, key = field
                parts.extend(_strings(getattr(self, name), key))
            else:
                parts.extend(_strings(getattr(self, field)))
        return fold("\n".join(p for p in parts if p))


@event.listens_for(Searchable, "before_insert", propagate=True)
@event.listens_for(Searchable, "before_update", propagate=True)
def _refresh_search_text(mapper, connection, target):
    target.search_text = target.build_search_text()
