"""Unicode general category oracle backed by the standard library."""

import unicodedata


class UnicodeCategory:
    """Category oracle using the interpreter's Unicode database."""

    @property
    def unidata_version(self) -> str:
        return unicodedata.unidata_version

    def category(self, char: str) -> str:
        return unicodedata.category(char)
