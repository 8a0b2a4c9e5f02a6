"""Language tags used to pick a translation table."""

import re
from dataclasses import dataclass

from country_parser.config.languages import DEFAULT_LANGUAGE

_SEPARATORS = re.compile(r"[-_]")


@dataclass(frozen=True)
class LanguageTag:
    """A language identifier with optional script and region subtags.

    Only the base language and, for Chinese, the script take part in
    choosing a translation table. The region is kept so tags survive a
    round trip through ``str()``.
    """

    language: str
    script: str | None = None
    region: str | None = None

    @classmethod
    def parse(cls, value: str) -> "LanguageTag":
        """Parse a BCP 47 or POSIX style tag such as ``zh-Hant`` or ``pt_BR``.

        Args:
            value: Tag string. Subtags may be separated by ``-`` or ``_``.
                Anything after ``.`` or ``@`` (POSIX encoding and modifier)
                is ignored.

        Returns:
            Parsed LanguageTag with a lowercase language, title-case script
            and uppercase region.

        Raises:
            ValueError: If the tag has no language subtag.
        """
        tag = value.strip().split(".", 1)[0].split("@", 1)[0]
        parts = [p for p in _SEPARATORS.split(tag) if p]
        if not parts or not parts[0].isalpha():
            raise ValueError(f"Invalid language tag: {value!r}")

        language = parts[0].lower()
        script = None
        region = None
        for part in parts[1:]:
            if script is None and region is None and len(part) == 4 and part.isalpha():
                script = part.title()
            elif region is None and (
                (len(part) == 2 and part.isalpha()) or (len(part) == 3 and part.isdigit())
            ):
                region = part.upper()
        return cls(language, script, region)

    def __str__(self) -> str:
        return "-".join(p for p in (self.language, self.script, self.region) if p)


def coerce_language(value: "LanguageTag | str") -> LanguageTag:
    """Return ``value`` as a LanguageTag, parsing it if given as a string.

    Strings that are not valid tags (``""``, ``"*"``, ``"419"``) become a
    bare tag with no translation table, so lookups treat them as English.
    """
    if isinstance(value, LanguageTag):
        return value
    try:
        return LanguageTag.parse(value)
    except ValueError:
        return LanguageTag(value.strip().lower() or DEFAULT_LANGUAGE)
