"""Message translation backed by gettext catalogues in a locales directory."""

from __future__ import annotations

import contextlib
import gettext
import os
import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from calcarith.locale_paths import get_locale_path

DEFAULT_DOMAIN = "default"

_LANGUAGE_VARIABLES = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


class LanguageCode(str):
    """A locale name such as ``en_US``."""

    __slots__ = ()

    def t(self, text: str) -> str:
        """Translate text into this language, or return it unchanged."""
        locale = _lang_map.get(self)
        if locale is None:
            return text
        return locale.get(text)


EN = LanguageCode("en_US")
RU = LanguageCode("ru_RU")

LANGUAGE_DIRECTION_MAP: dict[LanguageCode, str] = {
    EN: "ltr",
    RU: "ltr",
}

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    '"': '"',
    "\\": "\\",
}
_ESCAPE = re.compile(r"\\(.)", re.DOTALL)
_KEYWORD = re.compile(r'^(msgctxt|msgid_plural|msgid|msgstr(?:\[\d+\])?)\s+(".*")$')


def _unquote(value: str, line_number: int) -> str:
    value = value.strip()
    if len(value) < 2 or not value.startswith('"') or not value.endswith('"'):
        raise ValueError(f"line {line_number}: expected a quoted string")
    return _ESCAPE.sub(lambda match: _ESCAPES.get(match[1], match[1]), value[1:-1])


def parse_po(text: str) -> dict[str, str]:
    """Parse the text of a PO catalogue into a mapping of msgid to translation.

    Entries with a context, the header and untranslated entries are left out.
    Raises ValueError on a line that is not valid PO syntax.
    """
    catalog: dict[str, str] = {}
    entry: dict[str, str] = {}
    current: str | None = None

    def flush() -> None:
        msgid = entry.get("msgid")
        msgstr = entry.get("msgstr", entry.get("msgstr[0]"))
        if msgid and msgstr and "msgctxt" not in entry:
            catalog[msgid] = msgstr
        entry.clear()

    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith('"'):
            if current is None:
                raise ValueError(f"line {number}: string without a keyword")
            entry[current] += _unquote(line, number)
            continue
        match = _KEYWORD.match(line)
        if match is None:
            raise ValueError(f"line {number}: unrecognised line {line!r}")
        keyword, value = match.groups()
        if keyword in ("msgctxt", "msgid") and any(key.startswith("msgstr") for key in entry):
            flush()
        current = keyword
        entry[keyword] = _unquote(value, number)

    flush()
    return catalog


class Locale:
    """Translations of one language, loaded domain by domain from a directory."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        language: str,
        default_domain: str = DEFAULT_DOMAIN,
    ) -> None:
        self.path = Path(path)
        self.language = str(language)
        self.default_domain = default_domain
        self._domains: dict[str, Callable[[str], str | None]] = {}

    def _candidates(self, domain: str):
        languages = [self.language]
        if len(self.language) > 2:
            languages.append(self.language[:2])
        for language in languages:
            for directory in (self.path / language / "LC_MESSAGES", self.path / language):
                for extension in (".po", ".mo"):
                    yield directory / f"{domain}{extension}"

    def add_domain(self, domain: str) -> None:
        """Load the catalogue of a domain; a missing catalogue translates nothing."""
        for candidate in self._candidates(domain):
            if not candidate.is_file():
                continue
            if candidate.suffix == ".po":
                catalog = parse_po(candidate.read_text(encoding="utf-8"))
                self._domains[domain] = catalog.get
            else:
                with candidate.open("rb") as handle:
                    translations = gettext.GNUTranslations(handle)
                self._domains[domain] = translations.gettext
            return
        self._domains[domain] = {}.get

    def get(self, text: str, *args: object) -> str:
        """Translate text in the default domain, formatting it with args if given."""
        lookup = self._domains.get(self.default_domain)
        result = (lookup(text) if lookup else None) or text
        return result % args if args else result


@dataclass
class _Config:
    path: str = "/usr/local/share/locale"
    language: str = "en_US"
    domain: str = DEFAULT_DOMAIN
    locale: Locale | None = None

    def load(self) -> None:
        locale = Locale(self.path, self.language, self.domain)
        locale.add_domain(self.domain)
        self.locale = locale


_config = _Config()
_lang_map: dict[LanguageCode, Locale] = {}


def _configure(path: str, language: str, domain: str) -> None:
    _config.path = path
    _config.language = language
    _config.domain = domain
    _config.load()


def get_language_code() -> str:
    """Return the language from LANGUAGE, LC_ALL, LC_MESSAGES or LANG, first set wins."""
    for name in _LANGUAGE_VARIABLES:
        value = os.environ.get(name, "")
        if value:
            return value
    return ""


def new_language_from_string(code: str) -> LanguageCode:
    """Map a locale name to a supported language; anything but Russian is English."""
    if "ru" in code.lower():
        return RU
    return EN


def setup_locales(locale_path: str | os.PathLike[str]) -> None:
    """Register a Locale for each directory under the locales directory."""
    for entry in sorted(Path(locale_path).iterdir()):
        if entry.is_dir():
            code = LanguageCode(entry.name)
            locale = Locale(locale_path, code)
            locale.add_domain(DEFAULT_DOMAIN)
            _lang_map[code] = locale


def initialize() -> None:
    """Configure translations from the environment and load every locale found."""
    locale_path = get_locale_path()
    full_locale = str(new_language_from_string(get_language_code()))
    _configure(locale_path, full_locale, DEFAULT_DOMAIN)
    with contextlib.suppress(OSError):
        setup_locales(locale_path)


def get_supported_languages() -> list[LanguageCode]:
    """Return the language codes of all loaded locales."""
    return list(_lang_map)


def t(text: str, *args: object) -> str:
    """Translate text into the current language."""
    if _config.locale is None:
        return text % args if args else text
    return _config.locale.get(text, *args)


def get_current_language() -> LanguageCode:
    """Return the language translations currently use."""
    return LanguageCode(_config.language)


def set_current_locale(lang: str) -> None:
    """Switch translations to another language; an empty name changes nothing."""
    if lang:
        _config.language = lang
        _config.load()