"""Locale provider backed by the process environment."""

from __future__ import annotations

import locale
import os
import re
from collections.abc import Mapping

_REGION_PATTERN = re.compile(r"^[A-Za-z]{2,3}[_-]([A-Za-z]{2}|\d{3})(?:[.@].*)?$")

_LOCALE_VARIABLES = ("LC_ALL", "LC_MESSAGES", "LANG")


def region_from_locale(value: str | None) -> str | None:
    """Extract the region from a locale name.

    ``de_DE.UTF-8`` -> ``DE``, ``en-US`` -> ``US``, ``C`` -> None.
    """
    if not value:
        return None
    match = _REGION_PATTERN.match(value.strip())
    return match.group(1).upper() if match else None


class SystemLocaleProvider:
    """Reads the preferred region from locale variables, then ``locale.getlocale``."""

    def __init__(
        self,
        region_override: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._override = region_override
        self._environ = os.environ if environ is None else environ

    def region(self) -> str | None:
        if self._override:
            return self._override.upper()

        for variable in _LOCALE_VARIABLES:
            region = region_from_locale(self._environ.get(variable))
            if region:
                return region

        language_code, _ = locale.getlocale()
        return region_from_locale(language_code)
