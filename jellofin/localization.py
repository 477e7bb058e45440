"""Fixed culture and country lists offered to clients."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CultureDto:
    """A language culture as the client API presents it."""

    name: str
    display_name: str
    two_letter_iso_language_name: str
    three_letter_iso_language_name: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        """Return the wire form of this culture."""
        return {
            "Name": self.name,
            "DisplayName": self.display_name,
            "TwoLetterISOLanguageName": self.two_letter_iso_language_name,
            "ThreeLetterISOLanguageName": self.three_letter_iso_language_name,
        }


@dataclass(frozen=True)
class CountryInfo:
    """A country as the client API presents it."""

    name: str
    display_name: str
    two_letter_iso_region_name: str
    three_letter_iso_region_name: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        """Return the wire form of this country."""
        return {
            "Name": self.name,
            "DisplayName": self.display_name,
            "TwoLetterISORegionName": self.two_letter_iso_region_name,
            "ThreeLetterISORegionName": self.three_letter_iso_region_name,
        }


@dataclass(frozen=True)
class LocalizationOption:
    """A selectable localisation option."""

    name: str
    value: str

    def to_dict(self) -> dict[str, str]:
        """Return the wire form of this option."""
        return {"Name": self.name, "Value": self.value}


_CULTURES = (
    ("en-US", "English (United States)", "en", "eng"),
    ("en-GB", "English (United Kingdom)", "en", "eng"),
    ("es-ES", "Spanish (Spain)", "es", "spa"),
    ("fr-FR", "French (France)", "fr", "fra"),
    ("de-DE", "German (Germany)", "de", "deu"),
    ("it-IT", "Italian (Italy)", "it", "ita"),
    ("nl-NL", "Dutch (Netherlands)", "nl", "nld"),
)

_COUNTRIES = (
    ("US", "United States", "USA"),
    ("GB", "United Kingdom", "GBR"),
    ("CA", "Canada", "CAN"),
    ("AU", "Australia", "AUS"),
    ("DE", "Germany", "DEU"),
    ("FR", "France", "FRA"),
    ("ES", "Spain", "ESP"),
    ("IT", "Italy", "ITA"),
    ("NL", "Netherlands", "NLD"),
)


def cultures() -> list[CultureDto]:
    """Return the supported cultures."""
    return [CultureDto(*row) for row in _CULTURES]


def countries() -> list[CountryInfo]:
    """Return the supported countries."""
    return [CountryInfo(code, display, code, three) for code, display, three in _COUNTRIES]


def localization_options() -> list[LocalizationOption]:
    """Return the localisation options; there are none."""
    return []