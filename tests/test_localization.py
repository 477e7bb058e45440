from jellofin.localization import (
    CountryInfo,
    CultureDto,
    LocalizationOption,
    countries,
    cultures,
    localization_options,
)


def test_cultures_first_entry():
    first = cultures()[0]
    assert first == CultureDto("en-US", "English (United States)", "en", "eng")


def test_culture_names_match_source_order():
    assert [c.name for c in cultures()] == [
        "en-US", "en-GB", "es-ES", "fr-FR", "de-DE", "it-IT", "nl-NL",
    ]


def test_culture_two_letter_prefix_of_name():
    for culture in cultures():
        assert culture.name.split("-")[0] == culture.two_letter_iso_language_name
        assert len(culture.three_letter_iso_language_name) == 3


def test_culture_to_dict_keys():
    wire = cultures()[2].to_dict()
    assert wire == {
        "Name": "es-ES",
        "DisplayName": "Spanish (Spain)",
        "TwoLetterISOLanguageName": "es",
        "ThreeLetterISOLanguageName": "spa",
    }


def test_countries_codes():
    assert [c.name for c in countries()] == [
        "US", "GB", "CA", "AU", "DE", "FR", "ES", "IT", "NL",
    ]


def test_country_name_equals_region_code():
    for country in countries():
        assert country.name == country.two_letter_iso_region_name
        assert country.three_letter_iso_region_name[0] == country.name[0]


def test_country_to_dict():
    uk = countries()[1]
    assert uk.to_dict() == {
        "Name": "GB",
        "DisplayName": "United Kingdom",
        "TwoLetterISORegionName": "GB",
        "ThreeLetterISORegionName": "GBR",
    }
    assert isinstance(uk, CountryInfo) and uk.display_name == "United Kingdom"


def test_localization_options_empty():
    assert localization_options() == []


def test_localization_option_to_dict():
    option = LocalizationOption(name="English", value="en-US")
    assert option.to_dict() == {"Name": "English", "Value": "en-US"}


def test_lists_are_fresh_copies():
    first = cultures()
    first.clear()
    assert len(cultures()) == 7