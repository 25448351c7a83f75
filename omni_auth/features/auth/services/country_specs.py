"""Numbering-plan rules keyed by country calling code.

Lengths are for the national significant number, following ITU-T E.164.
Keys are matched exactly; NANP territories with their own area-code prefix
("1684", "1242", ...) are separate keys from the shared "1".
"""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class CountrySpec:
    min_length: int
    max_length: int
    countries: tuple[str, ...] | None = None


COUNTRY_SPECS: MappingProxyType[str, CountrySpec] = MappingProxyType(
    {
        "93": CountrySpec(9, 9),  # Afghanistan
        "355": CountrySpec(9, 9),  # Albania
        "213": CountrySpec(9, 9),  # Algeria
        "1684": CountrySpec(7, 7),  # American Samoa
        "376": CountrySpec(6, 9),  # Andorra
        "244": CountrySpec(9, 9),  # Angola
        "1268": CountrySpec(7, 7),  # Antigua and Barbuda
        "54": CountrySpec(10, 11),  # Argentina
        "374": CountrySpec(8, 8),  # Armenia
        "61": CountrySpec(9, 9),  # Australia
        "43": CountrySpec(10, 13),  # Austria
        "994": CountrySpec(9, 9),  # Azerbaijan
        "1242": CountrySpec(7, 7),  # Bahamas
        "973": CountrySpec(8, 8),  # Bahrain
        "880": CountrySpec(10, 10),  # Bangladesh
        "1246": CountrySpec(7, 7),  # Barbados
        "375": CountrySpec(9, 9),  # Belarus
        "32": CountrySpec(9, 9),  # Belgium
        "501": CountrySpec(7, 7),  # Belize
        "229": CountrySpec(8, 8),  # Benin
        "975": CountrySpec(8, 8),  # Bhutan
        "591": CountrySpec(8, 8),  # Bolivia
        "387": CountrySpec(8, 8),  # Bosnia and Herzegovina
        "267": CountrySpec(8, 8),  # Botswana
        "55": CountrySpec(10, 11),  # Brazil
        "673": CountrySpec(7, 7),  # Brunei
        "359": CountrySpec(9, 9),  # Bulgaria
        "226": CountrySpec(8, 8),  # Burkina Faso
        "855": CountrySpec(8, 9),  # Cambodia
        "237": CountrySpec(9, 9),  # Cameroon
        "86": CountrySpec(11, 11),  # China
        "57": CountrySpec(10, 10),  # Colombia
        "506": CountrySpec(8, 8),  # Costa Rica
        "385": CountrySpec(9, 9),  # Croatia
        "53": CountrySpec(8, 8),  # Cuba
        "357": CountrySpec(8, 8),  # Cyprus
        "420": CountrySpec(9, 9),  # Czech Republic
        "45": CountrySpec(8, 8),  # Denmark
        "20": CountrySpec(10, 10),  # Egypt
        "372": CountrySpec(7, 8),  # Estonia
        "358": CountrySpec(9, 10),  # Finland
        "33": CountrySpec(9, 9),  # France
        "49": CountrySpec(10, 11),  # Germany
        "30": CountrySpec(10, 10),  # Greece
        "852": CountrySpec(8, 8),  # Hong Kong
        "36": CountrySpec(9, 9),  # Hungary
        "354": CountrySpec(7, 9),  # Iceland
        "91": CountrySpec(10, 10),  # India
        "62": CountrySpec(9, 12),  # Indonesia
        "98": CountrySpec(10, 10),  # Iran
        "964": CountrySpec(10, 10),  # Iraq
        "353": CountrySpec(9, 9),  # Ireland
        "972": CountrySpec(9, 9),  # Israel
        "39": CountrySpec(9, 11),  # Italy
        "81": CountrySpec(10, 10),  # Japan
        "962": CountrySpec(9, 9),  # Jordan
        "254": CountrySpec(9, 10),  # Kenya
        "965": CountrySpec(8, 8),  # Kuwait
        "961": CountrySpec(7, 8),  # Lebanon
        "60": CountrySpec(9, 10),  # Malaysia
        "52": CountrySpec(10, 10),  # Mexico
        "212": CountrySpec(9, 9),  # Morocco
        "31": CountrySpec(9, 9),  # Netherlands
        "64": CountrySpec(8, 10),  # New Zealand
        "234": CountrySpec(10, 10),  # Nigeria
        "47": CountrySpec(8, 8),  # Norway
        "92": CountrySpec(10, 10),  # Pakistan
        "63": CountrySpec(10, 10),  # Philippines
        "48": CountrySpec(9, 9),  # Poland
        "351": CountrySpec(9, 9),  # Portugal
        "974": CountrySpec(8, 8),  # Qatar
        "40": CountrySpec(9, 9),  # Romania
        "7": CountrySpec(10, 10),  # Russia
        "966": CountrySpec(9, 9),  # Saudi Arabia
        "65": CountrySpec(8, 8),  # Singapore
        "27": CountrySpec(9, 9),  # South Africa
        "82": CountrySpec(9, 10),  # South Korea
        "34": CountrySpec(9, 9),  # Spain
        "46": CountrySpec(9, 9),  # Sweden
        "41": CountrySpec(9, 9),  # Switzerland
        "886": CountrySpec(9, 9),  # Taiwan
        "66": CountrySpec(9, 9),  # Thailand
        "90": CountrySpec(10, 10),  # Turkey
        "971": CountrySpec(9, 9),  # UAE
        "44": CountrySpec(10, 10),  # UK
        "84": CountrySpec(9, 10),  # Vietnam
        "593": CountrySpec(9, 9),  # Ecuador
        "51": CountrySpec(9, 9),  # Peru
        "56": CountrySpec(9, 9),  # Chile
        "58": CountrySpec(10, 10),  # Venezuela
        "598": CountrySpec(8, 8),  # Uruguay
        "595": CountrySpec(9, 9),  # Paraguay
        "233": CountrySpec(9, 9),  # Ghana
        "221": CountrySpec(9, 9),  # Senegal
        "225": CountrySpec(10, 10),  # Cote d'Ivoire
        "251": CountrySpec(9, 9),  # Ethiopia
        "255": CountrySpec(9, 9),  # Tanzania
        "256": CountrySpec(9, 9),  # Uganda
        "250": CountrySpec(9, 9),  # Rwanda
        "260": CountrySpec(9, 9),  # Zambia
        "263": CountrySpec(9, 9),  # Zimbabwe
        "216": CountrySpec(8, 8),  # Tunisia
        "380": CountrySpec(9, 9),  # Ukraine
        "381": CountrySpec(8, 9),  # Serbia
        "421": CountrySpec(9, 9),  # Slovakia
        "386": CountrySpec(8, 8),  # Slovenia
        "370": CountrySpec(8, 8),  # Lithuania
        "371": CountrySpec(8, 8),  # Latvia
        "356": CountrySpec(8, 8),  # Malta
        "94": CountrySpec(9, 9),  # Sri Lanka
        "977": CountrySpec(10, 10),  # Nepal
        "968": CountrySpec(8, 8),  # Oman
        "1876": CountrySpec(7, 7),  # Jamaica
        "1868": CountrySpec(7, 7),  # Trinidad and Tobago
        "1787": CountrySpec(7, 7),  # Puerto Rico
        "1809": CountrySpec(7, 7),  # Dominican Republic
        # North American Numbering Plan
        "1": CountrySpec(10, 10, ("USA", "Canada")),
    }
)


def get_country_spec(country_code: str) -> CountrySpec | None:
    """Exact-match lookup of a cleaned calling code."""
    return COUNTRY_SPECS.get(country_code)
