"""
Structured identifier generators.

Device, subscriber, national and vehicle identifiers with their real-world
layouts (and check digits where the format defines one), plus per-country
phone number templates.
"""

import logging
import string
from datetime import UTC, datetime, timedelta

from .random_source import RandomSource

logger = logging.getLogger(__name__)

# Mobile country codes used for IMSI generation
IMSI_MCCS = [
    "310", "311", "262", "208", "234", "404", "460", "440", "510", "525", "250",
]

# Verhoeff dihedral group tables
_VERHOEFF_D = [
    [0, 1, 2, 3, 4, 5, 6, 7, 8, 9],
    [1, 2, 3, 4, 0, 6, 7, 8, 9, 5],
    [2, 3, 4, 0, 1, 7, 8, 9, 5, 6],
    [3, 4, 0, 1, 2, 8, 9, 5, 6, 7],
    [4, 0, 1, 2, 3, 9, 5, 6, 7, 8],
    [5, 9, 8, 7, 6, 0, 4, 3, 2, 1],
    [6, 5, 9, 8, 7, 1, 0, 4, 3, 2],
    [7, 6, 5, 9, 8, 2, 1, 0, 4, 3],
    [8, 7, 6, 5, 9, 3, 2, 1, 0, 4],
    [9, 8, 7, 6, 5, 4, 3, 2, 1, 0],
]
_VERHOEFF_P = [
    [0, 1, 2, 3, 4, 5, 6, 7, 8, 9],
    [1, 5, 7, 6, 2, 8, 3, 0, 9, 4],
    [5, 8, 0, 3, 7, 9, 6, 1, 4, 2],
    [8, 9, 1, 6, 0, 4, 3, 5, 2, 7],
    [9, 4, 5, 3, 1, 2, 6, 8, 7, 0],
    [4, 2, 8, 6, 5, 7, 3, 9, 0, 1],
    [2, 7, 9, 3, 8, 0, 6, 4, 1, 5],
    [7, 0, 4, 6, 9, 1, 3, 2, 5, 8],
]
_VERHOEFF_INV = [0, 4, 3, 2, 1, 5, 6, 7, 8, 9]

# VIN alphabet excludes I, O and Q
VIN_ALPHABET = "ABCDEFGHJKLMNPRSTUVWXYZ0123456789"
_VIN_VALUES = {
    **{str(d): d for d in range(10)},
    "A": 1, "B": 2, "C": 3, "D": 4, "E": 5, "F": 6, "G": 7, "H": 8,
    "J": 1, "K": 2, "L": 3, "M": 4, "N": 5, "P": 7, "R": 9,
    "S": 2, "T": 3, "U": 4, "V": 5, "W": 6, "X": 7, "Y": 8, "Z": 9,
}
_VIN_WEIGHTS = [8, 7, 6, 5, 4, 3, 2, 10, 0, 9, 8, 7, 6, 5, 4, 3, 2]

# ================================
# CHECK DIGITS
# ================================


def luhn_check_digit(digits: str) -> int:
    """Luhn check digit for a digit string (the check digit is appended)."""
    total = 0
    for i, ch in enumerate(reversed(digits)):
        d = int(ch)
        if i % 2 == 0:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return (10 - total % 10) % 10


def is_luhn_valid(number: str) -> bool:
    return luhn_check_digit(number[:-1]) == int(number[-1])


def verhoeff_check_digit(digits: str) -> int:
    c = 0
    for i, ch in enumerate(reversed(digits)):
        c = _VERHOEFF_D[c][_VERHOEFF_P[(i + 1) % 8][int(ch)]]
    return _VERHOEFF_INV[c]


def is_verhoeff_valid(number: str) -> bool:
    c = 0
    for i, ch in enumerate(reversed(number)):
        c = _VERHOEFF_D[c][_VERHOEFF_P[i % 8][int(ch)]]
    return c == 0


def vin_check_digit(vin: str) -> str:
    """Check character for position 9 of a 17-character VIN."""
    total = sum(_VIN_VALUES[ch] * w for ch, w in zip(vin, _VIN_WEIGHTS))
    remainder = total % 11
    return "X" if remainder == 10 else str(remainder)


# ================================
# IDENTIFIERS
# ================================


def generate_imei(rng: RandomSource) -> str:
    """15-digit IMEI: 8-digit TAC, 6-digit serial, Luhn check digit."""
    body = f"{rng.rand_int(35_000_000, 35_999_999)}{rng.rand_int(100_000, 999_999)}"
    return body + str(luhn_check_digit(body))


def generate_imsi(rng: RandomSource) -> str:
    """15-digit IMSI: MCC, 2-digit MNC, 10-digit MSIN."""
    return (
        rng.choice(IMSI_MCCS)
        + str(rng.rand_int(10, 99))
        + str(rng.rand_int(1_000_000_000, 9_999_999_999))
    )


def generate_uid(rng: RandomSource) -> str:
    """12-digit UID whose last digit is a Verhoeff checksum."""
    body = str(rng.rand_int(1, 9)) + rng.digits(10)
    return body + str(verhoeff_check_digit(body))


def generate_eid(rng: RandomSource) -> str:
    """Enrolment id in ``xxx-xxxx-xxxxxxx-x`` layout."""
    return (
        f"{rng.rand_int(100, 999)}-{rng.rand_int(1000, 9999)}-"
        f"{rng.rand_int(1_000_000, 9_999_999)}-{rng.rand_int(0, 9)}"
    )


def generate_eid_with_timestamp(rng: RandomSource, now: datetime | None = None) -> str:
    """Enrolment id followed by an enrolment time within the last five years."""
    now = now or datetime.now(UTC)
    window_start = datetime(now.year - 5, 1, 1, tzinfo=UTC)
    span = int((now - window_start).total_seconds())
    enrolled = window_start + timedelta(seconds=rng.rand_int(0, max(span, 0)))
    return f"{generate_eid(rng)} ({enrolled:%Y/%m/%d %H:%M:%S})"


def generate_license_plate(rng: RandomSource) -> str:
    """Licence plate in one of three layouts: ABC-1234, 1ABC234 or AB12CDE."""
    letters = string.ascii_uppercase
    layout = rng.rand_int(0, 2)
    if layout == 0:
        return f"{rng.rand_string(3, letters)}-{rng.digits(4)}"
    if layout == 1:
        return f"{rng.digits(1)}{rng.rand_string(3, letters)}{rng.digits(3)}"
    return f"{rng.rand_string(2, letters)}{rng.digits(2)}{rng.rand_string(3, letters)}"


def generate_vin(rng: RandomSource) -> str:
    """17-character VIN with a valid position-9 check character."""
    chars = list(rng.rand_string(17, VIN_ALPHABET))
    chars[8] = "0"
    chars[8] = vin_check_digit("".join(chars))
    return "".join(chars)


def generate_delivery_id(rng: RandomSource) -> str:
    return f"DLV-{rng.digits(8)}"


def generate_route_id(rng: RandomSource) -> str:
    return f"RT-{rng.rand_string(2, string.ascii_uppercase)}{rng.rand_int(100, 999)}"


def generate_driver_name(rng: RandomSource) -> str:
    return rng.faker.name()


# ================================
# PHONE NUMBERS
# ================================

# Country -> (calling code, inclusive digit-group ranges)
PHONE_TEMPLATES: dict[str, tuple[str, list[tuple[int, int]]]] = {
    # North America
    "US": ("1", [(200, 999), (200, 999), (1000, 9999)]),
    "CA": ("1", [(200, 999), (200, 999), (1000, 9999)]),
    # Europe
    "GB": ("44", [(20, 79), (1000, 9999), (1000, 9999)]),
    "DE": ("49", [(30, 89), (10_000_000, 99_999_999)]),
    "FR": ("33", [(1, 9), (10, 99), (10, 99), (10, 99), (10, 99)]),
    "IT": ("39", [(300, 399), (1_000_000, 9_999_999)]),
    "ES": ("34", [(600, 799), (100, 999), (100, 999)]),
    "NL": ("31", [(6, 6), (10_000_000, 99_999_999)]),
    "BE": ("32", [(470, 499), (100_000, 999_999)]),
    "SE": ("46", [(70, 79), (1_000_000, 9_999_999)]),
    "NO": ("47", [(400, 999), (10_000, 99_999)]),
    "DK": ("45", [(20, 99), (10, 99), (10, 99), (10, 99)]),
    "FI": ("358", [(40, 50), (1_000_000, 9_999_999)]),
    "CH": ("41", [(76, 79), (100, 999), (10, 99), (10, 99)]),
    "AT": ("43", [(660, 699), (1_000_000, 9_999_999)]),
    "PT": ("351", [(910, 969), (100, 999), (100, 999)]),
    "GR": ("30", [(690, 699), (1_000_000, 9_999_999)]),
    "IE": ("353", [(85, 89), (100, 999), (1000, 9999)]),
    "PL": ("48", [(500, 799), (100, 999), (100, 999)]),
    "CZ": ("420", [(600, 799), (100, 999), (100, 999)]),
    "RO": ("40", [(720, 789), (100, 999), (100, 999)]),
    "HU": ("36", [(20, 30), (100, 999), (1000, 9999)]),
    "UA": ("380", [(50, 99), (100, 999), (10, 99), (10, 99)]),
    "BY": ("375", [(29, 44), (100, 999), (10, 99), (10, 99)]),
    "GE": ("995", [(550, 599), (100_000, 999_999)]),
    "AZ": ("994", [(50, 70), (100, 999), (10, 99), (10, 99)]),
    "AM": ("374", [(90, 99), (100_000, 999_999)]),
    # Asia-Pacific
    "IN": ("91", [(70, 99), (1000, 9999), (1000, 9999)]),
    "CN": ("86", [(130, 189), (1000, 9999), (1000, 9999)]),
    "JP": ("81", [(70, 90), (1000, 9999), (1000, 9999)]),
    "KR": ("82", [(10, 19), (1000, 9999), (1000, 9999)]),
    "ID": ("62", [(811, 899), (1000, 9999), (1000, 9999)]),
    "TH": ("66", [(80, 99), (100, 999), (1000, 9999)]),
    "VN": ("84", [(90, 99), (100, 999), (10, 99), (10, 99)]),
    "PH": ("63", [(900, 999), (100, 999), (1000, 9999)]),
    "MY": ("60", [(10, 19), (100, 999), (1000, 9999)]),
    "SG": ("65", [(8000, 9999), (1000, 9999)]),
    "AU": ("61", [(4, 4), (1000, 9999), (1000, 9999)]),
    "NZ": ("64", [(20, 29), (100, 999), (1000, 9999)]),
    "PK": ("92", [(300, 349), (1_000_000, 9_999_999)]),
    "BD": ("880", [(1700, 1999), (100_000, 999_999)]),
    "LK": ("94", [(70, 77), (1_000_000, 9_999_999)]),
    "NP": ("977", [(980, 986), (1_000_000, 9_999_999)]),
    "MM": ("95", [(9, 9), (100_000_000, 999_999_999)]),
    "KH": ("855", [(10, 99), (100, 999), (100, 999)]),
    "LA": ("856", [(20, 20), (10_000_000, 99_999_999)]),
    "UZ": ("998", [(90, 99), (100, 999), (10, 99), (10, 99)]),
    "KZ": ("7", [(700, 778), (100, 999), (10, 99), (10, 99)]),
    # Middle East
    "IL": ("972", [(50, 59), (100, 999), (1000, 9999)]),
    "SA": ("966", [(50, 59), (100, 999), (1000, 9999)]),
    "AE": ("971", [(50, 56), (100, 999), (1000, 9999)]),
    "TR": ("90", [(530, 559), (100, 999), (10, 99), (10, 99)]),
    "EG": ("20", [(100, 129), (100, 999), (1000, 9999)]),
    "JO": ("962", [(7, 7), (9000, 9999), (1000, 9999)]),
    "LB": ("961", [(3, 7), (100, 999), (100, 999)]),
    "KW": ("965", [(5000, 6999), (1000, 9999)]),
    "QA": ("974", [(3000, 7999), (1000, 9999)]),
    "BH": ("973", [(3000, 3999), (1000, 9999)]),
    "OM": ("968", [(9000, 9999), (1000, 9999)]),
    # Africa
    "ZA": ("27", [(60, 89), (100, 999), (1000, 9999)]),
    "NG": ("234", [(800, 909), (100, 999), (1000, 9999)]),
    "KE": ("254", [(700, 799), (100_000, 999_999)]),
    "GH": ("233", [(20, 59), (100, 999), (1000, 9999)]),
    "CI": ("225", [(40, 79), (10, 99), (10, 99), (10, 99)]),
    "SN": ("221", [(70, 78), (100, 999), (10, 99), (10, 99)]),
    "UG": ("256", [(700, 799), (100_000, 999_999)]),
    "TZ": ("255", [(60, 79), (100, 999), (1000, 9999)]),
    "ET": ("251", [(91, 94), (100, 999), (1000, 9999)]),
    "ZM": ("260", [(95, 97), (1_000_000, 9_999_999)]),
    "ZW": ("263", [(71, 78), (100, 999), (1000, 9999)]),
    "MZ": ("258", [(82, 87), (100, 999), (1000, 9999)]),
    "AO": ("244", [(910, 949), (100, 999), (100, 999)]),
    "CM": ("237", [(6, 6), (10, 99), (10, 99), (10, 99), (10, 99)]),
    "CD": ("243", [(800, 999), (100, 999), (100, 999)]),
    "MG": ("261", [(30, 34), (10, 99), (100, 999), (10, 99)]),
    "ML": ("223", [(60, 79), (10, 99), (10, 99), (10, 99)]),
    "NE": ("227", [(90, 99), (10, 99), (10, 99), (10, 99)]),
    "BF": ("226", [(50, 79), (10, 99), (10, 99), (10, 99)]),
    "BJ": ("229", [(90, 99), (10, 99), (10, 99), (10, 99)]),
    "TG": ("228", [(90, 99), (10, 99), (10, 99), (10, 99)]),
    "SL": ("232", [(30, 88), (100_000, 999_999)]),
    "LR": ("231", [(70, 88), (100, 999), (1000, 9999)]),
    "GN": ("224", [(600, 669), (10, 99), (10, 99), (10, 99)]),
    "GW": ("245", [(5, 7), (100_000, 999_999)]),
    "GM": ("220", [(300, 799), (1000, 9999)]),
    "MR": ("222", [(20, 49), (10, 99), (10, 99), (10, 99)]),
    "MA": ("212", [(6, 7), (10, 99), (10, 99), (10, 99), (10, 99)]),
    "DZ": ("213", [(5, 7), (10, 99), (10, 99), (10, 99), (10, 99)]),
    "TN": ("216", [(20, 99), (100, 999), (100, 999)]),
    "LY": ("218", [(91, 94), (100, 999), (1000, 9999)]),
    "SD": ("249", [(90, 99), (100, 999), (1000, 9999)]),
    # Latin America
    "BR": ("55", [(11, 99), (90_000, 99_999), (1000, 9999)]),
    "MX": ("52", [(55, 99), (1000, 9999), (1000, 9999)]),
    "AR": ("54", [(11, 11), (1000, 9999), (1000, 9999)]),
    "CL": ("56", [(9, 9), (1000, 9999), (1000, 9999)]),
    "CO": ("57", [(300, 320), (100, 999), (1000, 9999)]),
    "PE": ("51", [(900, 999), (100, 999), (100, 999)]),
    "VE": ("58", [(412, 426), (100, 999), (1000, 9999)]),
    # Russia
    "RU": ("7", [(900, 999), (100, 999), (10, 99), (10, 99)]),
}

DEFAULT_PHONE_COUNTRY = "US"


def random_phone(rng: RandomSource, country: str = DEFAULT_PHONE_COUNTRY) -> str:
    """
    Phone number in the country's template, e.g. ``+1-415-555-0134``.

    Unknown country codes use the US template.
    """
    template = PHONE_TEMPLATES.get(country.upper())
    if template is None:
        logger.debug(f"No phone template for country {country!r}, using US")
        template = PHONE_TEMPLATES[DEFAULT_PHONE_COUNTRY]

    calling_code, groups = template
    parts = [str(rng.rand_int(lo, hi)) for lo, hi in groups]
    return f"+{calling_code}-" + "-".join(parts)
