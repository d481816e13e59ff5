"""
Name-based value heuristics.

Each table is an ordered list of Heuristic entries evaluated first match
wins against the lower-cased field name. Predicates are built from a few
small combinators so the tables read as data:

    Heuristic("email", contains_any("email") | has_token("mail"), _email)

String generators take a RandomSource; number generators also take
``is_integer`` so one entry can serve both the integer and float families.
"""

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from ..sourcedata import vocabulary
from ..sourcedata.gazetteer import SEAPORTS, WAREHOUSES
from . import identifiers
from .random_source import RandomSource

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def tokenize(field_name: str) -> list[str]:
    """Split ``customerId`` / ``ip_address`` / ``Ship-Name`` into lower-case words."""
    spaced = _CAMEL_BOUNDARY.sub(r"\1_\2", field_name)
    return [t for t in _NON_ALNUM.split(spaced.lower()) if t]


# ================================
# PREDICATES
# ================================


class Predicate:
    """Composable predicate over a field name (``&``, ``|`` and ``~``)."""

    def __init__(self, fn: Callable[[str, list[str]], bool]):
        self._fn = fn

    def __call__(self, name: str) -> bool:
        return self._fn(name.lower(), tokenize(name))

    def test(self, lower: str, tokens: list[str]) -> bool:
        return self._fn(lower, tokens)

    def __and__(self, other: "Predicate") -> "Predicate":
        return Predicate(lambda n, t: self.test(n, t) and other.test(n, t))

    def __or__(self, other: "Predicate") -> "Predicate":
        return Predicate(lambda n, t: self.test(n, t) or other.test(n, t))

    def __invert__(self) -> "Predicate":
        return Predicate(lambda n, t: not self.test(n, t))


def contains_any(*parts: str) -> Predicate:
    return Predicate(lambda n, t: any(p in n for p in parts))


def contains_all(*parts: str) -> Predicate:
    return Predicate(lambda n, t: all(p in n for p in parts))


def has_token(*tokens: str) -> Predicate:
    return Predicate(lambda n, t: any(tok in t for tok in tokens))


def named(*names: str) -> Predicate:
    return Predicate(lambda n, t: n in names)


def excludes(*parts: str) -> Predicate:
    return ~contains_any(*parts)


# ================================
# TABLE ENTRY
# ================================


@dataclass(frozen=True)
class Heuristic:
    """One ``(predicate, generator)`` pair in a heuristic table."""

    label: str
    matches: Predicate
    generate: Callable[..., Any]


def find_heuristic(table: Sequence[Heuristic], field_name: str) -> Heuristic | None:
    """First heuristic in ``table`` whose predicate matches ``field_name``."""
    lower = field_name.lower()
    tokens = tokenize(field_name)
    for heuristic in table:
        if heuristic.matches.test(lower, tokens):
            return heuristic
    return None


def _pick(values: Sequence[str]) -> Callable[[RandomSource], str]:
    return lambda rng: rng.choice(values)


# ================================
# STRING HEURISTICS
# ================================


def _digits_only(text: str) -> str:
    return re.sub(r"\D", "", text)


def _product_name(rng: RandomSource) -> str:
    return (
        f"{rng.choice(vocabulary.PRODUCT_ADJECTIVES)} "
        f"{rng.choice(vocabulary.PRODUCT_MATERIALS)} "
        f"{rng.choice(vocabulary.PRODUCT_NOUNS)}"
    )


def _numeric_string(rng: RandomSource, field_name: str) -> str:
    tokens = tokenize(field_name)
    if "age" in tokens:
        length = 2
    elif "uid" in tokens or "eid" in tokens:
        length = 12
    else:
        length = 8
    return rng.digits(length)


_NUMERIC_TOKENS = has_token("id", "uid", "eid", "number", "num", "no", "code", "value", "age")

STRING_HEURISTICS: list[Heuristic] = [
    # People
    Heuristic(
        "gender",
        named("gender", "sex") | contains_any("_gender", "gender_"),
        _pick(vocabulary.GENDERS),
    ),
    Heuristic("order_status", contains_all("order", "status"), _pick(vocabulary.ORDER_STATUSES)),
    Heuristic("payment_status", contains_all("payment", "status"), _pick(vocabulary.PAYMENT_STATUSES)),
    Heuristic("marital_status", contains_any("marital"), _pick(vocabulary.MARITAL_STATUSES)),
    Heuristic(
        "status",
        named("status") | contains_any("_status", "status_"),
        _pick(vocabulary.GENERIC_STATUSES),
    ),
    Heuristic("imei", contains_any("imei"), identifiers.generate_imei),
    Heuristic("imsi", contains_any("imsi"), identifiers.generate_imsi),
    Heuristic(
        "phone",
        contains_any("phone", "mobile") | has_token("tel", "telephone", "msisdn"),
        lambda rng: _digits_only(rng.faker.msisdn())[:10],
    ),
    Heuristic(
        "occupation",
        contains_any("occupation", "profession", "career")
        | (contains_any("job") & excludes("title")),
        lambda rng: rng.faker.job(),
    ),
    Heuristic("department", contains_any("department", "dept"), _pick(vocabulary.DEPARTMENTS)),
    Heuristic(
        "role",
        contains_any("role", "position") | contains_all("job", "title"),
        _pick(vocabulary.ROLE_DESCRIPTORS),
    ),
    Heuristic("education", contains_any("education", "degree"), _pick(vocabulary.DEGREES)),
    Heuristic("dog_name", contains_any("dog"), _pick(vocabulary.DOGS)),
    Heuristic("first_name", contains_all("first", "name"), lambda rng: rng.faker.first_name()),
    Heuristic("last_name", contains_all("last", "name"), lambda rng: rng.faker.last_name()),
    Heuristic(
        "user_name",
        named("username", "login") | contains_all("user", "name"),
        lambda rng: rng.faker.user_name(),
    ),
    Heuristic(
        "company_name",
        contains_all("company", "name") | contains_all("business", "name"),
        lambda rng: rng.faker.company(),
    ),
    Heuristic("company_suffix", contains_all("company", "suffix"), lambda rng: rng.faker.company_suffix()),
    # Aviation and maritime come before location so "airport" is not a place
    Heuristic("iata", contains_any("iata"), _pick(vocabulary.IATA_CODES)),
    Heuristic("icao", contains_any("icao"), _pick(vocabulary.ICAO_CODES)),
    Heuristic("airport", contains_any("airport"), _pick(vocabulary.IATA_CODES)),
    Heuristic(
        "vessel_name",
        contains_all("vessel", "name") | contains_all("ship", "name"),
        _pick(vocabulary.VESSEL_NAMES),
    ),
    Heuristic(
        "vessel_type",
        contains_all("vessel", "type") | contains_all("ship", "type"),
        _pick(vocabulary.VESSEL_TYPES),
    ),
    Heuristic("imo", has_token("imo") | Predicate(lambda n, t: n.startswith("imo")), _pick(vocabulary.IMO_NUMBERS)),
    Heuristic(
        "seaport",
        contains_all("port", "name") & excludes("airport", "passport"),
        lambda rng: rng.choice(SEAPORTS).name,
    ),
    # Road logistics
    Heuristic("license_plate", contains_any("license", "licence", "plate"), identifiers.generate_license_plate),
    Heuristic("vehicle_type", contains_all("vehicle", "type"), _pick(vocabulary.VEHICLE_TYPES)),
    Heuristic("vehicle_make", has_token("make", "manufacturer") & excludes("email"), _pick(vocabulary.VEHICLE_MAKES)),
    Heuristic("vin", has_token("vin"), identifiers.generate_vin),
    Heuristic("driver", contains_any("driver"), identifiers.generate_driver_name),
    Heuristic("delivery_id", contains_any("delivery") & has_token("id"), identifiers.generate_delivery_id),
    Heuristic("route_id", contains_any("route") & has_token("id"), identifiers.generate_route_id),
    Heuristic("warehouse", contains_any("warehouse"), lambda rng: rng.choice(WAREHOUSES).name),
    # Full names come after the more specific *_name entries above
    Heuristic(
        "full_name",
        contains_all("full", "name") | named("name", "customer", "person"),
        lambda rng: rng.faker.name(),
    ),
    # Network and devices
    Heuristic("ipv6", contains_any("ipv6"), lambda rng: rng.rand_ipv6()),
    Heuristic("ip", named("ip") | has_token("ip", "ipv4"), lambda rng: rng.rand_ipv4()),
    Heuristic("mac_address", has_token("mac"), lambda rng: rng.faker.mac_address()),
    Heuristic(
        "hostname",
        contains_any("hostname") | contains_all("host", "name"),
        lambda rng: rng.faker.hostname(),
    ),
    Heuristic("user_agent", contains_all("user", "agent"), lambda rng: rng.faker.user_agent()),
    Heuristic("uuid", contains_any("uuid", "guid"), lambda rng: rng.faker.uuid4()),
    Heuristic(
        "serial_number",
        contains_any("serial") & (contains_any("number") | has_token("no")),
        lambda rng: rng.rand_string(12, "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"),
    ),
    # Finance
    Heuristic(
        "credit_card",
        contains_all("credit", "card") | contains_all("card", "number"),
        lambda rng: rng.faker.credit_card_number(),
    ),
    Heuristic("bank_account", contains_all("bank", "account"), lambda rng: rng.faker.bban()),
    Heuristic("iban", contains_any("iban"), lambda rng: rng.faker.iban()),
    Heuristic("swift", contains_any("swift") | has_token("bic"), lambda rng: rng.faker.swift()),
    Heuristic("routing_number", contains_all("routing", "number"), lambda rng: rng.faker.aba()),
    Heuristic("pin", has_token("pin", "cvv", "cvc"), lambda rng: rng.digits(4)),
    # Location
    Heuristic("city", contains_any("city"), lambda rng: rng.faker.city()),
    Heuristic("country_code", contains_all("country", "code"), lambda rng: rng.faker.country_code()),
    Heuristic("country", contains_any("country", "nationality"), lambda rng: rng.faker.country()),
    Heuristic(
        "place",
        contains_any("place") | (contains_any("location") & excludes("lat", "lon")),
        lambda rng: rng.faker.city(),
    ),
    Heuristic("state", contains_any("state") & excludes("status", "statement"), lambda rng: rng.faker.state_abbr()),
    Heuristic("postal_code", contains_any("zip", "postal", "postcode"), lambda rng: rng.faker.postcode()),
    Heuristic(
        "street_address",
        contains_any("street") | (contains_any("address") & excludes("email")),
        lambda rng: rng.faker.street_address(),
    ),
    # Web and media
    Heuristic(
        "email",
        contains_any("email") | has_token("mail"),
        lambda rng: rng.faker.email(),
    ),
    Heuristic("url", contains_any("url", "website", "link"), lambda rng: rng.faker.url()),
    Heuristic("domain", contains_any("domain"), lambda rng: rng.faker.domain_name()),
    Heuristic(
        "image_url",
        contains_any("image", "photo", "avatar", "picture"),
        lambda rng: rng.faker.image_url(),
    ),
    Heuristic("video_url", contains_any("video"), lambda rng: rng.faker.image_url(width=1920, height=1080)),
    Heuristic("file_name", contains_any("file", "document"), lambda rng: rng.faker.file_name()),
    Heuristic("color", contains_any("color", "colour"), lambda rng: rng.faker.color_name()),
    Heuristic("size", contains_any("size") & excludes("page", "file"), _pick(vocabulary.CLOTHING_SIZES)),
    # Commerce
    Heuristic("product_name", contains_all("product", "name"), _product_name),
    Heuristic(
        "sku",
        contains_any("sku") | contains_all("product", "code"),
        lambda rng: rng.rand_string(10, "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"),
    ),
    Heuristic(
        "product_description",
        contains_all("product", "description"),
        lambda rng: rng.faker.paragraph(nb_sentences=2),
    ),
    Heuristic(
        "category",
        contains_any("category") | (has_token("type") & excludes("vessel", "vehicle")),
        _pick(vocabulary.PRODUCT_CATEGORIES),
    ),
    # Personal identifiers
    Heuristic("uid", named("uid") | contains_any("aadhaar", "aadhar"), identifiers.generate_uid),
    Heuristic(
        "eid_with_timestamp",
        (named("eid") | contains_any("enrol")) & contains_any("timestamp", "full", "detail"),
        identifiers.generate_eid_with_timestamp,
    ),
    Heuristic("eid", named("eid") | (contains_any("enrol") & has_token("id")), identifiers.generate_eid),
    Heuristic(
        "passport_number",
        contains_any("passport"),
        lambda rng: rng.rand_string(9, "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"),
    ),
    Heuristic("ssn", has_token("ssn") | contains_all("social", "security"), lambda rng: rng.faker.ssn()),
    Heuristic("national_id", contains_all("national", "id"), lambda rng: rng.digits(13)),
    Heuristic(
        "tax_id",
        contains_all("tax", "id"),
        lambda rng: f"{rng.digits(2)}-{rng.digits(7)}",
    ),
    # Identifier-, code- or value-like names become digit strings
    Heuristic(
        "numeric_string",
        _NUMERIC_TOKENS | contains_any("number"),
        lambda rng: rng.digits(8),
    ),
    # Free text
    Heuristic(
        "description",
        contains_any("description", "desc", "comment", "note", "summary"),
        lambda rng: rng.faker.sentence(),
    ),
    Heuristic(
        "title",
        contains_any("title", "subject", "headline"),
        lambda rng: " ".join(rng.faker.words(nb=rng.rand_int(2, 5))).capitalize(),
    ),
    Heuristic("bio", contains_any("bio"), lambda rng: rng.faker.paragraph(nb_sentences=2)),
    Heuristic(
        "text",
        has_token("text", "content", "body", "message"),
        lambda rng: rng.faker.paragraph(),
    ),
]


def guess_string(rng: RandomSource, field_name: str) -> tuple[str, str] | None:
    """
    Apply the string table to a field name.

    Returns:
        ``(label, value)`` for the first matching heuristic, or None
    """
    heuristic = find_heuristic(STRING_HEURISTICS, field_name)
    if heuristic is None:
        return None
    if heuristic.label == "numeric_string":
        return heuristic.label, _numeric_string(rng, field_name)
    return heuristic.label, heuristic.generate(rng)


# ================================
# NUMBER HEURISTICS
# ================================


def _span(lo: float, hi: float, digits: int = 2) -> Callable[[RandomSource, bool], int | float]:
    """Uniform value in [lo, hi]; integers for the integer family."""

    def generate(rng: RandomSource, is_integer: bool) -> int | float:
        if is_integer:
            return rng.rand_int(int(lo), int(hi))
        return rng.rand_float(lo, hi, digits)

    return generate


def _int_only(lo: int, hi: int) -> Callable[[RandomSource, bool], int]:
    return lambda rng, is_integer: rng.rand_int(lo, hi)


def _birth_year(rng: RandomSource, is_integer: bool) -> int:
    return rng.faker.date_of_birth(minimum_age=0, maximum_age=100).year


def _uid_number(rng: RandomSource, is_integer: bool) -> int:
    return int(identifiers.generate_uid(rng))


_ID_LIKE = (has_token("id", "number", "num", "no") | contains_any("_id", "_no")) & excludes(
    "phone", "mobile", "passport", "ssn", "national", "tax"
)

NUMBER_HEURISTICS: list[Heuristic] = [
    Heuristic("age", has_token("age"), _int_only(1, 100)),
    Heuristic("birth_year", contains_all("birth", "year"), _birth_year),
    Heuristic("quantity", contains_any("quantity", "qty"), _int_only(1, 100)),
    Heuristic("count", has_token("count", "counter"), _int_only(0, 1000)),
    Heuristic("stock", contains_any("stock", "inventory"), _int_only(0, 500)),
    Heuristic("percentage", contains_any("percent", "pct") | has_token("rate", "ratio"), _span(0, 100)),
    Heuristic("score", contains_any("score") & excludes("credit"), _span(0, 100)),
    Heuristic("credit_score", contains_all("credit", "score"), _int_only(300, 850)),
    Heuristic("price", contains_any("price", "cost", "amount", "total", "fee"), _span(10, 10_000)),
    Heuristic("salary", contains_any("salary", "wage"), _span(30_000, 150_000)),
    Heuristic("revenue", contains_any("revenue", "income"), _span(10_000, 1_000_000)),
    Heuristic("weight_kg", contains_any("weight") & contains_any("kg", "kilo"), _span(40, 150, 1)),
    Heuristic("weight_lb", contains_any("weight") & contains_any("lb", "pound"), _span(90, 330, 1)),
    Heuristic("weight", contains_any("weight"), _span(1, 200, 1)),
    Heuristic("height_cm", contains_any("height") & contains_any("cm", "centimet"), _span(150, 200, 1)),
    Heuristic("height_ft", contains_any("height") & contains_any("ft", "feet", "inch"), _span(60, 78, 1)),
    Heuristic("height_m", contains_any("height") & (has_token("m") | contains_any("meter", "metre")), _span(1.5, 2.0)),
    Heuristic("height", contains_any("height"), _span(150, 200, 1)),
    Heuristic("distance", contains_any("distance", "mileage"), _span(1, 1000)),
    Heuristic("temperature", has_token("temp") | contains_any("temperature"), _span(-20, 50, 1)),
    Heuristic(
        "duration",
        contains_any("duration") | (contains_any("time") & contains_any("elapsed", "spent")),
        _span(1, 3600),
    ),
    Heuristic("speed", contains_any("speed", "velocity"), _span(0, 300, 1)),
    Heuristic("rating", contains_any("rating", "stars"), _span(1, 5, 1)),
    Heuristic("priority", contains_any("priority"), _int_only(1, 5)),
    Heuristic("uid", named("uid") | contains_any("aadhaar", "aadhar"), _uid_number),
    Heuristic("national_id", contains_all("national", "id"), _int_only(10**12, 10**13 - 1)),
    Heuristic("tax_id", contains_all("tax", "id"), _int_only(10**8, 10**9 - 1)),
    # A bare "id" keeps the generic range; only qualified ids are widened
    Heuristic("numeric_id", _ID_LIKE & ~named("id"), _int_only(10_000, 999_999)),
]


def guess_number(
    rng: RandomSource, field_name: str, is_integer: bool
) -> tuple[str, int | float] | None:
    """
    Apply the number table to a field name.

    Returns:
        ``(label, value)`` for the first matching heuristic, or None
    """
    heuristic = find_heuristic(NUMBER_HEURISTICS, field_name)
    if heuristic is None:
        return None
    value = heuristic.generate(rng, is_integer)
    if not is_integer and isinstance(value, int):
        value = float(value)
    return heuristic.label, value


# ================================
# BOOLEAN HEURISTICS
# ================================

BOOLEAN_HEURISTICS: list[Heuristic] = [
    Heuristic(
        "positive",
        contains_any("active", "enabled", "verified", "confirmed", "approved"),
        lambda rng: rng.chance(0.7),
    ),
    Heuristic(
        "negative",
        contains_any("deleted", "blocked", "banned", "suspended", "archived"),
        lambda rng: rng.chance(0.2),
    ),
]


def guess_boolean(rng: RandomSource, field_name: str) -> bool:
    heuristic = find_heuristic(BOOLEAN_HEURISTICS, field_name)
    if heuristic is None:
        return rng.chance(0.5)
    return heuristic.generate(rng)
