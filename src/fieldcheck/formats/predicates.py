"""
Boolean string predicates behind the format catalog.

Each predicate takes a non-empty string and answers whether it conforms to
one format. They are pure and independent of each other; anything the
standard library or ``email-validator`` already parses is delegated there,
the rest are regular expressions matched against the whole string.
"""

from __future__ import annotations

import base64
import binascii
import ipaddress
import json
import re
import unicodedata
from functools import lru_cache
from urllib.parse import urlsplit

import semver
from email_validator import EmailNotValidError, validate_email

from fieldcheck.settings import get_settings
from fieldcheck.utilities.logging_patterns import get_logger

from .iso3166 import ALPHA2_CODES, ALPHA3_CODES

logger = get_logger(__name__, component="formats")

_MAX_URL_LENGTH = 2083
_MIN_URL_LENGTH = 3
_MAX_DOMAIN_LENGTH = 255

# Character classes
_ALPHA_RE = re.compile(r"[a-zA-Z]+")
_DIGIT_RE = re.compile(r"[0-9]+")
_ALPHANUMERIC_RE = re.compile(r"[a-zA-Z0-9]+")
_HEXADECIMAL_RE = re.compile(r"[0-9a-fA-F]+")
_ASCII_RE = re.compile(r"[\x00-\x7F]+")
_PRINTABLE_ASCII_RE = re.compile(r"[\x20-\x7E]+")
_MULTIBYTE_RE = re.compile(r"[^\x00-\x7F]")
_HALF_WIDTH_CLASS = r" -~\uFF61-\uFF9F\uFFA0-\uFFDC\uFFE8-\uFFEE0-9a-zA-Z"
_FULL_WIDTH_RE = re.compile(rf"[^{_HALF_WIDTH_CLASS}]")
_HALF_WIDTH_RE = re.compile(rf"[{_HALF_WIDTH_CLASS}]")

# Colours and numbers
_HEX_COLOR_RE = re.compile(r"#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")
_RGB_COMPONENT = r"\s*(?:0|[1-9][0-9]?|1[0-9][0-9]|2[0-4][0-9]|25[0-5])\s*"
_RGB_COLOR_RE = re.compile(rf"rgb\({_RGB_COMPONENT},{_RGB_COMPONENT},{_RGB_COMPONENT}\)")
_INT_RE = re.compile(r"[-+]?(?:0|[1-9][0-9]*)")
_FLOAT_RE = re.compile(r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")
_LATITUDE_RE = re.compile(r"[-+]?(?:[1-8]?[0-9](?:\.[0-9]+)?|90(?:\.0+)?)")
_LONGITUDE_RE = re.compile(r"[-+]?(?:180(?:\.0+)?|(?:1[0-7][0-9]|[1-9]?[0-9])(?:\.[0-9]+)?)")

# Identifiers
_UUID_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.I)
_UUID3_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-3[0-9a-f]{3}-[0-9a-f]{4}-[0-9a-f]{12}", re.I)
_UUID4_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}", re.I)
_UUID5_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-5[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}", re.I)
_NOT_DIGIT_RE = re.compile(r"[^0-9]+")
_CREDIT_CARD_RE = re.compile(
    r"4[0-9]{12}(?:[0-9]{3})?"  # Visa
    r"|(?:5[1-5][0-9]{2}|222[1-9]|22[3-9][0-9]|2[3-6][0-9]{2}|27[01][0-9]|2720)[0-9]{12}"  # Mastercard
    r"|6(?:011|5[0-9]{2})[0-9]{12}"  # Discover
    r"|3[47][0-9]{13}"  # Amex
    r"|3(?:0[0-5]|[68][0-9])[0-9]{11}"  # Diners Club
    r"|(?:2131|1800|35[0-9]{3})[0-9]{11}"  # JCB
)
_ISBN_SEPARATOR_RE = re.compile(r"[\s-]+")
_ISBN10_RE = re.compile(r"[0-9]{9}X|[0-9]{10}")
_ISBN13_RE = re.compile(r"[0-9]{13}")
_SSN_RE = re.compile(r"[0-9]{3}[- ]?[0-9]{2}[- ]?[0-9]{4}")

# Network
_SUBDOMAIN_RE = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9\-]{0,61}[A-Za-z0-9])?")
_DOMAIN_RE = re.compile(
    r"(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+(?:[a-z]{1,63}|xn--[a-z0-9]{1,59})"
)
_DNS_NAME_RE = re.compile(
    r"[a-zA-Z0-9_][a-zA-Z0-9_-]{0,62}(?:\.[a-zA-Z0-9_][a-zA-Z0-9_-]{0,62})*[._]?"
)
_PORT_RE = re.compile(r"[-+]?[0-9]+")
_HEX_PAIR_RE = re.compile(r"[0-9a-fA-F]{2}")
_HEX_QUAD_RE = re.compile(r"[0-9a-fA-F]{4}")
_MAC_OCTET_COUNTS = frozenset({6, 8, 20})
_URL_RE = re.compile(
    r"(?:(?:ftp|tcp|udp|wss?|https?)://)?"
    r"(?:\S+(?::\S*)?@)?"
    r"(?P<host>\[[0-9A-Fa-f:.]+\]|[^\s/?#:@\[\]]+)"
    r"(?::(?P<port>[0-9]{1,5}))?"
    r"(?:[/?#]\S*)?",
    re.IGNORECASE,
)
_URL_LABEL_CHAR = r"0-9A-Za-z\u00A1-\uFFFF"
_URL_LABEL = rf"[{_URL_LABEL_CHAR}](?:[{_URL_LABEL_CHAR}_-]{{0,62}}[{_URL_LABEL_CHAR}])?"
_URL_HOST_RE = re.compile(rf"(?:{_URL_LABEL}\.)*{_URL_LABEL}\.?")
_SCHEME_PREFIX_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*:")
_DATA_URI_HEADER_RE = re.compile(r"data:.+/.+;base64")


def _has_control_chars(value: str) -> bool:
    return any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value)


def _categories_in(value: str, majors: str) -> bool:
    return all(unicodedata.category(ch)[0] in majors for ch in value)


@lru_cache(maxsize=1)
def _announce_deliverability_checks() -> None:
    logger.warning("Email deliverability checks enabled; EMAIL validation performs DNS queries")


def is_email(value: str) -> bool:
    settings = get_settings()
    if settings.email_check_deliverability:
        _announce_deliverability_checks()
    try:
        validate_email(
            value,
            check_deliverability=settings.email_check_deliverability,
            allow_smtputf8=settings.email_allow_smtputf8,
        )
    except EmailNotValidError:
        return False
    return True


def _is_url_host(host: str) -> bool:
    if host.startswith("["):
        return is_ipv6(host[1:-1])
    if host.replace(".", "").isdigit():
        return is_ipv4(host)
    return bool(_URL_HOST_RE.fullmatch(host))


def is_url(value: str) -> bool:
    """Absolute or scheme-less URL with a plausible host."""
    if len(value) >= _MAX_URL_LENGTH or len(value) <= _MIN_URL_LENGTH or value.startswith("."):
        return False

    candidate = value
    if ":" in value and "://" not in value:
        candidate = "http://" + value
    try:
        parts = urlsplit(candidate)
    except ValueError:
        return False
    if parts.netloc.startswith("."):
        return False
    # A bare word such as "examplecom" parses as a path without a host.
    if not parts.netloc and parts.path and "." not in parts.path:
        return False

    match = _URL_RE.fullmatch(value)
    if match is None or not _is_url_host(match["host"]):
        return False
    port = match["port"]
    return port is None or 0 < int(port) < 65536


def is_request_uri(value: str) -> bool:
    """Absolute URI or absolute path, as accepted on an HTTP request line."""
    if _has_control_chars(value):
        return False
    try:
        urlsplit(value)
    except ValueError:
        return False
    return value.startswith("/") or _SCHEME_PREFIX_RE.match(value) is not None


def is_request_url(value: str) -> bool:
    """Like :func:`is_request_uri` but the URI must carry a scheme."""
    return is_request_uri(value) and _SCHEME_PREFIX_RE.match(value) is not None


def is_alpha(value: str) -> bool:
    return _ALPHA_RE.fullmatch(value) is not None


def is_digit(value: str) -> bool:
    return _DIGIT_RE.fullmatch(value) is not None


def is_alphanumeric(value: str) -> bool:
    return _ALPHANUMERIC_RE.fullmatch(value) is not None


def is_utf_letter(value: str) -> bool:
    return _categories_in(value, "L")


def is_utf_digit(value: str) -> bool:
    """Unicode decimal digits, optionally led by a single sign."""
    if any(sign in value[1:] for sign in "+-"):
        return False
    if len(value) > 1 and value[0] in "+-":
        value = value[1:]
    return all(unicodedata.category(ch) == "Nd" for ch in value)


def is_utf_letter_numeric(value: str) -> bool:
    return _categories_in(value, "LN")


def is_utf_numeric(value: str) -> bool:
    return _categories_in(value, "N")


def is_lower_case(value: str) -> bool:
    return value == value.lower()


def is_upper_case(value: str) -> bool:
    return value == value.upper()


def is_hexadecimal(value: str) -> bool:
    return _HEXADECIMAL_RE.fullmatch(value) is not None


def is_hex_color(value: str) -> bool:
    return _HEX_COLOR_RE.fullmatch(value) is not None


def is_rgb_color(value: str) -> bool:
    return _RGB_COLOR_RE.fullmatch(value) is not None


def is_int(value: str) -> bool:
    return _INT_RE.fullmatch(value) is not None


def is_float(value: str) -> bool:
    return _FLOAT_RE.fullmatch(value) is not None


def is_uuid(value: str) -> bool:
    return _UUID_RE.fullmatch(value) is not None


def is_uuid_v3(value: str) -> bool:
    return _UUID3_RE.fullmatch(value) is not None


def is_uuid_v4(value: str) -> bool:
    return _UUID4_RE.fullmatch(value) is not None


def is_uuid_v5(value: str) -> bool:
    return _UUID5_RE.fullmatch(value) is not None


def _luhn_valid(digits: str) -> bool:
    total = 0
    for index, ch in enumerate(reversed(digits)):
        digit = int(ch)
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def is_credit_card(value: str) -> bool:
    digits = _NOT_DIGIT_RE.sub("", value)
    if _CREDIT_CARD_RE.fullmatch(digits) is None:
        return False
    return _luhn_valid(digits)


def is_isbn10(value: str) -> bool:
    sanitized = _ISBN_SEPARATOR_RE.sub("", value)
    if _ISBN10_RE.fullmatch(sanitized) is None:
        return False
    checksum = sum((index + 1) * int(sanitized[index]) for index in range(9))
    checksum += 10 * (10 if sanitized[9] == "X" else int(sanitized[9]))
    return checksum % 11 == 0


def is_isbn13(value: str) -> bool:
    sanitized = _ISBN_SEPARATOR_RE.sub("", value)
    if _ISBN13_RE.fullmatch(sanitized) is None:
        return False
    checksum = sum((1 if index % 2 == 0 else 3) * int(sanitized[index]) for index in range(12))
    return (10 - checksum % 10) % 10 == int(sanitized[12])


def is_isbn(value: str) -> bool:
    return is_isbn10(value) or is_isbn13(value)


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


def is_json(value: str) -> bool:
    try:
        json.loads(value, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return False
    return True


def is_ascii(value: str) -> bool:
    return _ASCII_RE.fullmatch(value) is not None


def is_printable_ascii(value: str) -> bool:
    return _PRINTABLE_ASCII_RE.fullmatch(value) is not None


def is_multibyte(value: str) -> bool:
    return _MULTIBYTE_RE.search(value) is not None


def is_full_width(value: str) -> bool:
    return _FULL_WIDTH_RE.search(value) is not None


def is_half_width(value: str) -> bool:
    return _HALF_WIDTH_RE.search(value) is not None


def is_variable_width(value: str) -> bool:
    return is_full_width(value) and is_half_width(value)


def is_base64(value: str) -> bool:
    if not value:
        return False
    try:
        base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        return False
    return True


def is_data_uri(value: str) -> bool:
    header, _, payload = value.partition(",")
    if _DATA_URI_HEADER_RE.fullmatch(header) is None:
        return False
    return is_base64(payload)


def is_country_code2(value: str) -> bool:
    return value in ALPHA2_CODES


def is_country_code3(value: str) -> bool:
    return value in ALPHA3_CODES


def is_ip(value: str) -> bool:
    # Scoped addresses (fe80::1%eth0) are not plain IPs.
    if "%" in value:
        return False
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def is_ipv4(value: str) -> bool:
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def is_ipv6(value: str) -> bool:
    if "%" in value:
        return False
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


def is_mac(value: str) -> bool:
    """EUI-48, EUI-64 or 20-octet IPoIB address in colon, dash or dotted form."""
    if len(value) < 14:
        return False
    if value[2] in ":-":
        groups = value.split(value[2])
        return len(groups) in _MAC_OCTET_COUNTS and all(
            _HEX_PAIR_RE.fullmatch(group) for group in groups
        )
    if value[4] == ".":
        groups = value.split(".")
        return len(groups) * 2 in _MAC_OCTET_COUNTS and all(
            _HEX_QUAD_RE.fullmatch(group) for group in groups
        )
    return False


def is_subdomain(value: str) -> bool:
    # Subdomain regex source: https://stackoverflow.com/a/7933253
    return _SUBDOMAIN_RE.fullmatch(value) is not None


def is_domain(value: str) -> bool:
    # The length cap is checked here because it cannot be expressed without lookarounds.
    if len(value) > _MAX_DOMAIN_LENGTH:
        return False
    return _DOMAIN_RE.fullmatch(value) is not None


def is_dns_name(value: str) -> bool:
    if len(value.replace(".", "")) > _MAX_DOMAIN_LENGTH:
        return False
    return not is_ip(value) and _DNS_NAME_RE.fullmatch(value) is not None


def is_host(value: str) -> bool:
    return is_ip(value) or is_dns_name(value)


def is_port(value: str) -> bool:
    if _PORT_RE.fullmatch(value) is None:
        return False
    return 0 < int(value) < 65536


def _split_host_port(value: str) -> tuple[str, str] | None:
    if value.startswith("["):
        end = value.find("]")
        if end < 0 or value[end + 1 : end + 2] != ":":
            return None
        host, port = value[1:end], value[end + 2 :]
    else:
        host, sep, port = value.rpartition(":")
        if not sep or ":" in host:
            return None
    if any(ch in "[]" for ch in host + port):
        return None
    return host, port


def is_dial_string(value: str) -> bool:
    """``host:port`` where host is a DNS name or IP and port is valid."""
    parts = _split_host_port(value)
    if parts is None:
        return False
    host, port = parts
    return bool(host) and bool(port) and (is_dns_name(host) or is_ip(host)) and is_port(port)


def is_mongo_id(value: str) -> bool:
    return len(value) == 24 and is_hexadecimal(value)


def is_latitude(value: str) -> bool:
    return _LATITUDE_RE.fullmatch(value) is not None


def is_longitude(value: str) -> bool:
    return _LONGITUDE_RE.fullmatch(value) is not None


def is_ssn(value: str) -> bool:
    return len(value) == 11 and _SSN_RE.fullmatch(value) is not None


def is_semver(value: str) -> bool:
    """Semantic version 2.0.0, optionally prefixed with ``v``."""
    if value.startswith("v"):
        value = value[1:]
    return semver.Version.is_valid(value)


__all__ = [
    "is_email",
    "is_url",
    "is_request_url",
    "is_request_uri",
    "is_alpha",
    "is_digit",
    "is_alphanumeric",
    "is_utf_letter",
    "is_utf_digit",
    "is_utf_letter_numeric",
    "is_utf_numeric",
    "is_lower_case",
    "is_upper_case",
    "is_hexadecimal",
    "is_hex_color",
    "is_rgb_color",
    "is_int",
    "is_float",
    "is_uuid",
    "is_uuid_v3",
    "is_uuid_v4",
    "is_uuid_v5",
    "is_credit_card",
    "is_isbn10",
    "is_isbn13",
    "is_isbn",
    "is_json",
    "is_ascii",
    "is_printable_ascii",
    "is_multibyte",
    "is_full_width",
    "is_half_width",
    "is_variable_width",
    "is_base64",
    "is_data_uri",
    "is_country_code2",
    "is_country_code3",
    "is_ip",
    "is_ipv4",
    "is_ipv6",
    "is_mac",
    "is_subdomain",
    "is_domain",
    "is_dns_name",
    "is_host",
    "is_port",
    "is_dial_string",
    "is_mongo_id",
    "is_latitude",
    "is_longitude",
    "is_ssn",
    "is_semver",
]
