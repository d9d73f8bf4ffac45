"""
Commonly used string format rules.

Every constant is a ``StringRule``: empty strings and absent values pass, any
other string must satisfy the predicate or the rule returns its tag.
"""

from fieldcheck.rules.strings import StringRule, new_string_rule

from . import predicates as p

# EMAIL validates if a string is an email address
EMAIL = new_string_rule(p.is_email, "email")
# URL validates if a string is a valid URL
URL = new_string_rule(p.is_url, "url")
# REQUEST_URL validates if a string is a valid request URL (scheme required)
REQUEST_URL = new_string_rule(p.is_request_url, "request_url")
# REQUEST_URI validates if a string is a valid request URI
REQUEST_URI = new_string_rule(p.is_request_uri, "request_uri")
# ALPHA validates if a string contains English letters only (a-zA-Z)
ALPHA = new_string_rule(p.is_alpha, "alpha")
# DIGIT validates if a string contains digits only (0-9)
DIGIT = new_string_rule(p.is_digit, "digits")
# ALPHANUMERIC validates if a string contains English letters and digits only (a-zA-Z0-9)
ALPHANUMERIC = new_string_rule(p.is_alphanumeric, "alphanumeric")
# UTF_LETTER validates if a string contains unicode letters only
UTF_LETTER = new_string_rule(p.is_utf_letter, "utf_alpha")
# UTF_DIGIT validates if a string contains unicode decimal digits only
UTF_DIGIT = new_string_rule(p.is_utf_digit, "utf_digits")
# UTF_LETTER_NUMERIC validates if a string contains unicode letters and numbers only
UTF_LETTER_NUMERIC = new_string_rule(p.is_utf_letter_numeric, "utf_alphanumeric")
# UTF_NUMERIC validates if a string contains unicode number characters (category N) only
UTF_NUMERIC = new_string_rule(p.is_utf_numeric, "utf_numeric")
# LOWER_CASE validates if a string contains lower case unicode letters only
LOWER_CASE = new_string_rule(p.is_lower_case, "lowercase")
# UPPER_CASE validates if a string contains upper case unicode letters only
UPPER_CASE = new_string_rule(p.is_upper_case, "uppercase")
# HEXADECIMAL validates if a string is a valid hexadecimal number
HEXADECIMAL = new_string_rule(p.is_hexadecimal, "hex")
# HEX_COLOR validates if a string is a valid hexadecimal color code
HEX_COLOR = new_string_rule(p.is_hex_color, "hex_color")
# RGB_COLOR validates if a string is a valid RGB color in the form of rgb(R, G, B)
RGB_COLOR = new_string_rule(p.is_rgb_color, "rgb_color")
# INT validates if a string is a valid integer number
INT = new_string_rule(p.is_int, "number_integer")
# FLOAT validates if a string is a floating point number
FLOAT = new_string_rule(p.is_float, "number_float")
# UUID_V3 validates if a string is a valid version 3 UUID
UUID_V3 = new_string_rule(p.is_uuid_v3, "uuid3")
# UUID_V4 validates if a string is a valid version 4 UUID
UUID_V4 = new_string_rule(p.is_uuid_v4, "uuid4")
# UUID_V5 validates if a string is a valid version 5 UUID
UUID_V5 = new_string_rule(p.is_uuid_v5, "uuid5")
# UUID validates if a string is a valid UUID
UUID = new_string_rule(p.is_uuid, "uuid")
# CREDIT_CARD validates if a string is a valid credit card number
CREDIT_CARD = new_string_rule(p.is_credit_card, "credit_card")
# ISBN10 validates if a string is an ISBN version 10
ISBN10 = new_string_rule(p.is_isbn10, "isbn10")
# ISBN13 validates if a string is an ISBN version 13
ISBN13 = new_string_rule(p.is_isbn13, "isbn13")
# ISBN validates if a string is an ISBN (either version 10 or 13)
ISBN = new_string_rule(p.is_isbn, "isbn")
# JSON validates if a string is in valid JSON format
JSON = new_string_rule(p.is_json, "json")
# ASCII validates if a string contains ASCII characters only
ASCII = new_string_rule(p.is_ascii, "ascii_chars")
# PRINTABLE_ASCII validates if a string contains printable ASCII characters only
PRINTABLE_ASCII = new_string_rule(p.is_printable_ascii, "ascii_chars_print")
# MULTIBYTE validates if a string contains multibyte characters
MULTIBYTE = new_string_rule(p.is_multibyte, "multibyte_chars")
# FULL_WIDTH validates if a string contains full-width characters
FULL_WIDTH = new_string_rule(p.is_full_width, "full_width_chars")
# HALF_WIDTH validates if a string contains half-width characters
HALF_WIDTH = new_string_rule(p.is_half_width, "half_width_chars")
# VARIABLE_WIDTH validates if a string contains both full-width and half-width characters
VARIABLE_WIDTH = new_string_rule(p.is_variable_width, "both_width_chars")
# BASE64 validates if a string is encoded in Base64
BASE64 = new_string_rule(p.is_base64, "base64")
# DATA_URI validates if a string is a valid base64-encoded data URI
DATA_URI = new_string_rule(p.is_data_uri, "base64_uri")
# COUNTRY_CODE2 validates if a string is a valid ISO3166 Alpha 2 country code
COUNTRY_CODE2 = new_string_rule(p.is_country_code2, "country_code2")
# COUNTRY_CODE3 validates if a string is a valid ISO3166 Alpha 3 country code
COUNTRY_CODE3 = new_string_rule(p.is_country_code3, "country_code3")
# DIAL_STRING validates if a string is a valid "host:port" dial string
DIAL_STRING = new_string_rule(p.is_dial_string, "dial")
# MAC validates if a string is a MAC address
MAC = new_string_rule(p.is_mac, "mac")
# IP validates if a string is a valid IP address (either version 4 or 6)
IP = new_string_rule(p.is_ip, "ip")
# IPV4 validates if a string is a valid version 4 IP address
IPV4 = new_string_rule(p.is_ipv4, "ipv4")
# IPV6 validates if a string is a valid version 6 IP address
IPV6 = new_string_rule(p.is_ipv6, "ipv6")
# SUBDOMAIN validates if a string is a valid subdomain label
SUBDOMAIN = new_string_rule(p.is_subdomain, "subdomain")
# DOMAIN validates if a string is a valid domain
DOMAIN = new_string_rule(p.is_domain, "domain")
# DNS_NAME validates if a string is a valid DNS name
DNS_NAME = new_string_rule(p.is_dns_name, "dns")
# HOST validates if a string is a valid IP (both v4 and v6) or a valid DNS name
HOST = new_string_rule(p.is_host, "ip_or_dns")
# PORT validates if a string is a valid port number
PORT = new_string_rule(p.is_port, "port")
# MONGO_ID validates if a string is a valid Mongo ID
MONGO_ID = new_string_rule(p.is_mongo_id, "mongodb_object_id")
# LATITUDE validates if a string is a valid latitude
LATITUDE = new_string_rule(p.is_latitude, "latitude")
# LONGITUDE validates if a string is a valid longitude
LONGITUDE = new_string_rule(p.is_longitude, "longitude")
# SSN validates if a string is a social security number (SSN)
SSN = new_string_rule(p.is_ssn, "ssn")
# SEMVER validates if a string is a valid semantic version
SEMVER = new_string_rule(p.is_semver, "semver")


CATALOG: dict[str, StringRule] = {
    name: rule for name, rule in list(globals().items()) if isinstance(rule, StringRule)
}

__all__ = sorted(CATALOG) + ["CATALOG"]
