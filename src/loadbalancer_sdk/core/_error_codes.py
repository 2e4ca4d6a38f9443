# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

# HTTP subcode constants
HTTP_400 = "http_400"
HTTP_401 = "http_401"
HTTP_403 = "http_403"
HTTP_404 = "http_404"
HTTP_409 = "http_409"
HTTP_412 = "http_412"
HTTP_429 = "http_429"
HTTP_500 = "http_500"
HTTP_502 = "http_502"
HTTP_503 = "http_503"
HTTP_504 = "http_504"

_HTTP_STATUS_TO_SUBCODE = {
    400: HTTP_400,
    401: HTTP_401,
    403: HTTP_403,
    404: HTTP_404,
    409: HTTP_409,
    412: HTTP_412,
    429: HTTP_429,
    500: HTTP_500,
    502: HTTP_502,
    503: HTTP_503,
    504: HTTP_504,
}

TRANSIENT_STATUS = {429, 502, 503, 504}

# Encoding subcodes
ENCODING_NOT_OPTIONS = "encoding_not_options"
ENCODING_UNSUPPORTED_TYPE = "encoding_unsupported_type"
ENCODING_MISSING_INPUT = "encoding_missing_input"

# Transport subcodes
TRANSPORT_TIMEOUT = "transport_timeout"
TRANSPORT_CONNECTION = "transport_connection"
TRANSPORT_ERROR = "transport_error"
TRANSPORT_AUTH = "transport_auth"
TRANSPORT_CANCELLED = "transport_cancelled"

# Decode subcodes
DECODE_INVALID_JSON = "decode_invalid_json"
DECODE_MISSING_KEY = "decode_missing_key"
DECODE_SHAPE_MISMATCH = "decode_shape_mismatch"
DECODE_LINK_MALFORMED = "decode_link_malformed"


def _http_subcode(status: int) -> str:
    return _HTTP_STATUS_TO_SUBCODE.get(status, f"http_{status}")


def _is_transient_status(status: int) -> bool:
    return status in TRANSIENT_STATUS
