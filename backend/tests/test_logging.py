import logging

from foodtruck.logging_config import REDACTED, RedactSecretsFilter, StructuredFormatter

TOKEN = "ab" * 32


def _record(msg, *args, **extra):
    rec = logging.LogRecord("foodtruck.test", logging.INFO, __file__, 1, msg, args, None)
    for k, v in extra.items():
        setattr(rec, k, v)
    return rec


def test_session_tokens_are_masked():
    rec = _record("lookup for %s failed", TOKEN)
    RedactSecretsFilter().filter(rec)
    assert TOKEN not in rec.getMessage()
    assert REDACTED in rec.getMessage()


def test_bearer_header_is_masked():
    rec = _record("header was Bearer abc.def.ghi")
    RedactSecretsFilter().filter(rec)
    assert rec.getMessage() == f"header was Bearer {REDACTED}"


def test_secret_extra_fields_are_masked_and_rendered():
    rec = _record("login", token="whatever", user_id=7)
    RedactSecretsFilter().filter(rec)
    line = StructuredFormatter("%(message)s").format(rec)
    assert line == f"login | token={REDACTED} user_id=7"
