import logging
import re
import sys

# Attributes every LogRecord carries; anything else came in through `extra=`.
_RESERVED = set(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {
    "message",
    "asctime",
}

_BEARER_RE = re.compile(r"(Bearer\s+)[^\s,;\"']+", re.IGNORECASE)
_TOKEN_RE = re.compile(r"\b[0-9a-fA-F]{64}\b")
_SECRET_KEYS = ("token", "password", "password_hash", "authorization")

REDACTED = "[REDACTED]"


def redact(text: str) -> str:
    text = _BEARER_RE.sub(r"\1" + REDACTED, text)
    return _TOKEN_RE.sub(REDACTED, text)


class RedactSecretsFilter(logging.Filter):
    """
    Masks session tokens and bearer credentials before a record is emitted.

    The message is rendered once, scrubbed, and frozen back into ``record.msg``
    so handlers never see the raw arguments. Structured fields passed through
    ``extra=`` whose name looks secret are replaced wholesale.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = redact(record.getMessage())
        record.args = None
        for key, value in list(record.__dict__.items()):
            if key in _RESERVED:
                continue
            if key.lower() in _SECRET_KEYS:
                setattr(record, key, REDACTED)
            elif isinstance(value, str):
                setattr(record, key, redact(value))
        return True


class StructuredFormatter(logging.Formatter):
    """Appends `extra=` fields as key=value pairs after the message."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        fields = {
            k: v for k, v in record.__dict__.items() if k not in _RESERVED
        }
        if not fields:
            return base
        rendered = " ".join(f"{k}={v}" for k, v in sorted(fields.items()))
        return f"{base} | {rendered}"


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())
    for h in root.handlers:
        if getattr(h, "_foodtruck", False):
            return
    h = logging.StreamHandler(sys.stdout)
    h._foodtruck = True
    h.setFormatter(
        StructuredFormatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )
    h.addFilter(RedactSecretsFilter())
    root.addHandler(h)
