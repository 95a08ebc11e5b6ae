import logging
import logging.config
import re

from idscan.core.constants import AAMVA_ELEMENTS

_ELEMENT_TAGS = "|".join(sorted(AAMVA_ELEMENTS))

PII_PATTERNS = [
    re.compile(r"\b(" + _ELEMENT_TAGS + r")([A-Za-z0-9]\S*)"),
    re.compile(r"\b\d{4}-\d{2}-\d{2}\b"),
    re.compile(r"\b\d{8}\b"),
    re.compile(r"\b\d{5}-\d{4}\b"),
    re.compile(r"(?i)((?:payload|raw_text)\s*[=:]\s*)([^,\s]+)"),
]


class PIISafeFilter(logging.Filter):
    def _sanitize(self, value: object) -> object:
        if not isinstance(value, str):
            return value

        redacted = value
        for pattern in PII_PATTERNS:
            if pattern.groups:
                redacted = pattern.sub(r"\1[REDACTED]", redacted)
            else:
                redacted = pattern.sub("[REDACTED]", redacted)
        return redacted

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self._sanitize(record.msg)

        if isinstance(record.args, tuple):
            record.args = tuple(self._sanitize(item) for item in record.args)
        elif isinstance(record.args, dict):
            record.args = {key: self._sanitize(value) for key, value in record.args.items()}

        return True


def setup_logging() -> None:
    from idscan.core.settings import get_settings

    settings = get_settings()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "pii_safe": {
                    "()": "idscan.core.logging.PIISafeFilter",
                }
            },
            "formatters": {
                "default": {
                    "format": f"%(asctime)s %(levelname)s {settings.app_name} %(name)s %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "filters": ["pii_safe"],
                }
            },
            "loggers": {
                "": {
                    "handlers": ["console"],
                    "level": settings.log_level.upper(),
                },
            },
        }
    )
