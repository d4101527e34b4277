# wordscramble/core/logging_utils.py
import logging
import logging.config
import json
import pathlib
import datetime as dt
from typing import Dict, Any, Optional, Set

# Attributes every LogRecord carries; anything else on the record came from `extra=`
LOG_RECORD_BUILTIN_ATTRS: Set[str] = {
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module", "msecs",
    "message", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "thread", "threadName", "taskName",
}

FALLBACK_FORMAT = "%(levelname)-8s [%(name)s] %(message)s"


class JSONLogFormatter(logging.Formatter):
    """
    Renders each record as a single JSON object.

    `fmt_keys` maps output keys to LogRecord attribute names, e.g.
    {"level": "levelname", "logger": "name"}. The message and a UTC ISO-8601
    timestamp are always present, as are any fields passed via `extra=`.
    """

    def __init__(self, *, fmt_keys: Optional[Dict[str, str]] = None, datefmt: Optional[str] = None):
        super().__init__(datefmt=datefmt)
        self.fmt_keys = fmt_keys if fmt_keys is not None else {}

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self._to_dict(record), default=str)

    def _timestamp(self, record: logging.LogRecord) -> str:
        if self.datefmt:
            return self.formatTime(record, self.datefmt)
        return dt.datetime.fromtimestamp(record.created, tz=dt.timezone.utc).isoformat()

    def _to_dict(self, record: logging.LogRecord) -> Dict[str, Any]:
        computed = {
            "message": record.getMessage(),
            "timestamp": self._timestamp(record),
        }
        if record.exc_info:
            computed["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            computed["stack_info"] = self.formatStack(record.stack_info)

        out: Dict[str, Any] = {}
        for out_key, attr in self.fmt_keys.items():
            if attr in computed:
                out[out_key] = computed.pop(attr)
            else:
                val = getattr(record, attr, None)
                if val is not None:
                    out[out_key] = val

        # message/timestamp/exc_info not claimed by fmt_keys keep their own names
        for key, val in computed.items():
            out.setdefault(key, val)

        mapped_attrs = set(self.fmt_keys.values())
        for key, val in record.__dict__.items():
            if key not in LOG_RECORD_BUILTIN_ATTRS and key not in mapped_attrs and key not in out:
                out[key] = val
        return out


def configure_logging(config_file: Optional[pathlib.Path] = None, level: Optional[str] = None) -> None:
    """
    Applies a dictConfig from a JSON file. Falls back to basicConfig on stderr
    if the file is missing or unreadable, so the game still starts.
    """
    from wordscramble.core.config import settings

    config_file = pathlib.Path(config_file or settings.LOG_CONFIG_FILE)
    level = (level or settings.LOG_LEVEL).upper()
    try:
        with open(config_file, encoding="utf-8") as f_in:
            config = json.load(f_in)

        for handler in config.get("handlers", {}).values():
            filename = handler.get("filename")
            if filename:
                pathlib.Path(filename).parent.mkdir(parents=True, exist_ok=True)

        logging.config.dictConfig(config)
        logging.getLogger("wordscramble").setLevel(level)
    except FileNotFoundError:
        logging.basicConfig(level=level, format=FALLBACK_FORMAT)
        logging.getLogger("wordscramble.core.logging_setup_fallback").error(
            f"Logging configuration file not found at {config_file}. Using basic stderr logging."
        )
    except json.JSONDecodeError as e:
        logging.basicConfig(level=level, format=FALLBACK_FORMAT)
        logging.getLogger("wordscramble.core.logging_setup_fallback").error(
            f"Failed to parse logging configuration file {config_file}: {e}. Using basic stderr logging."
        )
    except (ValueError, TypeError, AttributeError, ImportError) as e:
        # dictConfig rejects malformed handler/formatter definitions with these
        logging.basicConfig(level=level, format=FALLBACK_FORMAT)
        logging.getLogger("wordscramble.core.logging_setup_fallback").error(
            f"Invalid logging configuration in {config_file}: {e}. Using basic stderr logging.",
            exc_info=True,
        )
