import logging
from typing import Any

# Rendered in this order after the event name; anything missing is skipped.
LOG_EXTRA_FIELDS = (
    "status",
    "duration_ms",
    "error_type",
    "topic",
    "listeners",
    "model",
    "error_count",
    "user_id",
)
EXC_MSG_LIMIT = 200


class LogfmtFormatter(logging.Formatter):
    """
    logfmt lines for client call records, e.g.
    level=info logger=mizu_portal_api.client event=api_call call="GET groups" status=200
    Method and endpoint collapse into one `call` pair; a failure adds its
    exception type and (truncated) message.
    """

    def format(self, record: logging.LogRecord) -> str:
        kv: list[str] = [
            f"level={record.levelname.lower()}",
            f"logger={record.name}",
        ]

        msg = record.getMessage()
        if msg:
            kv.append(f"event={self._fmt_val(msg)}")

        call = self._call(record)
        if call:
            kv.append(f"call={self._fmt_val(call)}")

        for key in LOG_EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is None:
                continue
            kv.append(f"{key}={self._fmt_val(val)}")

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            kv.append(f"exc_type={type(exc).__name__}")
            exc_msg = str(exc)[:EXC_MSG_LIMIT]
            if exc_msg:
                kv.append(f"exc_msg={self._fmt_val(exc_msg)}")

        return " ".join(kv)

    @staticmethod
    def _call(record: logging.LogRecord) -> str:
        method = getattr(record, "method", None)
        endpoint = getattr(record, "endpoint", None)
        return " ".join(str(part) for part in (method, endpoint) if part)

    @staticmethod
    def _fmt_val(val: Any) -> str:
        if isinstance(val, (int, float, bool)):
            return str(val)
        s = str(val).replace("\n", "\\n")
        if " " in s or "=" in s or '"' in s:
            s = '"' + s.replace('"', '\\"') + '"'
        return s


def setup_logging(level: str = "INFO") -> None:
    """Initialize root logging with logfmt output for client call records."""

    root = logging.getLogger()
    # Avoid duplicate handlers if called twice
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(LogfmtFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS"]
