import hashlib
import logging

logger = logging.getLogger(__name__)


class ContentFingerprinter:
    """
    Pure logic for creating deterministic fingerprints of resume text.
    """

    @staticmethod
    def calculate(text: str) -> str:
        """
        Create a deterministic hash of the exact input text.
        Formula: SHA256(utf8(text)), no normalization, so any byte difference
        yields a different fingerprint.
        """
        return hashlib.sha256(text.encode('utf-8')).hexdigest()

    @staticmethod
    def short(fingerprint: str, length: int = 16) -> str:
        """Abbreviated fingerprint for log lines."""
        return f"{fingerprint[:length]}..."


def format_bytes(num_bytes: int) -> str:
    """Render a byte count the way cache stats report memory usage."""
    size = float(num_bytes)
    for unit in ("B", "KB", "MB"):
        if size < 1024:
            return f"{size:.0f}{unit}" if unit == "B" else f"{size:.1f}{unit}"
        size /= 1024
    return f"{size:.1f}GB"


def format_duration(seconds: int) -> str:
    """Human readable TTL, e.g. 300 -> '5 minutes'."""
    if seconds >= 86400 and seconds % 86400 == 0:
        value, unit = seconds // 86400, "day"
    elif seconds >= 3600 and seconds % 3600 == 0:
        value, unit = seconds // 3600, "hour"
    elif seconds >= 60 and seconds % 60 == 0:
        value, unit = seconds // 60, "minute"
    else:
        value, unit = seconds, "second"
    return f"{value} {unit}{'' if value == 1 else 's'}"
