import logging
from typing import Any, Sequence, override


class EndpointFilter(logging.Filter):
    """Drops access-log records that mention any of the given paths."""

    def __init__(
        self,
        paths: Sequence[str],
        *args: Any,
        **kwargs: Any,
    ):
        super().__init__(*args, **kwargs)
        self._paths = tuple(paths)

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        return not any(message.find(path) != -1 for path in self._paths)
