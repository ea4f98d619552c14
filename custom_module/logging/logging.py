import json
import logging
import logging.config
from logging.handlers import RotatingFileHandler
import os
import pathlib
import datetime as dt
from typing import Any


def setup_logging(level: str | None = None) -> None:
    """
    Configures logging
    If user defines 'logging_config.json' in the working directory
    than it is loaded as logging config, otherwise default
    custom_module logging is used. A given level overrides the
    level of the custom_module logger
    """
    user_config_file = pathlib.Path("logging_config.json")

    if user_config_file.is_file():
        config_file = user_config_file
    else:
        config_file = pathlib.Path(__file__).parent.resolve() / "config.json"
    with open(config_file) as f_in:
        config = json.load(f_in)
    logging.config.dictConfig(config)

    if level is not None:
        logging.getLogger("custom_module").setLevel(level.upper())


class CustomModuleJSONFormatter(logging.Formatter):
    """
    Custom JSON Formatter for generator runs
    Attributes:
        fmt_keys (dict): keys with values that will get logged

    Methods:
        format: Formats the records into a dict
        _prepare_log_dict: Prepares the actual log dict
    """

    def __init__(
        self,
        *,
        fmt_keys: dict[str, str] | None = None,
    ) -> None:
        super().__init__()
        self.fmt_keys = fmt_keys if fmt_keys is not None else {}

    def format(self, record: logging.LogRecord) -> str:
        message = self._prepare_log_dict(record)
        return json.dumps(message, default=str)

    def _prepare_log_dict(self, record: logging.LogRecord) -> dict:
        always_fields = {
            "message": record.getMessage(),
            "timestamp": dt.datetime.fromtimestamp(
                record.created, tz=dt.timezone.utc
            ).isoformat(),
        }

        if record.exc_info is not None:
            always_fields["exc_info"] = self.formatException(record.exc_info)

        if record.stack_info is not None:
            always_fields["stack_info"] = self.formatStack(record.stack_info)

        message = {
            key: msg_val
            if (msg_val := always_fields.pop(val, None)) is not None
            else getattr(record, val)
            for key, val in self.fmt_keys.items()
        }
        message.update(always_fields)
        return message


class RotatingFileHandlerWithDir(RotatingFileHandler):
    """
    RotatingFileHandler which creates the log directory
    if it does not exist already
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        log_file_path = kwargs.get("filename")
        if log_file_path:
            log_dir = os.path.dirname(log_file_path)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir)

        super().__init__(*args, **kwargs)
