import logging
from datetime import datetime, timezone

from pythonjsonlogger import jsonlogger

from .config import get_log_level


class KBenchJSONFormatter(jsonlogger.JsonFormatter):
    """
    JSON log lines stamped with the record's own UTC time.

    Load context passed through ``extra`` (bench_file, services,
    containers) lands in the output as top-level keys.
    """

    def add_fields(self, log_record, record, message_dict):
        super(KBenchJSONFormatter, self).add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        log_record['level'] = record.levelname
        if log_record.get('bench_file') is not None:
            log_record['bench_file'] = str(log_record['bench_file'])


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    # One handler per logger, however often this is called
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = KBenchJSONFormatter('%(timestamp)s %(level)s %(name)s %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(get_log_level())
    return logger
