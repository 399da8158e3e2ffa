import os, sys, logging
from typing import Optional
from functools import partial

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False, log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        # handlers live on the shared named logger; attach them once
        if not self._logger.handlers:
            if logging_enabled:
                if log_file == '-':
                    handler = logging.StreamHandler(sys.stdout)
                else:
                    if log_file is None:
                        project_root = os.path.dirname(os.path.dirname(__file__))
                        os.makedirs(os.path.join(project_root, 'logs'), exist_ok=True)
                        log_file = os.path.join(project_root, 'logs', 'fluent_ansi.log')
                    handler = logging.FileHandler(log_file)
                handler.setFormatter(logging.Formatter(LOG_FORMAT))
                self._logger.addHandler(handler)
                self._logger.setLevel(logging.DEBUG)
            else:
                self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
