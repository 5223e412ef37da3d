"""
    Copyright 2018 EPAM Systems, Inc.

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.
"""
import logging
import logging.config
import os
from datetime import date
from pathlib import Path
from logging import DEBUG, INFO, WARNING, ERROR, CRITICAL

LOG_NAME = 'blueprints'
USER_LOG_NAME = f'user-{LOG_NAME}'

DEBUG_ENV = 'BLUEPRINTS_DEBUG'
LOGS_FOLDER_ENV = 'BLUEPRINTS_LOGS'
CONF_FOLDER_ENV = 'BLUEPRINTS_CONF'

LOGS_FOLDER_NAME = '.blueprints_logs'
LOG_FILE_NAME = '%Y-%m-%d-blueprints.log'

FILE_HANDLER = 'file_handler'
CONSOLE_HANDLER = 'console_handler'

FILE_FORMAT = '%(asctime)s [%(levelname)s] %(name)s:%(lineno)d %(message)s'
CONSOLE_FORMAT = '[%(levelname)s] %(message)s'


class ConsoleLogFormatter(logging.Formatter):
    """Colors console records by their level, leaving INFO untouched"""

    COLORS = {
        DEBUG: '\x1b[0;37m',
        WARNING: '\x1b[0;33m',
        ERROR: '\x1b[0;31m',
        CRITICAL: '\x1b[0;31m'
    }
    RESET = '\x1b[0m'

    def __init__(self):
        super().__init__(CONSOLE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.COLORS.get(record.levelno)
        return f'{color}{message}{self.RESET}' if color else message


def resolve_log_level() -> int:
    return DEBUG if os.environ.get(DEBUG_ENV, '').lower() == 'true' else INFO


def resolve_logs_folder() -> str:
    """
    The logs live next to the configuration, given BLUEPRINTS_CONF is set,
    otherwise in BLUEPRINTS_LOGS or the home folder.
    """
    conf_folder = os.environ.get(CONF_FOLDER_ENV)
    if conf_folder:
        return os.path.join(conf_folder, 'logs')
    root = os.environ.get(LOGS_FOLDER_ENV) or Path.home()
    return os.path.join(root, LOGS_FOLDER_NAME)


def configure_logging(level=None):
    """
    Attaches the file handler to both loggers and the colored console
    handler to the user logger, also to the main one in DEBUG mode.
    Until invoked, records of the package only reach the root logger.
    :param level: logging level, resolved out of BLUEPRINTS_DEBUG by default
    :type level: int
    """
    level = level or resolve_log_level()
    logs_folder = resolve_logs_folder()
    os.makedirs(logs_folder, exist_ok=True)

    main_handlers = [FILE_HANDLER]
    if level == DEBUG:
        main_handlers.append(CONSOLE_HANDLER)

    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'file_formatter': {'format': FILE_FORMAT},
            'console_formatter': {'()': ConsoleLogFormatter}
        },
        'handlers': {
            FILE_HANDLER: {
                'class': 'logging.FileHandler',
                'formatter': 'file_formatter',
                'filename': os.path.join(
                    logs_folder, date.today().strftime(LOG_FILE_NAME)),
                'delay': True
            },
            CONSOLE_HANDLER: {
                'class': 'logging.StreamHandler',
                'formatter': 'console_formatter',
                'stream': 'ext://sys.stdout'
            }
        },
        'loggers': {
            USER_LOG_NAME: {
                'level': level,
                'handlers': [CONSOLE_HANDLER, FILE_HANDLER],
                'propagate': False
            },
            LOG_NAME: {
                'level': level,
                'handlers': main_handlers,
                'propagate': False
            }
        }
    })
    logging.captureWarnings(True)


def get_logger(log_name: str) -> logging.Logger:
    """
    Returns a logger nested under the `blueprints` one.
    :type log_name: str
    """
    if log_name != LOG_NAME and not log_name.startswith(f'{LOG_NAME}.'):
        log_name = f'{LOG_NAME}.{log_name}'
    return logging.getLogger(log_name)


def get_user_logger() -> logging.Logger:
    return logging.getLogger(USER_LOG_NAME)
