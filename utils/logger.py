import logging
import logging.config

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'

_configured = False


def configure_logging(level='INFO'):
    """Send every record to stdout. Later calls only change the root level."""
    global _configured
    if _configured:
        logging.getLogger().setLevel(level)
        return
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'board': {'format': LOG_FORMAT, 'datefmt': '%Y-%m-%d %H:%M:%S'},
        },
        'handlers': {
            'stdout': {
                'class': 'logging.StreamHandler',
                'stream': 'ext://sys.stdout',
                'formatter': 'board',
            },
        },
        'root': {'level': level, 'handlers': ['stdout']},
    })
    _configured = True


def get_logger(name):
    if not _configured:
        configure_logging()
    return logging.getLogger(name)
