import argparse
import logging


class Log:
    LEVELS = {
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warning': logging.WARNING,
        'error': logging.ERROR,
    }

    FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

    logger = logging.getLogger('pnmexport')

    @staticmethod
    def add_args(parser: argparse.ArgumentParser):
        parser.add_argument('--log-level', default='info', choices=list(Log.LEVELS.keys()), help='Logging level')
        parser.add_argument('--log-file', type=str, default=None, help='Optional file to write the log to')

    @staticmethod
    def setup(args):
        handler = logging.FileHandler(args.log_file) if args.log_file else logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Log.FORMAT))

        # Re-running setup (e.g. several CLI invocations in one process) must not stack handlers
        for existing in list(Log.logger.handlers):
            Log.logger.removeHandler(existing)
            existing.close()

        Log.logger.addHandler(handler)
        Log.logger.setLevel(Log.LEVELS[args.log_level])

    @staticmethod
    def debug(message: str):
        Log.logger.debug(message)

    @staticmethod
    def info(message: str):
        Log.logger.info(message)

    @staticmethod
    def warning(message: str):
        Log.logger.warning(message)

    @staticmethod
    def error(message: str):
        Log.logger.error(message)
