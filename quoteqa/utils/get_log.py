import logging
import os
from datetime import datetime
from logging import WARNING, FileHandler
from logging.handlers import TimedRotatingFileHandler

RULE_TRACE_FILENAME = "business_rule_trace.jsonl"


class GetLog:
    logger = None
    log_folder = None

    @classmethod
    def get_log(cls, level="info", shared_log_folder=None):
        """Get logger and initialize logging system.

        Args:
            level (str): Level of the main log file and console, default is info
            shared_log_folder (str): Log folder shared by every scenario of a suite run
        """
        if cls.logger is None:
            if shared_log_folder:
                cls.log_folder = shared_log_folder
            else:
                # One folder per run, named after its start time
                current_time = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
                cls.log_folder = os.path.join("./logs", current_time)
                os.environ["QUOTEQA_TIMESTAMP"] = current_time

            if not os.path.exists(cls.log_folder):
                os.makedirs(cls.log_folder)

            log_level = getattr(logging, str(level).upper(), logging.INFO)
            cls.logger = logging.getLogger()
            cls.logger.setLevel(log_level)

            fmt = "%(asctime)s %(levelname)s [%(name)s] [%(filename)s (%(funcName)s:%(lineno)d)] - %(message)s"
            fm = logging.Formatter(fmt)

            # Main log file, rotated at midnight
            th = TimedRotatingFileHandler(
                filename=os.path.join(cls.log_folder, "log.log"),
                when="midnight",
                interval=1,
                backupCount=3,
                encoding="utf-8",
            )
            th.setLevel(log_level)
            th.setFormatter(fm)
            cls.logger.addHandler(th)

            # Warnings and errors, including failed rule trace writes
            error_handler = FileHandler(filename=os.path.join(cls.log_folder, "error.log"), encoding="utf-8")
            error_handler.setLevel(WARNING)
            error_handler.setFormatter(fm)
            cls.logger.addHandler(error_handler)

            console_handler = logging.StreamHandler()
            console_handler.setLevel(log_level)
            console_handler.setFormatter(fm)
            cls.logger.addHandler(console_handler)

        return cls.logger

    @classmethod
    def rule_trace_path(cls, filename=RULE_TRACE_FILENAME):
        """Path of the rule trace file inside the current run folder."""
        if cls.log_folder is None:
            cls.get_log()
        return os.path.join(cls.log_folder, filename)
