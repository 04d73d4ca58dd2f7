from crazylambdas.logger.logger import PackageHandler, logger, setup_logger

__all__ = ["logger", "setup_logger", "PackageHandler"]
