pytest_plugins = ["mp_logger.testing.fixtures"]
