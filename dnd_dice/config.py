# logging
LOG_LEVEL = "INFO"
DEBUG = False  # promotes INFO loggers to DEBUG
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# parser limits, keeps "99999999d99999999" from eating memory
MAX_DICE_COUNT = 10_000
MAX_DICE_SIDES = 1_000_000
