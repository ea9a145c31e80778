LOGGER_NAME = "giftboard"
