LOGGER_NAME = "grubdash"

ORDER_STATUSES = ("pending", "preparing", "out-for-delivery", "delivered")
STATUS_PENDING = "pending"
STATUS_DELIVERED = "delivered"

SERVER_ERROR_MESSAGE = "Something went wrong!"
