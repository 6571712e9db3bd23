class SchedulingError(Exception):
    """Base error for the scheduling service."""


class RestaurantNotFoundError(SchedulingError):
    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__("Restaurant not found")
