from webinar_backend.application.webinars.use_cases.change_seats_use_case import (
    ChangeSeatsUseCase,
)

__all__ = ["ChangeSeatsUseCase"]
