from webinar_backend.infrastructure.webinars.mappers.webinar_mapper import WebinarMapper

__all__ = ["WebinarMapper"]
