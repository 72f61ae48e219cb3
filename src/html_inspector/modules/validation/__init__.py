from .spec import ValidationSpec, found_in

__all__ = ["ValidationSpec", "found_in"]
