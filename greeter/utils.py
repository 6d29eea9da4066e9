from starlette.convertors import Convertor, register_url_convertor


class SegmentConvertor(Convertor):
    """Single path segment that, unlike ``str``, may be empty."""

    regex = "[^/]*"

    def convert(self, value: str) -> str:
        return value


def register_convertors() -> None:
    register_url_convertor("segment", SegmentConvertor())
