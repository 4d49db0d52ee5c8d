from .get_stream import get_stream, get_stream_policies
