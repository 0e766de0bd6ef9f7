# handview/client/ui.py

from typing import TextIO


def wait_for_turn(stream: TextIO) -> bool:
    """
    Block until one line arrives. The content is ignored.
    Returns False on end of input.
    """
    return stream.readline() != ""
