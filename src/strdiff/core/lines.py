"""Line splitting for diff input"""


def split_lines(text: str) -> list[str]:
    """Drop trailing newlines and split on '\\n'. Always returns at least one line."""
    return text.rstrip("\n").split("\n")
