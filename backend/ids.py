from uuid import uuid4


def next_id() -> str:
    return uuid4().hex
