class NotIterableError(TypeError): ...


class NotCallableError(TypeError): ...


def check_callable(obj: object) -> None:
    if not callable(obj):
        msg = f"{obj!r} is not callable"
        raise NotCallableError(msg)
