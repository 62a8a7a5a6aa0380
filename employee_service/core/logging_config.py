import logging


def setup_logging(level: str = "INFO") -> None:
    """
    루트 로거 설정. 이미 핸들러가 붙어 있으면 (ASGI 서버, pytest 등) 건드리지 않음.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
