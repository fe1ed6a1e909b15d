from typing import Any

import orjson


def json_dumps(value: Any, *, indent: bool = False) -> str:
    """
    >>> json_dumps({"id": 1, "name": "Ethereum"})
    '{"id":1,"name":"Ethereum"}'
    """
    # On bytes/str dumps output:
    # https://github.com/ijl/orjson/issues/66
    option = orjson.OPT_INDENT_2 if indent else None
    return orjson.dumps(value, option=option).decode()
