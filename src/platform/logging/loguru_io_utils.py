from inspect import FullArgSpec, getfile, getfullargspec, getsourcelines
from os.path import basename
import re
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    MAX_CONTENT_LENGTH,
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


_SENSITIVE_PATTERN = re.compile(
    r"(\b(?:%s)\b)(\s*[=:]\s*)('[^']*'|\"[^\"]*\")" % '|'.join(sorted(SENSITIVE_KEYWORDS))
)


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    try:
        lineno = getsourcelines(func)[1]
        filename = basename(getfile(getattr(func, '__func__', func)))
    except (OSError, TypeError):
        return func.__qualname__
    return f'{filename}::{func.__qualname__}:{lineno}'


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def normalize_args_kwargs(
    func: Callable[..., Any], *args: Any, **kwargs: Any
) -> tuple[tuple[Any, ...], dict[Any, Any]]:
    """Drop keyword arguments the wrapped function does not accept."""
    if hasattr(func, '__wrapped__'):
        func = func.__wrapped__  # type: ignore
    full_arg_spec: FullArgSpec = getfullargspec(func)

    if not full_arg_spec.varkw:
        kw_list: list[str] = full_arg_spec.args + full_arg_spec.kwonlyargs
        kwargs = {k: v for k, v in kwargs.items() if k in kw_list}

    return args, kwargs


def mask_sensitive(data: Any) -> Any:
    try:
        data_str = str(data)
        masked = _SENSITIVE_PATTERN.sub(r"\1\2'********'", data_str)
        return data if masked == data_str else masked
    except Exception:
        return data


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return '********' if keyword in SENSITIVE_KEYWORDS else value


def truncate_content(data: Any, max_length: int = MAX_CONTENT_LENGTH) -> Any:
    data_str = str(data)
    if len(data_str) <= max_length:
        return data
    return f'{data_str[:max_length]}... ({len(data_str)} chars)'
