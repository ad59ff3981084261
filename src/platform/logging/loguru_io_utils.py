from inspect import FullArgSpec, getfile, getfullargspec, getsourcelines
from os.path import basename
import re
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    MASK,
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MAX_CONTENT_LENGTH = 500

# key='value' / "key": "value" / key=value pairs inside repr() output
_SENSITIVE_PATTERN = re.compile(
    r"""(['"]?(?:%s)['"]?\s*[:=]\s*)(['"])?([^,'")}\]]+)(['"])?"""
    % '|'.join(sorted(SENSITIVE_KEYWORDS, key=len, reverse=True)),
)


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    try:
        lineno = getsourcelines(func)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(getattr(func, "__func__", func)))}::{func.__qualname__}:{lineno}'


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def normalize_args_kwargs(
    func: Callable[..., Any], *args: Any, **kwargs: Any
) -> tuple[tuple[Any, ...], dict[Any, Any]]:
    """Drop kwargs the wrapped function does not accept (FastAPI passes extras)."""
    if hasattr(func, '__wrapped__'):
        func = func.__wrapped__  # type: ignore
    full_arg_spec: FullArgSpec = getfullargspec(func)

    if not full_arg_spec.varkw:
        accepted = set(full_arg_spec.args) | set(full_arg_spec.kwonlyargs)
        kwargs = {k: v for k, v in kwargs.items() if k in accepted}

    return args, kwargs


def mask_sensitive(data: Any) -> Any:
    data_str = str(data)
    masked = _SENSITIVE_PATTERN.sub(
        lambda m: f'{m.group(1)}{m.group(2) or ""}{MASK}{m.group(4) or ""}', data_str
    )
    return data if masked == data_str else masked


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return MASK if keyword in SENSITIVE_KEYWORDS else value


def truncate_content(data: Any, max_length: int = MAX_CONTENT_LENGTH) -> Any:
    data_str = str(data)
    if len(data_str) <= max_length:
        return data
    return f'{data_str[:max_length]}... <{len(data_str) - max_length} more chars>'
