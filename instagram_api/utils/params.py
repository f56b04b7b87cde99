"""Query-string and path helpers for Instagram requests."""

from collections.abc import Mapping
from urllib.parse import quote

Scalar = str | int | float | bool


def render_scalar(value: Scalar) -> str:
    """Natural string form of a query value (``true``/``false`` for booleans)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise TypeError(f"unsupported query parameter type: {type(value).__name__}")


def encode_parameters(parameters: Mapping[str, Scalar]) -> str:
    """Encode ``parameters`` as ``name=value`` pairs joined by ``&``.

    Insertion order is kept as-is (no sorting). Names and values are
    percent-encoded with no safe characters, so ``&``, ``=``, ``/`` and
    non-ASCII text can never split or corrupt the query.
    """
    return "&".join(
        f"{quote(str(name), safe='')}={quote(render_scalar(value), safe='')}"
        for name, value in parameters.items()
    )


def build_parameters(**named: Scalar | None) -> dict[str, Scalar]:
    """Keep only the inputs that were actually given."""
    return {name: value for name, value in named.items() if value is not None}


def quote_path_segment(value: str | int) -> str:
    return quote(str(value), safe="")
