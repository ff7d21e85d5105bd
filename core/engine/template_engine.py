"""Template Engine: formats structured results into display text.

Each vertical registers its own renderer function; the engine dispatches
on the vertical name. A generic fallback handles any unregistered vertical.
Rounding for display happens here and nowhere upstream.
"""

from typing import Any, Callable, Dict


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def fmt_money(value: float | int | None, currency: str = "$") -> str:
    """Format a number as currency."""
    if value is None:
        return "N/A"
    return f"{currency}{value:,.2f}"


def fmt_pct(value: float | None) -> str:
    """Format a fraction (0.21) as a percentage."""
    if value is None:
        return "N/A"
    return f"{value * 100:.0f}%"


# ---------------------------------------------------------------------------
# Generic fallback renderer
# ---------------------------------------------------------------------------

def render_generic(result: Dict[str, Any]) -> str:
    """Render any dict as ``key=value`` pairs, floats to two decimals."""
    if "error" in result:
        return f"Error: {result['error']}"

    parts = []
    for key, value in result.items():
        if key.startswith("_"):
            continue
        if isinstance(value, float):
            parts.append(f"{key}={value:,.2f}")
        else:
            parts.append(f"{key}={value}")
    return ", ".join(parts)


# ---------------------------------------------------------------------------
# Renderer type and registry
# ---------------------------------------------------------------------------

VerticalRenderer = Callable[[Any], str]

_VERTICAL_RENDERERS: Dict[str, VerticalRenderer] = {}


def register_renderer(vertical: str, renderer: VerticalRenderer) -> None:
    """Register a vertical-specific renderer.

    Example::

        def render_billing(decision):
            ...

        register_renderer("billing", render_billing)
    """
    _VERTICAL_RENDERERS[vertical] = renderer


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class TemplateEngine:
    """Formats vertical results into human-readable text.

    Usage::

        text = TemplateEngine.render(decision, vertical="billing")
    """

    @staticmethod
    def render(result: Any, vertical: str) -> str:
        renderer = _VERTICAL_RENDERERS.get(vertical)
        if renderer is None:
            return render_generic(result if isinstance(result, dict) else vars(result))
        return renderer(result)

    @staticmethod
    def list_verticals() -> list[str]:
        """Return list of verticals with registered renderers."""
        return list(_VERTICAL_RENDERERS.keys())
