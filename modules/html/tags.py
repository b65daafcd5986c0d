"""
HTML tag helpers - no external dependencies.
"""

__all__ = ["link"]

from html import escape


def link(
    url: str,
    text: str,
    target: str = "_blank",
    rel: str = "noopener noreferrer",
) -> str:
    """
    Generate an HTML anchor tag opening in a new tab.

    Example:
        >>> link("https://example.com/?a=1&b=2", "Docs")
        '<a href="https://example.com/?a=1&amp;b=2" target="_blank" rel="noopener noreferrer">Docs</a>'
    """
    return (
        f'<a href="{escape(url)}" target="{target}" rel="{rel}">{escape(text)}</a>'
    )
